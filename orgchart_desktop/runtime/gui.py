from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from orgchart_desktop.runtime.bridge import DesktopBridge
from orgchart_desktop.runtime.schema import DesktopSettings

logger = logging.getLogger(__name__)


def resolve_frontend_url(url: str) -> Optional[str]:
    """Return a loadable URL, or None when a local entry file is missing."""
    if url.startswith(("http://", "https://", "file://")):
        return url
    entry = Path(url).expanduser().resolve()
    if not entry.is_file():
        logger.error("Front end entry not found at %s", entry)
        return None
    return str(entry)


def _open_in_browser(url: str) -> None:
    import webbrowser

    target = url if "://" in url else Path(url).as_uri()
    webbrowser.open(target)
    print("\n" + "=" * 60)
    print("  OrgChart is running in browser mode")
    print(f"  Open in browser: {target}")
    print("  Native export dialogs are unavailable in this mode.")
    print("=" * 60)


def run_desktop_mode(settings: DesktopSettings) -> int:
    """Open the front end in a native webview window."""
    import webview

    url = resolve_frontend_url(settings.url)
    if url is None:
        return 1

    bridge = DesktopBridge()
    try:
        logger.info("Opening webview window for %s", url)
        window = webview.create_window(
            settings.title,
            url,
            js_api=bridge,
            width=settings.width,
            height=settings.height,
            resizable=True,
            min_size=settings.min_size,
        )
        webview.start(bridge._bind_window, (window,), gui=settings.gui, debug=settings.debug)
        logger.info("Window closed, exiting")
    except Exception:
        logger.exception("WebView failed; falling back to browser")
        _open_in_browser(url)
    return 0


def run_web_mode(settings: DesktopSettings) -> int:
    """Open the front end in the system browser without a native window."""
    url = resolve_frontend_url(settings.url)
    if url is None:
        return 1
    _open_in_browser(url)
    return 0
