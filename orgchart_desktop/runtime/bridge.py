from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from orgchart_desktop.runtime.desktop_export import DIALOG_STAGE, ExportWriter
from orgchart_desktop.runtime.dialog import WebviewFileDialog
from orgchart_desktop.runtime.errors import ExportCancelledError, ExportError
from orgchart_desktop.runtime.schema import ExportResult

logger = logging.getLogger(__name__)


class DesktopBridge:
    """
    Object exposed to the page as ``window.pywebview.api``.

    Public methods are callable from JavaScript; the startup hook stays private
    so the page cannot rebind the dialog. Every failure is returned as
    a value so the page can show the message; nothing raises across the bridge.
    """

    def __init__(self, writer: Optional[ExportWriter] = None) -> None:
        # Underscore keeps pywebview from exposing the writer to the page.
        self._writer = writer or ExportWriter()

    def _bind_window(self, window: Any) -> None:
        """Startup hook: attach the native dialog of ``window``."""
        if self._writer.ready:
            logger.warning("Desktop bridge already bound; ignoring window %r", window)
            return
        self._writer.dialog = WebviewFileDialog(window)
        logger.debug("Desktop bridge bound to window %r", window)

    def greet(self, name: str) -> str:
        return f"Hello {name}, It's show time!"

    def save_export_file(self, default_filename: str, extension: str, data_url: str) -> Dict[str, Any]:
        logger.debug("Export requested filename=%s extension=%s", default_filename, extension)
        try:
            path = self._writer.save_export(default_filename, extension, data_url)
        except ExportCancelledError as exc:
            logger.info("Export cancelled by user")
            result = ExportResult(saved=False, reason=exc.code, error=str(exc))
        except ExportError as exc:
            logger.warning("Export failed: %s", exc)
            result = ExportResult(saved=False, reason=exc.code, error=str(exc))
        except Exception as exc:
            if getattr(exc, "export_stage", None) == DIALOG_STAGE:
                logger.exception("Save dialog failed")
                reason = "dialog_error"
            else:
                logger.exception("Export failed")
                reason = ExportError.code
            result = ExportResult(saved=False, reason=reason, error=str(exc))
        else:
            result = ExportResult(saved=True, path=path)
        return result.model_dump()
