from __future__ import annotations

import re
from typing import Any, Protocol, Tuple

from orgchart_desktop.runtime.schema import SaveDialogOptions

ALL_FILES_TYPE = "All files (*.*)"
# pywebview only accepts "Name (*.ext)" with word characters in the name and extension.
_WEBVIEW_FILE_TYPE = re.compile(r"^[\w ]+ \(\*\.\w+\)$")


class FileDialogProvider(Protocol):
    """Native "save file" prompt. Returns an empty string when dismissed."""

    def save_file(self, options: SaveDialogOptions) -> str:
        ...


def webview_file_types(options: SaveDialogOptions) -> Tuple[str, ...]:
    """Render filters for pywebview; ones it cannot parse become "All files"."""
    file_types = []
    for file_filter in options.filters:
        rendered = file_filter.as_webview_file_type()
        if not _WEBVIEW_FILE_TYPE.match(rendered):
            rendered = ALL_FILES_TYPE
        if rendered not in file_types:
            file_types.append(rendered)
    return tuple(file_types)


class WebviewFileDialog:
    """Save dialog backed by a pywebview window."""

    def __init__(self, window: Any) -> None:
        self.window = window

    def save_file(self, options: SaveDialogOptions) -> str:
        import webview

        # pywebview dialogs always allow creating folders; the flag has no knob there.
        save_dialog = getattr(webview, "SAVE_DIALOG", 1)
        path = self.window.create_file_dialog(
            save_dialog,
            save_filename=options.default_filename,
            file_types=webview_file_types(options),
        )
        if not path:
            return ""

        selected = path[0] if isinstance(path, (list, tuple)) else path
        return str(selected) if selected else ""
