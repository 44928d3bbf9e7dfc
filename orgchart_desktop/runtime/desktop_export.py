from __future__ import annotations

import logging
import os
from typing import Optional

from orgchart_desktop.runtime.dialog import FileDialogProvider
from orgchart_desktop.runtime.errors import (
    ContextNotReadyError,
    ExportCancelledError,
    WriteFailedError,
)
from orgchart_desktop.runtime.payload import decode_export_payload
from orgchart_desktop.runtime.schema import FileFilter, SaveDialogOptions

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = "dat"
EXPORT_FILE_MODE = 0o644
DIALOG_STAGE = "dialog"


def normalize_extension(extension: str) -> str:
    ext = (extension or "").strip().lower()
    if ext.startswith("."):
        ext = ext[1:]
    return ext or DEFAULT_EXTENSION


def build_save_options(default_filename: str, extension: str) -> SaveDialogOptions:
    ext = normalize_extension(extension)
    return SaveDialogOptions(
        title="Save export file",
        default_filename=default_filename,
        can_create_directories=True,
        filters=[FileFilter(display_name=f"{ext.upper()} file", pattern=f"*.{ext}")],
    )


def write_export_file(path: str, content: bytes) -> None:
    """Create or truncate ``path`` with mode 0644 and write ``content``."""
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0), EXPORT_FILE_MODE)
        with os.fdopen(fd, "wb") as fh:
            fh.write(content)
    except OSError as exc:
        raise WriteFailedError(f"write export file: {exc}") from exc


class ExportWriter:
    """Shows the native save dialog and writes the decoded export bytes."""

    def __init__(self, dialog: Optional[FileDialogProvider] = None) -> None:
        self.dialog = dialog

    @property
    def ready(self) -> bool:
        return self.dialog is not None

    def save_export(self, default_filename: str, extension: str, payload: str) -> str:
        if self.dialog is None:
            raise ContextNotReadyError()

        options = build_save_options(default_filename, extension)
        try:
            save_path = self.dialog.save_file(options)
        except Exception as exc:
            # Re-raised unchanged; the tag tells callers which stage failed.
            try:
                exc.export_stage = DIALOG_STAGE
            except AttributeError:
                logger.debug("Cannot tag %s raised by save dialog", type(exc).__name__)
            raise
        if not save_path:
            raise ExportCancelledError()

        content = decode_export_payload(payload)
        write_export_file(save_path, content)

        output_path = os.path.abspath(save_path)
        logger.info("Export saved to %s (%d bytes)", output_path, len(content))
        return output_path
