from __future__ import annotations


class ExportError(Exception):
    """Base class for failures of a single export call."""

    code = "export_failed"


class EmptyPayloadError(ExportError):
    code = "empty_payload"

    def __init__(self, message: str = "empty export payload") -> None:
        super().__init__(message)


class MalformedDataURLError(ExportError):
    code = "malformed_data_url"

    def __init__(self, message: str = "invalid data URL payload") -> None:
        super().__init__(message)


class InvalidBase64Error(ExportError):
    code = "invalid_base64"


class ContextNotReadyError(ExportError):
    code = "context_not_ready"

    def __init__(self, message: str = "application context is not ready") -> None:
        super().__init__(message)


class ExportCancelledError(ExportError):
    code = "cancelled"

    def __init__(self, message: str = "cancelled") -> None:
        super().__init__(message)


class WriteFailedError(ExportError):
    code = "write_failed"
