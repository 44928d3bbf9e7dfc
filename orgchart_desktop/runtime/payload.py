from __future__ import annotations

import base64
import binascii

from orgchart_desktop.runtime.errors import (
    EmptyPayloadError,
    InvalidBase64Error,
    MalformedDataURLError,
)

DATA_URL_PREFIX = "data:"


def decode_export_payload(value: str) -> bytes:
    """
    Decode an export payload sent by the front end.

    Accepts either a full data URL (``data:<mime>;base64,<payload>``) or a raw
    base64 string. Line breaks inside the base64 text are ignored; anything
    else outside the standard alphabet is rejected.
    """
    raw = (value or "").strip()
    if not raw:
        raise EmptyPayloadError()

    if raw.startswith(DATA_URL_PREFIX):
        comma = raw.find(",")
        if comma < 0 or comma == len(raw) - 1:
            raise MalformedDataURLError()
        raw = raw[comma + 1:]

    raw = raw.replace("\r", "").replace("\n", "")
    try:
        return base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidBase64Error(f"decode base64 export payload: {exc}") from exc
