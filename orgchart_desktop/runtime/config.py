from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from orgchart_desktop.runtime.schema import DesktopSettings

logger = logging.getLogger(__name__)

ENV_PREFIX = "ORGCHART_"


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_size(env: Mapping[str, str], name: str, default: tuple[int, int]) -> tuple[int, int]:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        width, height = (int(part) for part in raw.lower().split("x"))
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; expected WIDTHxHEIGHT", name, raw)
        return default
    if width <= 0 or height <= 0:
        logger.warning("Ignoring non-positive %s=%r", name, raw)
        return default
    return (width, height)


def resolve_settings(env: Optional[Mapping[str, str]] = None, **overrides) -> DesktopSettings:
    """Build desktop settings from ``ORGCHART_*`` variables; non-None overrides win."""
    env = os.environ if env is None else env
    defaults = DesktopSettings()
    width, height = _env_size(env, f"{ENV_PREFIX}WINDOW_SIZE", (defaults.width, defaults.height))

    values = {
        "title": env.get(f"{ENV_PREFIX}WINDOW_TITLE", "").strip() or defaults.title,
        "url": env.get(f"{ENV_PREFIX}FRONTEND_URL", "").strip() or defaults.url,
        "width": width,
        "height": height,
        "debug": _env_bool(env, f"{ENV_PREFIX}DEBUG", defaults.debug),
        "gui": env.get(f"{ENV_PREFIX}GUI", "").strip() or None,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return DesktopSettings(**values)
