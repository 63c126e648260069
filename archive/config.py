# archive/config.py
# =============================================================================
# Purpose:
#   Centralize runtime knobs for the file-system helpers. Values usually come
#   from the environment (optionally seeded by a .env file) with defaults that
#   keep the permissive behaviour of the helpers.
#
# Summary:
#   - Defines an IOSettings dataclass for strongly-typed config
#   - Loads environment variables via python-dotenv
#   - Exposes load_settings() for consumers (helpers / tests)
# =============================================================================
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Tuple

from dotenv import load_dotenv

_LOGGER = logging.getLogger("archive.config")

DEFAULT_BUFFER_SIZE = 8024

_TRUE_LITERALS = {"1", "true", "t", "yes", "y", "on"}
_FALSE_LITERALS = {"0", "false", "f", "no", "n", "off"}


@dataclass(frozen=True)
class IOSettings:
    """Strongly-typed container for config values."""

    copy_buffer_size: int = DEFAULT_BUFFER_SIZE
    strict_dirs: bool = False
    strict_listing: bool = False
    log_level: str = "INFO"


@dataclass(frozen=True)
class _FieldSpec:
    env: str
    default: Any
    coerce: Callable[[Any, Any], Tuple[Any, bool]]


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and value.strip() == "":
        return True
    return False


def _pick_precedence(
    override_value: Any, env_value: Any, default_value: Any
) -> Tuple[Any, str]:
    if not _is_missing(override_value):
        return override_value, "override"
    if not _is_missing(env_value):
        return env_value, "env"
    return default_value, "default"


def _parse_bool(value: Any) -> bool | None:
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in _TRUE_LITERALS:
        return True
    if lowered in _FALSE_LITERALS:
        return False
    return None


def _bool_coercer(value: Any, default: Any) -> Tuple[bool, bool]:
    if value is None:
        return bool(default), False
    parsed = _parse_bool(value)
    if parsed is None:
        return bool(default), False
    return parsed, True


def _positive_int_coercer(value: Any, default: Any) -> Tuple[int, bool]:
    if value is None or isinstance(value, bool):
        return int(default), False
    token = value.strip() if isinstance(value, str) else value
    try:
        number = int(token)
    except (TypeError, ValueError):
        return int(default), False
    if number <= 0:
        return int(default), False
    return number, True


def _level_coercer(value: Any, default: Any) -> Tuple[str, bool]:
    if value is None:
        return default, False
    text = str(value).strip().upper()
    if not isinstance(logging.getLevelName(text), int):
        return default, False
    return text, True


_FIELD_SPECS: Dict[str, _FieldSpec] = {
    "copy_buffer_size": _FieldSpec(
        "ARCHIVE_COPY_BUFFER_SIZE", DEFAULT_BUFFER_SIZE, _positive_int_coercer
    ),
    "strict_dirs": _FieldSpec("ARCHIVE_STRICT_DIRS", False, _bool_coercer),
    "strict_listing": _FieldSpec("ARCHIVE_STRICT_LISTING", False, _bool_coercer),
    "log_level": _FieldSpec("ARCHIVE_LOG_LEVEL", "INFO", _level_coercer),
}


def load_settings(
    *,
    overrides: Mapping[str, Any] | None = None,
    include_sources: bool = False,
    logger: logging.Logger | None = None,
) -> IOSettings | Tuple[IOSettings, Dict[str, str]]:
    """Resolve settings with deterministic precedence and logging.

    The precedence order is explicit overrides > environment > defaults.
    When ``include_sources`` is true, the function returns a tuple of
    ``(IOSettings, sources)`` where *sources* maps field names to
    ``{"override" | "env" | "default"}``.
    """

    load_dotenv()

    explicit = {key: value for key, value in (overrides or {}).items() if value is not None}
    unknown = set(explicit) - set(_FIELD_SPECS)
    if unknown:
        raise KeyError(f"unknown settings: {', '.join(sorted(unknown))}")

    log = logger or _LOGGER
    resolved: Dict[str, Any] = {}
    sources: Dict[str, str] = {}

    for field_name, spec in _FIELD_SPECS.items():
        raw_value, source = _pick_precedence(
            explicit.get(field_name), os.getenv(spec.env), spec.default
        )
        coerced, ok = spec.coerce(raw_value, spec.default)
        if not ok:
            if source != "default":
                log.warning(
                    "config_invalid_value key=%s source=%s fallback=%s",
                    field_name,
                    source,
                    spec.default,
                )
            coerced = spec.default
            source = "default"

        log.debug("config_resolved key=%s value=%s source=%s", field_name, coerced, source)
        resolved[field_name] = coerced
        sources[field_name] = source

    settings = IOSettings(**resolved)
    if include_sources:
        return settings, sources
    return settings


__all__ = ["DEFAULT_BUFFER_SIZE", "IOSettings", "load_settings"]
