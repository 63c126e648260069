from __future__ import annotations

import logging
from logging import Formatter, Handler, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from .config import load_settings
from .io.dirs import ensure_directory

_configured = False

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3


def _resolve_level(level: Union[str, int, None]) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        named = getattr(logging, level.upper(), None)
        if isinstance(named, int):
            return named
        try:
            return int(level)
        except ValueError:
            return logging.INFO
    return logging.INFO


def setup_logging(
    level: Union[str, int, None] = None, log_file: Optional[Path] = None
) -> None:
    """Configure root logging once; later calls only adjust the level.

    Without an explicit *level* the ARCHIVE_LOG_LEVEL setting is used.
    """
    global _configured
    if level is None:
        level = load_settings().log_level
    resolved = _resolve_level(level)
    root = logging.getLogger()
    if not _configured:
        # file handler first: a bad log dir must leave root handlers in place
        file_handler = (
            _build_rotating_handler(Path(log_file)) if log_file is not None else None
        )
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        stream_handler = StreamHandler()
        stream_handler.setFormatter(Formatter(LOG_FORMAT))
        root.addHandler(stream_handler)
        if file_handler is not None:
            root.addHandler(file_handler)
        _configured = True
    root.setLevel(resolved)
    for handler in root.handlers:
        handler.setLevel(resolved)


def _build_rotating_handler(path: Path) -> Handler:
    ensure_directory(path.parent)
    handler = RotatingFileHandler(
        path,
        mode="a",
        encoding="utf-8",
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
    )
    handler.setFormatter(Formatter(LOG_FORMAT))
    return handler


__all__ = ["LOG_FORMAT", "setup_logging"]
