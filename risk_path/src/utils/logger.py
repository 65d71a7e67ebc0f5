"""Simple logging wrapper supporting optional file logging."""

from __future__ import annotations

import logging
import os
from pathlib import Path

FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_logger(name: str, file_path: str | None = None, level: str | int | None = None) -> logging.Logger:
    """Return configured logger, attaching a ``file_path`` handler if provided.

    Meant for the ``risk_path`` package logger; module loggers stay plain
    ``logging.getLogger(__name__)`` children and inherit its handlers and level.

    ``level`` defaults to the configured ``log_level``.
    """

    logger = logging.getLogger(name)
    formatter = logging.Formatter(FORMAT)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if file_path:
        resolved = os.path.abspath(file_path)
        has_file = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == resolved
            for h in logger.handlers
        )
        if not has_file:
            Path(file_path).parent.mkdir(parents=True, exist_ok=True)
            f_handler = logging.FileHandler(file_path, encoding="utf-8")
            f_handler.setFormatter(formatter)
            logger.addHandler(f_handler)
    if level is None:
        from risk_path.src.utils import config_loader

        level = config_loader.LOG_LEVEL
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger


__all__ = ["get_logger"]
