"""Logger setup for grid tools with optional file output."""

from __future__ import annotations

import logging
from pathlib import Path

_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_logger(
    name: str, file_path: str | None = None, level: int | str = logging.INFO
) -> logging.Logger:
    """Return a logger with one stream handler, plus a file handler per ``file_path``."""

    logger = logging.getLogger(name)
    formatter = logging.Formatter(_FORMAT)
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if file_path:
        target = Path(file_path).resolve()
        known = {
            Path(h.baseFilename).resolve() for h in logger.handlers if isinstance(h, logging.FileHandler)
        }
        if target not in known:
            target.parent.mkdir(parents=True, exist_ok=True)
            f_handler = logging.FileHandler(target, encoding="utf-8")
            f_handler.setFormatter(formatter)
            logger.addHandler(f_handler)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)
    return logger
