"""Package logger."""

from __future__ import annotations

import logging

logger = logging.getLogger("chembalance")


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Attach a stream handler to the package logger (once) and set its level."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    if not any(isinstance(handler, logging.StreamHandler) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)
