"""Logging helpers shared by the pipeline and the CLI."""

import logging
import sys
from pathlib import Path
from typing import Optional, Set

_configured: Set[str] = set()
_level_override: Optional[str] = None


def _resolve_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return a configured logger (creates handlers only once per name)."""
    from opensearch2nix.utils.config import settings

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(_resolve_level(level or _level_override or settings.log_level))
    # Handlers live on each named logger; don't echo through the root.
    logger.propagate = False

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(fmt))
        logger.addHandler(fh)

    _configured.add(name)
    return logger


def set_log_level(level: str) -> None:
    """Re-level every logger from :func:`get_logger`, now and later."""
    global _level_override
    _level_override = level
    effective = _resolve_level(level)
    for name in _configured:
        logging.getLogger(name).setLevel(effective)
