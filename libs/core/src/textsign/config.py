from __future__ import annotations

import logging
import os

from .errors import UnsupportedScheme
from .interfaces import Scheme

SCHEME_ENV = "TEXTSIGN_SCHEME"
LOG_LEVEL_ENV = "TEXTSIGN_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_scheme() -> Scheme:
    override = os.getenv(SCHEME_ENV)
    if override:
        try:
            return Scheme.parse(override)
        except UnsupportedScheme as exc:
            raise ValueError(f"{SCHEME_ENV} must be one of: {', '.join(s.value for s in Scheme)}") from exc
    return Scheme.BLAKE3


def parse_log_level(value: str, source: str = LOG_LEVEL_ENV) -> int:
    name = value.strip().upper()
    if name not in _LOG_LEVELS:
        raise ValueError(f"{source} must be one of: {', '.join(_LOG_LEVELS)}")
    return getattr(logging, name)


def log_level() -> int:
    override = os.getenv(LOG_LEVEL_ENV)
    if override:
        return parse_log_level(override)
    return logging.WARNING
