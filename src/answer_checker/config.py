"""
Runtime settings read from the environment (and a .env file, if present).
"""

import logging
import os

from dotenv import load_dotenv

from .utils.logger import get_logger

load_dotenv()

logger = get_logger(__name__)

DEFAULT_LOG_LEVEL = 'INFO'
DEFAULT_SEMANTIC_THRESHOLD = 0.82
DEFAULT_SEMANTIC_TIMEOUT = 2.0


def _float_setting(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {value!r}, using {default}")
        return default


def get_log_level() -> int:
    """Get the console log level from ANSWER_CHECKER_LOG_LEVEL."""
    name = os.getenv('ANSWER_CHECKER_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning(f"Unknown log level {name!r}, using {DEFAULT_LOG_LEVEL}")
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def get_semantic_threshold() -> float:
    """Similarity needed for the semantic layer to accept an answer."""
    return _float_setting('ANSWER_CHECKER_SEMANTIC_THRESHOLD', DEFAULT_SEMANTIC_THRESHOLD)


def get_semantic_timeout() -> float:
    """Seconds to wait for one semantic scorer call."""
    return _float_setting('ANSWER_CHECKER_SEMANTIC_TIMEOUT', DEFAULT_SEMANTIC_TIMEOUT)
