"""Configuration and constants for the linear ordering application."""

from linear_ordering.config.settings import (
    DATA_LAYOUT,
    DATA_LAYOUTS,
    DECIMAL_PLACES,
    DEFAULT_RESULTS_FILE,
    ENCODING,
    LOG_LEVEL,
)

__all__ = [
    "DATA_LAYOUT",
    "DATA_LAYOUTS",
    "DECIMAL_PLACES",
    "DEFAULT_RESULTS_FILE",
    "ENCODING",
    "LOG_LEVEL",
]
