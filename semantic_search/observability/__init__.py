"""
Observability module.

Provides logging configuration, correlation ID tracking, and request
logging middleware.
"""

from semantic_search.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from semantic_search.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
]
