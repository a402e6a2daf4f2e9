"""Observability utilities (structured logging)."""

from .structured_logging import configure_structlog, get_logger

__all__ = [
    "configure_structlog",
    "get_logger",
]
