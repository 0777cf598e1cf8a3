"""Logging and metrics for the dictionary service."""

from .logging import get_logger, setup_logging
from .metrics import NullSink, PrometheusSink

__all__ = [
    "get_logger",
    "setup_logging",
    "NullSink",
    "PrometheusSink",
]
