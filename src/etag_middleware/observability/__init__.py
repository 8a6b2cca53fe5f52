"""Observability utilities for the ETag middleware.

This package provides monitoring and debugging capabilities:
- Prometheus metrics for tag sources and conditional verdicts
- Structured logging with contextual information
"""

from etag_middleware.observability.logging import configure_logging, get_logger
from etag_middleware.observability.metrics import record_tag, record_verdict

__all__ = [
    "configure_logging",
    "get_logger",
    "record_tag",
    "record_verdict",
]
