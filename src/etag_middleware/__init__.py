"""
ETag middleware for Python web applications.

This package derives entity tags for responses and evaluates the If-Match and
If-None-Match request headers, short-circuiting with 304 Not Modified or
412 Precondition Failed when the client's preconditions decide the outcome.
"""

from etag_middleware.config import ETagConfig
from etag_middleware.core.middleware import ETagMiddleware
from etag_middleware.models import ConditionalVerdict, Strength, ValidatorList

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ETagConfig",
    "ETagMiddleware",
    "ConditionalVerdict",
    "Strength",
    "ValidatorList",
]
