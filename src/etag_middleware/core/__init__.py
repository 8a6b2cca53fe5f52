"""Core logic for ETag handling.

This package contains the framework-agnostic entity-tag engine:
- Comparison: strong and weak entity-tag comparison
- Deriver: entity tags computed from response bodies
- Evaluator: If-Match / If-None-Match verdicts
- Middleware: request/response processing around the two

The core logic can be wrapped by adapters for different web frameworks
(FastAPI, Starlette, etc.).
"""

from etag_middleware.core.deriver import build_entity_tag, extract_or_compute_etag
from etag_middleware.core.evaluator import evaluate_conditionals

__all__ = ["build_entity_tag", "extract_or_compute_etag", "evaluate_conditionals"]
