"""Framework adapters for the ETag middleware.

This package provides adapters that integrate the framework-agnostic core
middleware with specific web frameworks:

- asgi.py: ASGI middleware for FastAPI, Starlette, etc.

The adapters handle the conversion between framework-specific request/response
objects and the middleware's internal representation.
"""

from etag_middleware.adapters.asgi import ASGIETagMiddleware

__all__ = ["ASGIETagMiddleware"]
