"""ASGI middleware adapter for FastAPI and Starlette applications.

This module wraps the core ETag middleware for ASGI frameworks such as
FastAPI and Starlette.

The middleware:
1. Converts ASGI requests to the internal Request format
2. Buffers the downstream response body completely
3. Processes through the core middleware
4. Converts internal responses back to Starlette responses

Examples:
    FastAPI integration::

        from fastapi import FastAPI
        from etag_middleware.adapters.asgi import ASGIETagMiddleware

        app = FastAPI()
        app.add_middleware(ASGIETagMiddleware)  # strong tags

        @app.get("/articles/{article_id}")
        async def get_article(article_id: str):
            return {"id": article_id}

    Weak tags, via config::

        from etag_middleware.config import ETagConfig

        app.add_middleware(ASGIETagMiddleware, config=ETagConfig(strength="weak"))

    Starlette integration::

        from starlette.applications import Starlette
        from starlette.middleware import Middleware

        middleware = [Middleware(ASGIETagMiddleware, strength="weak")]

        app = Starlette(middleware=middleware)
"""

from collections.abc import Awaitable, Callable
from typing import Any

from starlette.datastructures import MutableHeaders
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request as StarletteRequest
from starlette.responses import Response as StarletteResponse

from etag_middleware.config import ETagConfig
from etag_middleware.core.middleware import ETagMiddleware, Request, Response
from etag_middleware.models import Strength
from etag_middleware.utils.headers import combine_header_values


class ASGIETagMiddleware(BaseHTTPMiddleware):
    """ASGI middleware for ETag handling.

    Attributes:
        config: Configuration object
        middleware: Core middleware instance
    """

    def __init__(
        self,
        app: Any,
        config: ETagConfig | None = None,
        strength: Strength | str | None = None,
    ) -> None:
        """Initialize the ASGI middleware.

        Args:
            app: The ASGI application
            config: Configuration object (uses defaults if not provided)
            strength: Shortcut for ``ETagConfig(strength=...)``; takes
                precedence over ``config``
        """
        super().__init__(app)
        if strength is not None:
            config = ETagConfig(strength=strength)
        self.config = config or ETagConfig()
        self.middleware = ETagMiddleware(self.config)

    async def dispatch(
        self,
        request: StarletteRequest,
        call_next: Callable[[StarletteRequest], Awaitable[StarletteResponse]],
    ) -> StarletteResponse:
        """Process an ASGI request with ETag handling.

        Args:
            request: The Starlette request object
            call_next: Function to call the next middleware/handler

        Returns:
            Starlette Response object
        """
        internal_request = self._convert_request(request)

        async def handler(_req: Request) -> Response:
            response = await call_next(request)
            body = await self._read_body(response)

            return Response(
                status=response.status_code,
                headers=MutableHeaders(raw=list(response.headers.raw)),
                body=body,
            )

        result = await self.middleware.process(internal_request, handler)

        return self._convert_response(result)

    def _convert_request(self, request: StarletteRequest) -> Request:
        """Convert Starlette request to internal Request format.

        Header values are kept as raw bytes so that values which aren't
        valid header text can be recognised and ignored by the evaluator.

        Args:
            request: Starlette request object

        Returns:
            Internal Request object
        """
        return Request(
            method=request.method,
            headers=combine_header_values(request.headers.raw),
        )

    async def _read_body(self, response: StarletteResponse) -> bytes:
        """Buffer the complete body of a downstream response.

        Args:
            response: Response returned by ``call_next``

        Returns:
            The full body
        """
        if not hasattr(response, "body_iterator"):
            return bytes(response.body)

        chunks: list[bytes] = []
        async for chunk in response.body_iterator:
            if isinstance(chunk, str):
                chunks.append(chunk.encode("utf-8"))
            else:
                chunks.append(bytes(chunk))
        return b"".join(chunks)

    def _convert_response(self, response: Response) -> StarletteResponse:
        """Convert internal Response to Starlette Response.

        Args:
            response: Internal response object

        Returns:
            Starlette Response object
        """
        return StarletteResponse(
            content=response.body,
            status_code=response.status,
            headers=response.headers,
        )
