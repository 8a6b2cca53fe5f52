"""Framework-agnostic core middleware for ETag handling.

This module ties the Tag Deriver and the Conditional Evaluator together
behind a request/response contract that adapters for specific frameworks
translate into.

The middleware:
1. Awaits the wrapped handler and takes its fully buffered response
2. Reuses the handler's ``ETag`` or computes one from the body
3. Evaluates ``If-Match`` / ``If-None-Match``
4. Returns the original response with ``ETag`` attached, or an empty
   304/412 response carrying the resolved tag

Examples:
    Using the middleware directly::

        from etag_middleware.core.middleware import ETagMiddleware, Request, Response

        middleware = ETagMiddleware.weak()

        async def handler(request):
            return Response(status=200, headers={}, body=b"hello")

        result = await middleware.process(
            Request(method="GET", headers={"if-none-match": 'W/"3610a686"'}),
            handler,
        )
        # result.status == 304
"""

from collections.abc import Awaitable, Callable, Mapping, MutableMapping

from etag_middleware.config import ETagConfig
from etag_middleware.core.deriver import ETAG_HEADER, extract_or_compute_etag
from etag_middleware.core.evaluator import PRECONDITION_FAILED, evaluate_conditionals
from etag_middleware.models import ConditionalVerdict, Strength
from etag_middleware.observability.logging import get_logger
from etag_middleware.observability.metrics import record_verdict
from etag_middleware.utils.headers import get_header_value

logger = get_logger(__name__)


class Request:
    """Abstract request representation.

    Framework adapters convert their request objects into this format. Only
    the method and the headers matter for conditional evaluation.

    Attributes:
        method: HTTP method (GET, POST, etc.)
        headers: Request headers; values may be raw bytes or decoded text
    """

    def __init__(self, method: str, headers: Mapping[str, str | bytes]) -> None:
        self.method = method
        self.headers = headers


class Response:
    """Abstract, fully buffered response representation.

    Attributes:
        status: HTTP status code
        headers: Response headers, mutable so the ETag can be attached
        body: Complete response body
    """

    def __init__(self, status: int, headers: MutableMapping[str, str], body: bytes) -> None:
        self.status = status
        self.headers = headers
        self.body = body


class ETagMiddleware:
    """Framework-agnostic ETag middleware.

    Attributes:
        config: Configuration object
    """

    def __init__(self, config: ETagConfig | None = None) -> None:
        """Initialize the middleware.

        Args:
            config: Configuration object (strong tags if not provided)
        """
        self.config = config or ETagConfig()

    @classmethod
    def strong(cls) -> "ETagMiddleware":
        """Middleware that emits strong tags (the default)."""
        return cls(ETagConfig(strength=Strength.STRONG))

    @classmethod
    def weak(cls) -> "ETagMiddleware":
        """Middleware that emits weak tags while still honouring conditionals."""
        return cls(ETagConfig(strength=Strength.WEAK))

    @property
    def strength(self) -> Strength:
        return self.config.strength

    async def process(
        self,
        request: Request,
        handler: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Run the handler and apply ETag handling to its response.

        Args:
            request: The incoming request
            handler: Async function producing the fully buffered response

        Returns:
            The response to send
        """
        response = await handler(request)
        return self.apply(request, response)

    def apply(self, request: Request, response: Response) -> Response:
        """Apply ETag derivation and conditional evaluation to a response.

        Args:
            request: The incoming request
            response: The handler's response; its headers gain an ``ETag``

        Returns:
            ``response`` itself, or a new empty 304/412 response
        """
        etag = extract_or_compute_etag(response.headers, response.body, self.strength)

        verdict = evaluate_conditionals(
            request.method,
            etag,
            if_match=get_header_value(request.headers, "if-match"),  # type: ignore[arg-type]
            if_none_match=get_header_value(request.headers, "if-none-match"),  # type: ignore[arg-type]
        )

        if verdict.is_short_circuit:
            return self._short_circuit(request, verdict)

        record_verdict(verdict.action.value, response.status)
        return response

    def _short_circuit(self, request: Request, verdict: ConditionalVerdict) -> Response:
        """Build the empty response that replaces the handler's one.

        Args:
            request: The incoming request
            verdict: A SHORT_CIRCUIT verdict

        Returns:
            Empty response with the verdict's status and ``ETag``
        """
        status = verdict.status or PRECONDITION_FAILED

        record_verdict(verdict.action.value, status)
        logger.info(
            "conditional.short_circuit",
            method=request.method,
            status=status,
            etag=verdict.etag,
        )

        return Response(status=status, headers={ETAG_HEADER: verdict.etag}, body=b"")
