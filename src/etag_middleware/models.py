"""Core type definitions and models for the ETag middleware.

This module provides the data structures shared by the Tag Deriver and the
Conditional Evaluator: the tag strength mode, the parsed form of an
``If-Match`` / ``If-None-Match`` header, and the verdict handed back to the
host.

All of these values are request-scoped. They are computed for a single
request, consumed by the caller and discarded.

Examples:
    Parsing a validator header::

        from etag_middleware.models import ValidatorList

        validators = ValidatorList.parse('"abc", W/"def"')
        validators.tokens  # ('"abc"', 'W/"def"')

    Building verdicts::

        from etag_middleware.models import ConditionalVerdict

        ConditionalVerdict.proceed('"abc"')
        ConditionalVerdict.short_circuit(304, '"abc"')
"""

from enum import Enum

from pydantic import BaseModel, Field

WILDCARD = "*"


class Strength(str, Enum):
    """Marker applied to entity tags computed by the middleware.

    The strength only decides how a freshly computed tag is written. Tags
    already present on a response, and the tags sent by clients, carry their
    own marker and are compared according to it.

    Attributes:
        STRONG: Emit ``"<hex>"``.
        WEAK: Emit ``W/"<hex>"``.
    """

    STRONG = "strong"
    WEAK = "weak"


class VerdictAction(str, Enum):
    """What the host must do with the response.

    Attributes:
        PROCEED: Forward the original response with the ETag attached.
        SHORT_CIRCUIT: Replace the response with an empty one.
    """

    PROCEED = "proceed"
    SHORT_CIRCUIT = "short_circuit"


class ValidatorList(BaseModel):
    """Parsed ``If-Match`` or ``If-None-Match`` header value.

    Each token is either the literal ``*`` or an entity tag. Matching is
    any-match, so order and duplicates don't matter.

    Attributes:
        tokens: Trimmed entries of the comma-separated header.

    Examples:
        >>> ValidatorList.parse(' "a" ,W/"b",* ').tokens
        ('"a"', 'W/"b"', '*')
        >>> ValidatorList.parse("").tokens
        ('',)
    """

    tokens: tuple[str, ...] = Field(
        default=(),
        description="Trimmed comma-separated entries",
        examples=[('"abc"', 'W/"def"'), ("*",)],
    )

    model_config = {"frozen": True}

    @classmethod
    def parse(cls, value: str) -> "ValidatorList":
        """Split a header value on commas and trim each entry.

        Args:
            value: The decoded header value.

        Returns:
            A ValidatorList holding the trimmed entries.
        """
        return cls(tokens=tuple(token.strip() for token in value.split(",")))

    @property
    def has_wildcard(self) -> bool:
        """Whether the list contains a standalone ``*`` token."""
        return WILDCARD in self.tokens


class ConditionalVerdict(BaseModel):
    """Outcome of evaluating the conditional request headers.

    Either ``PROCEED`` (forward the response, attaching ``etag``) or
    ``SHORT_CIRCUIT`` (emit an empty response with ``status`` and ``etag``).

    Attributes:
        action: Whether to forward or replace the response.
        etag: The resolved entity tag, echoed back in both cases.
        status: 304 or 412 for short-circuits, None otherwise.

    Examples:
        >>> verdict = ConditionalVerdict.short_circuit(412, '"abc"')
        >>> verdict.is_short_circuit
        True
        >>> verdict.status
        412
    """

    action: VerdictAction = Field(
        ...,
        description="Whether the host forwards or replaces the response",
    )
    etag: str = Field(
        ...,
        description="Resolved entity tag",
        examples=['"3610a686"', 'W/"3610a686"'],
    )
    status: int | None = Field(
        default=None,
        description="Status code of the short-circuit response",
        examples=[304, 412],
    )

    model_config = {"frozen": True}

    @classmethod
    def proceed(cls, etag: str) -> "ConditionalVerdict":
        """Build a verdict that forwards the original response."""
        return cls(action=VerdictAction.PROCEED, etag=etag)

    @classmethod
    def short_circuit(cls, status: int, etag: str) -> "ConditionalVerdict":
        """Build a verdict that replaces the response with an empty one.

        Args:
            status: 304 Not Modified or 412 Precondition Failed.
            etag: The resolved entity tag to echo back.

        Returns:
            A SHORT_CIRCUIT verdict.
        """
        return cls(action=VerdictAction.SHORT_CIRCUIT, etag=etag, status=status)

    @property
    def is_short_circuit(self) -> bool:
        """Whether the host must discard the original response."""
        return self.action is VerdictAction.SHORT_CIRCUIT
