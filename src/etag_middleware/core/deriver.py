"""Entity-tag derivation from response content.

The tag is a CRC-32 of the exact response bytes, rendered as lowercase hex
and wrapped as ``"<hex>"`` (strong) or ``W/"<hex>"`` (weak). An ``ETag``
already set by the handler always wins and is passed through untouched.

CRC-32 is a freshness signal only. It has no key material and offers no
tamper resistance; a collision shows up as a false match, i.e. a 304 for
content that did change.

The body must be fully materialised before derivation. Streaming bodies have
to be buffered by the host first.
"""

import zlib
from collections.abc import MutableMapping

from etag_middleware.exceptions import InvalidHeaderValueError
from etag_middleware.models import Strength
from etag_middleware.observability.logging import get_logger
from etag_middleware.observability.metrics import record_tag
from etag_middleware.utils.headers import (
    decode_header_value,
    get_header_value,
    set_header_value,
    validate_header_value,
)

logger = get_logger(__name__)

ETAG_HEADER = "ETag"


def build_entity_tag(body: bytes, strength: Strength) -> str:
    """Compute the entity tag for a response body.

    Args:
        body: The complete response body
        strength: Marker to apply to the tag

    Returns:
        ``"<hex>"`` for strong tags, ``W/"<hex>"`` for weak tags

    Examples:
        >>> build_entity_tag(b"hello", Strength.STRONG)
        '"3610a686"'
        >>> build_entity_tag(b"hello", Strength.WEAK)
        'W/"3610a686"'
    """
    digest = format(zlib.crc32(body), "x")

    if strength is Strength.WEAK:
        return f'W/"{digest}"'
    return f'"{digest}"'


def extract_or_compute_etag(
    headers: MutableMapping[str, str],
    body: bytes,
    strength: Strength,
) -> str:
    """Resolve the entity tag for a response.

    If the response already carries a readable ``ETag`` it is returned
    trimmed and nothing is computed. Otherwise a tag is built from ``body``
    and written into ``headers``. Writing is best-effort: a value that can't
    be a header is logged and left out, and the tag is still returned so the
    conditional verdict can use it.

    Args:
        headers: Response headers, modified in place when a tag is computed
        body: The complete response body
        strength: Marker to apply to a computed tag

    Returns:
        The resolved entity tag
    """
    existing = decode_header_value(get_header_value(headers, ETAG_HEADER))
    if existing is not None:
        record_tag("upstream")
        logger.debug("etag.reused", etag=existing.strip())
        return existing.strip()

    value = build_entity_tag(body, strength)
    record_tag("computed")
    logger.debug("etag.computed", etag=value, strength=strength.value, body_bytes=len(body))

    try:
        validate_header_value(ETAG_HEADER, value)
    except InvalidHeaderValueError as e:
        logger.warning("etag.header_rejected", header=e.name, error=e.message)
    else:
        set_header_value(headers, ETAG_HEADER, value)

    return value
