"""Conditional request evaluation for ``If-Match`` and ``If-None-Match``.

This module decides, from the resolved entity tag and the request's
validator headers, whether the host forwards the response or replaces it.
Evaluation is a single pass with two exits and one fallthrough:

1. ``If-Match`` (if sent): no ``*`` and no strong match -> 412.
2. ``If-None-Match`` (if sent): ``*`` or a weak match -> 304 for GET/HEAD,
   412 for every other method.
3. Otherwise -> proceed.

``If-Match`` is evaluated first and a failure there ends evaluation, so
``If-None-Match`` is never consulted for a request that already failed.

Header values that cannot be decoded as text are treated as absent.

Examples:
    >>> evaluate_conditionals("GET", '"abc"', if_none_match='"abc"').status
    304
    >>> evaluate_conditionals("PUT", '"abc"', if_match='"other"').status
    412
    >>> evaluate_conditionals("GET", '"abc"').is_short_circuit
    False
"""

from etag_middleware.core.comparison import match_if_match, match_if_none_match
from etag_middleware.models import ConditionalVerdict, ValidatorList
from etag_middleware.utils.headers import decode_header_value

NOT_MODIFIED = 304
PRECONDITION_FAILED = 412

# Methods for which a matching If-None-Match means "use your cached copy"
SAFE_METHODS = {"GET", "HEAD"}


def parse_validators(value: str | bytes | None) -> ValidatorList | None:
    """Parse a raw validator header, or return None when it is absent.

    Args:
        value: Raw ``If-Match`` / ``If-None-Match`` value

    Returns:
        The parsed list, or None if the header is missing or not text
    """
    decoded = decode_header_value(value)
    if decoded is None:
        return None
    return ValidatorList.parse(decoded)


def evaluate_conditionals(
    method: str,
    etag: str,
    if_match: str | bytes | None = None,
    if_none_match: str | bytes | None = None,
) -> ConditionalVerdict:
    """Choose the response outcome for a conditional request.

    Args:
        method: Request method (compared case-insensitively)
        etag: The resolved entity tag of the response
        if_match: Raw ``If-Match`` value, None if not sent
        if_none_match: Raw ``If-None-Match`` value, None if not sent

    Returns:
        A PROCEED verdict, or a SHORT_CIRCUIT verdict with status 304 or 412
    """
    validators = parse_validators(if_match)
    if validators is not None and not match_if_match(etag, validators):
        return ConditionalVerdict.short_circuit(PRECONDITION_FAILED, etag)

    validators = parse_validators(if_none_match)
    if validators is not None and match_if_none_match(etag, validators):
        if method.upper() in SAFE_METHODS:
            return ConditionalVerdict.short_circuit(NOT_MODIFIED, etag)
        return ConditionalVerdict.short_circuit(PRECONDITION_FAILED, etag)

    return ConditionalVerdict.proceed(etag)
