"""Entity-tag comparison primitives.

Two comparison functions are defined for entity tags:

- Strong comparison: both tags are strong and their values are identical.
- Weak comparison: the values are identical once each side's ``W/`` marker
  has been removed.

Tag values are opaque. They are compared byte-for-byte, without case folding
and without interpreting the quoted token. Empty list entries never match.

Examples:
    >>> strong_compare('"abc"', '"abc"')
    True
    >>> strong_compare('W/"abc"', '"abc"')
    False
    >>> weak_compare('W/"abc"', '"abc"')
    True
"""

from etag_middleware.models import WILDCARD, ValidatorList

WEAK_PREFIX = "W/"


def is_weak(value: str) -> bool:
    """Whether the tag carries the weak marker."""
    return value.startswith(WEAK_PREFIX)


def strip_weak_prefix(value: str) -> str:
    """Remove a single leading ``W/`` marker, if present."""
    if is_weak(value):
        return value[len(WEAK_PREFIX) :]
    return value


def strong_compare(left: str, right: str) -> bool:
    """Compare two tags using the strong comparison function.

    A weak tag on either side never matches, even against an identical value.
    """
    return not is_weak(left) and not is_weak(right) and left == right


def weak_compare(left: str, right: str) -> bool:
    """Compare two tags using the weak comparison function."""
    return strip_weak_prefix(left) == strip_weak_prefix(right)


def match_if_match(etag: str, validators: ValidatorList) -> bool:
    """Evaluate an ``If-Match`` list against the resolved tag.

    Args:
        etag: The resolved entity tag.
        validators: Parsed ``If-Match`` header.

    Returns:
        True if the list holds ``*`` or a strongly matching tag.
    """
    return any(
        token == WILDCARD or strong_compare(token, etag) for token in validators.tokens if token
    )


def match_if_none_match(etag: str, validators: ValidatorList) -> bool:
    """Evaluate an ``If-None-Match`` list against the resolved tag.

    Args:
        etag: The resolved entity tag.
        validators: Parsed ``If-None-Match`` header.

    Returns:
        True if the list holds ``*`` or a weakly matching tag.
    """
    return any(
        token == WILDCARD or weak_compare(token, etag) for token in validators.tokens if token
    )
