"""Header decoding and manipulation utilities for the ETag middleware.

This module provides functions for:
- Decoding raw header values into text (or rejecting them)
- Validating values before they are written to a response
- Case-insensitive lookup and replacement in header mappings
- Combining repeated request header lines into a single list value
"""

from collections.abc import Iterable, Mapping, MutableMapping

from etag_middleware.exceptions import InvalidHeaderValueError

# Visible ASCII plus space and horizontal tab
_TEXT_CHARS = frozenset(chr(c) for c in range(0x20, 0x7F)) | {"\t"}


def decode_header_value(value: str | bytes | None) -> str | None:
    """Decode a raw header value into text.

    A value is text only when every character is visible ASCII, a space or a
    horizontal tab. Anything else is treated as if the header was not sent.

    Args:
        value: Raw header value, already-decoded string, or None

    Returns:
        The decoded string, or None if the value is absent or not text

    Example:
        >>> decode_header_value(b'"abc", W/"def"')
        '"abc", W/"def"'
        >>> decode_header_value(b'"caf\\xc3\\xa9"') is None
        True
    """
    if value is None:
        return None

    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            value = bytes(value).decode("ascii")
        except UnicodeDecodeError:
            return None

    if not all(char in _TEXT_CHARS for char in value):
        return None

    return value


def validate_header_value(name: str, value: str) -> None:
    """Check that a value can be emitted as a header field value.

    Args:
        name: Header name (used in the error only)
        value: Value to validate

    Raises:
        InvalidHeaderValueError: If the value contains CR, LF, NUL, other
            control characters, or characters outside Latin-1

    Example:
        >>> validate_header_value("ETag", '"abc"')
        >>> validate_header_value("ETag", '"a\\r\\nb"')
        Traceback (most recent call last):
        ...
        etag_middleware.exceptions.InvalidHeaderValueError: ...
    """
    for char in value:
        code = ord(char)
        if char == "\t":
            continue
        if code < 0x20 or code == 0x7F:
            raise InvalidHeaderValueError(
                message=f"{name} header value contains control character {code:#04x}",
                name=name,
                value=value,
            )
        if code > 0xFF:
            raise InvalidHeaderValueError(
                message=f"{name} header value is not Latin-1 encodable",
                name=name,
                value=value,
            )


def get_header_value(
    headers: Mapping[str, str],
    header_name: str,
    default: str | None = None,
) -> str | None:
    """Get header value with case-insensitive lookup.

    Args:
        headers: Headers mapping
        header_name: Name of header to find (case-insensitive)
        default: Default value if header not found

    Returns:
        Header value or default

    Example:
        >>> headers = {"ETag": '"abc"'}
        >>> get_header_value(headers, "etag")
        '"abc"'
        >>> get_header_value(headers, "missing", "default")
        'default'
    """
    header_name_lower = header_name.lower()

    for key, value in headers.items():
        if key.lower() == header_name_lower:
            return value

    return default


def set_header_value(
    headers: MutableMapping[str, str],
    header_name: str,
    value: str,
) -> None:
    """Set a header, replacing any existing entry regardless of case.

    Args:
        headers: Mutable headers mapping, modified in place
        header_name: Name of header to set
        value: Header value

    Example:
        >>> headers = {"etag": "stale"}
        >>> set_header_value(headers, "ETag", '"abc"')
        >>> headers
        {'ETag': '"abc"'}
    """
    header_name_lower = header_name.lower()

    # Collect first, the mapping can't change size while iterating
    stale = [key for key in headers.keys() if key.lower() == header_name_lower]
    for key in stale:
        del headers[key]

    headers[header_name] = value


def combine_header_values(raw_headers: Iterable[tuple[bytes, bytes]]) -> dict[str, bytes]:
    """Fold raw header lines into one value per lower-cased name.

    Repeated lines are joined with ``", "``, which is equivalent for the
    comma-separated list headers this middleware reads.

    Args:
        raw_headers: Raw (name, value) byte pairs as found in an ASGI scope

    Returns:
        Dictionary mapping lower-cased header names to raw values

    Example:
        >>> combine_header_values([(b"If-None-Match", b'"a"'), (b"if-none-match", b'"b"')])
        {'if-none-match': b'"a", "b"'}
    """
    combined: dict[str, bytes] = {}

    for raw_name, raw_value in raw_headers:
        name = raw_name.decode("latin-1").lower()
        if name in combined:
            combined[name] = combined[name] + b", " + raw_value
        else:
            combined[name] = raw_value

    return combined
