"""Utility modules for ETag middleware."""

from .headers import (
    combine_header_values,
    decode_header_value,
    get_header_value,
    set_header_value,
    validate_header_value,
)

__all__ = [
    "decode_header_value",
    "validate_header_value",
    "get_header_value",
    "set_header_value",
    "combine_header_values",
]
