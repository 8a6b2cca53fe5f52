"""Custom exceptions for the ETag middleware.

Entity-tag derivation and conditional evaluation are total over their inputs:
malformed validator headers degrade to "absent" or "no match" and never raise.
Exceptions only exist at the seams where the middleware touches the host's
header set.

Examples:
    Handling a rejected header value::

        from etag_middleware.exceptions import InvalidHeaderValueError
        from etag_middleware.utils.headers import validate_header_value

        try:
            validate_header_value("ETag", value)
        except InvalidHeaderValueError as e:
            logger.warning("etag.header_rejected", header=e.name, error=str(e))
            # Keep using the value for the verdict, just don't emit it
"""


class ETagError(Exception):
    """Base exception for all ETag middleware errors.

    Attributes:
        message: Human-readable error description.

    Examples:
        Catching all middleware errors::

            try:
                response = middleware.apply(request, response)
            except ETagError as e:
                logger.error("etag.error", error=str(e))
    """

    def __init__(self, message: str) -> None:
        """Initialize the exception with a message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class InvalidHeaderValueError(ETagError):
    """A value cannot be encoded as an HTTP header field value.

    Raised when a value contains characters that are not allowed in a header
    field (CR, LF, NUL, other control characters, or anything outside
    Latin-1). The Tag Deriver catches this and skips inserting the ``ETag``
    header while still using the tag for the conditional verdict.

    Attributes:
        message: Human-readable error description.
        name: The header name the value was destined for.
        value: The rejected value.

    Examples:
        Raising an invalid header value error::

            if "\\n" in value:
                raise InvalidHeaderValueError(
                    message="Header value contains a line break",
                    name="ETag",
                    value=value,
                )
    """

    def __init__(self, message: str, name: str, value: str) -> None:
        """Initialize the error with details.

        Args:
            message: Human-readable error description.
            name: The header name the value was destined for.
            value: The rejected value.
        """
        super().__init__(message)
        self.name = name
        self.value = value
