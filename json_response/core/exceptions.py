"""
Base exception classes for the JSON response layer.

Exception hierarchy follows what can go wrong while building a response:
- Serialization of the envelope fails (bad data from the caller)
- Construction of the response object fails (programmer error)
- A failure envelope is requested for a status code without a reason phrase

The enclosing request-handling layer is expected to catch these and
produce a fallback response (see json_response.api.exception_handlers).
"""


class AppException(Exception):
    """
    Base exception for all json_response exceptions.

    Catching this class catches every error the public functions raise.
    """

    def __init__(self, message: str = "A response could not be generated"):
        self.message = message
        super().__init__(self.message)


# ============================================================================
# SERIALIZATION / CONSTRUCTION ERRORS
# ============================================================================


class SerializationError(AppException):
    """
    Raised when the envelope cannot be converted to JSON.

    Examples:
    - NaN or Infinity somewhere inside the data
    - Cyclic lists or dicts
    - Objects with no JSON representation

    The underlying error is chained as __cause__.
    """

    pass


class ResponseBuildError(AppException):
    """
    Raised when the response object itself cannot be constructed.

    Examples:
    - Status code outside 100..999
    - Header value that cannot be encoded
    - Response class that rejects a bytes body

    Only reachable through programmer error, never through user input.
    """

    pass


# ============================================================================
# PROGRAMMER ERRORS
# ============================================================================


class UnknownStatusCodeError(AppException, ValueError):
    """
    Raised when a status code has no canonical reason phrase.

    Failure envelopes always carry the reason phrase, so the public
    failure functions only accept codes from the standard registry.
    """

    def __init__(self, code: object):
        self.code = code
        super().__init__(f"Status code {code!r} has no canonical reason phrase")
