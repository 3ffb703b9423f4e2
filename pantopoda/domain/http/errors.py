"""
Errors raised around outbound HTTP calls.

All errors carry a human-readable ``message``. They are mapped to HTTP
responses at the interface layer when they escape a request handler.
No framework imports allowed.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pantopoda.domain.http.envelopes import Response


class PantopodaError(Exception):
    """Base error for all pantopoda errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class TransportError(PantopodaError):
    """Raised when the wire exchange could not complete.

    Covers DNS failures, refused connections and requests the transport
    could not build. No Response exists for these.
    """

    def __init__(self, method: str, endpoint: str, cause: Exception) -> None:
        super().__init__(f"{method} {endpoint} failed: {cause}")
        self.method = method
        self.endpoint = endpoint
        self.cause = cause


class ResponseError(PantopodaError):
    """Raised when the remote answered with a status code of 300 or above.

    The populated Response is kept on ``response`` so the caller can still
    read a structured error body.
    """

    def __init__(self, status: str, payload: bytes, response: "Response") -> None:
        super().__init__(f"{status}: {payload.decode('utf-8', errors='replace')}")
        self.status = status
        self.payload = payload
        self.response = response


class DecodeError(PantopodaError):
    """Raised when a response body does not match the requested shape."""

    def __init__(self, target: object, reason: str) -> None:
        name = getattr(target, "__name__", repr(target))
        super().__init__(f"Cannot decode response body into {name}: {reason}")
        self.target = target
        self.reason = reason


class PayloadEncodingError(PantopodaError):
    """Raised when a request payload cannot be serialized to JSON."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Request payload is not JSON serializable: {reason}")
        self.reason = reason


class UnknownStatusError(PantopodaError):
    """Raised when a symbolic status name is not in the status table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown HTTP status name: {name}")
        self.name = name
