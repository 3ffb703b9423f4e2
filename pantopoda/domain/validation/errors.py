"""
Errors for the request validation context.

Rule failures are reported as a ValidationError value, not raised.
These exceptions cover the raising form used by request handlers and
the rule-engine signal for objects it cannot evaluate.
"""

from typing import TYPE_CHECKING

from pantopoda.domain.http.errors import PantopodaError

if TYPE_CHECKING:
    from pantopoda.domain.validation.model import ValidationError


class NotValidatableError(PantopodaError):
    """Raised by a rule engine when the object is not a valid target."""

    def __init__(self, target: object) -> None:
        super().__init__(f"Cannot validate object of type {type(target).__name__}")
        self.target = target


class RequestValidationFailed(PantopodaError):
    """Raised when a request handler refuses a request that failed validation."""

    def __init__(self, validation_error: "ValidationError") -> None:
        super().__init__(f"Request validation failed: {validation_error.error_type.value}")
        self.validation_error = validation_error
