"""
Validation result model.

ValidationError is a value, not an exception: its zero value (no type,
empty bag) is the success case and is falsy. ErrorBag keeps every
violation of one validation run keyed by snake_case field name.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pantopoda.domain.validation.errors import RequestValidationFailed


class ErrorType(Enum):
    """Kind of validation failure."""

    BAD_REQUEST = "bad_request"
    RULE_VIOLATION = "validation_failed"


class ErrorBag(Mapping[str, list[str]]):
    """Ordered mapping of field name to error messages.

    Fields appear in the order their first error was appended.
    """

    def __init__(self) -> None:
        self._errors: dict[str, list[str]] = {}

    def append(self, field_name: str, message: str) -> None:
        """Add ``message`` to the errors of ``field_name``."""
        self._errors.setdefault(field_name, []).append(message)

    def to_dict(self) -> dict[str, list[str]]:
        """Return a plain copy suitable for a JSON body."""
        return {name: list(messages) for name, messages in self._errors.items()}

    def __getitem__(self, field_name: str) -> list[str]:
        return list(self._errors[field_name])

    def __iter__(self) -> Iterator[str]:
        return iter(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"ErrorBag({self._errors!r})"


@dataclass(frozen=True)
class ValidationError:
    """Outcome of validating one request object.

    Attributes:
        error_type: None when validation passed.
        error_bag: Field violations; only populated for RULE_VIOLATION.
    """

    error_type: Optional[ErrorType] = None
    error_bag: ErrorBag = field(default_factory=ErrorBag)

    @classmethod
    def bad_request(cls) -> "ValidationError":
        return cls(error_type=ErrorType.BAD_REQUEST)

    @classmethod
    def rule_violation(cls, error_bag: ErrorBag) -> "ValidationError":
        return cls(error_type=ErrorType.RULE_VIOLATION, error_bag=error_bag)

    @property
    def ok(self) -> bool:
        return self.error_type is None

    def raise_for_error(self) -> None:
        """Raise RequestValidationFailed unless this is the success value."""
        if not self.ok:
            raise RequestValidationFailed(self)

    def __bool__(self) -> bool:
        return not self.ok
