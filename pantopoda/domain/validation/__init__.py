"""
Validation domain: error bag, validation result and the ports the
validation use case depends on.
"""

from pantopoda.domain.validation.errors import NotValidatableError, RequestValidationFailed
from pantopoda.domain.validation.model import ErrorBag, ErrorType, ValidationError
from pantopoda.domain.validation.ports import RuleEngine, RuleFailure, Taggable, Translator

__all__ = [
    "ErrorBag",
    "ErrorType",
    "NotValidatableError",
    "RequestValidationFailed",
    "RuleEngine",
    "RuleFailure",
    "Taggable",
    "Translator",
    "ValidationError",
]
