"""
Port interfaces (ABCs) for request validation.

The validation use case depends on these contracts only. The rule engine
and the translator are injected by the composition root; Taggable is the
capability request-object types implement to expose their field metadata.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class RuleFailure:
    """One failed rule on one field, as reported by a rule engine.

    Attributes:
        field: Field name as declared on the request type.
        rule: Name of the violated rule (e.g. "missing", "string_too_short").
        detail: Engine-provided description, used when no message is catalogued.
    """

    field: str
    rule: str
    detail: str = ""


class Taggable(ABC):
    """Capability of request types that expose per-field tag metadata."""

    @classmethod
    @abstractmethod
    def tag_namespace(cls) -> str:
        """Return the type-level namespace used for message lookup."""
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def field_tags(cls, field_name: str) -> Mapping[str, str]:
        """Return the tags declared on ``field_name`` (empty if none)."""
        raise NotImplementedError


class RuleEngine(ABC):
    """Port that evaluates declared field rules on an object."""

    @abstractmethod
    def check(self, target: object) -> list[RuleFailure]:
        """Return every rule failure, in the order the engine reports them.

        Raises:
            NotValidatableError: If ``target`` cannot be evaluated at all.
        """
        raise NotImplementedError


class Translator(ABC):
    """Port that resolves a violated rule to a client-facing message."""

    @abstractmethod
    def translate(self, target: object, failure: RuleFailure) -> str:
        """Return a non-empty message for ``failure`` on ``target``."""
        raise NotImplementedError
