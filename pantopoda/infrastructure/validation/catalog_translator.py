"""
Message catalog translator.

Resolves a rule failure to a message by looking up, most specific first:

    <namespace>.<field>.<rule>
    <field>.<rule>
    <rule>

``{field}`` in a message is replaced with the field's ``label`` tag when
the request type declares one, otherwise with its snake_case name. When
no key matches, the engine's own description of the failure is used, or
the most specific key itself when the engine gave none.
"""

import json
import logging
from pathlib import Path
from typing import Mapping, Optional

from pantopoda.domain.validation.ports import RuleFailure, Taggable, Translator
from pantopoda.shared.naming import to_snake

logger = logging.getLogger(__name__)

LABEL_TAG = "label"

DEFAULT_MESSAGES: dict[str, str] = {
    "missing": "The {field} field is required.",
    "string_too_short": "The {field} field is too short.",
    "string_too_long": "The {field} field is too long.",
    "string_pattern_mismatch": "The {field} field has an invalid format.",
    "string_type": "The {field} field must be a string.",
    "int_parsing": "The {field} field must be an integer.",
    "int_type": "The {field} field must be an integer.",
    "float_parsing": "The {field} field must be a number.",
    "bool_parsing": "The {field} field must be a boolean.",
    "greater_than": "The {field} field is too small.",
    "greater_than_equal": "The {field} field is too small.",
    "less_than": "The {field} field is too large.",
    "less_than_equal": "The {field} field is too large.",
    "too_short": "The {field} field has too few items.",
    "too_long": "The {field} field has too many items.",
    "value_error": "The {field} field is invalid.",
    "enum": "The {field} field must be one of the allowed values.",
    "uuid_parsing": "The {field} field must be a valid UUID.",
    "date_from_datetime_parsing": "The {field} field must be a valid date.",
    "datetime_from_date_parsing": "The {field} field must be a valid datetime.",
}


class CatalogTranslator(Translator):
    """Translator over an in-memory message catalog.

    Args:
        messages: Catalog entries. Merged over DEFAULT_MESSAGES.
    """

    def __init__(self, messages: Optional[Mapping[str, str]] = None) -> None:
        self._messages = dict(DEFAULT_MESSAGES)
        if messages:
            self._messages.update(messages)

    @classmethod
    def from_file(cls, path: Path) -> "CatalogTranslator":
        """Load catalog entries from a flat JSON object of key -> message."""
        with Path(path).open(encoding="utf-8") as fh:
            messages = json.load(fh)
        logger.info("Loaded %d validation messages from %s", len(messages), path)
        return cls(messages)

    def translate(self, target: object, failure: RuleFailure) -> str:
        namespace = _namespace(target)
        field_name = to_snake(failure.field)
        keys = [
            f"{namespace}.{field_name}.{failure.rule}",
            f"{field_name}.{failure.rule}",
            failure.rule,
        ]
        for key in keys:
            message = self._messages.get(key)
            if message:
                return message.replace("{field}", _label(target, failure.field, field_name))
        return failure.detail or keys[0]


def _namespace(target: object) -> str:
    if isinstance(target, Taggable):
        return target.tag_namespace()
    return to_snake(type(target).__name__)


def _label(target: object, field: str, default: str) -> str:
    # Tags only exist for top-level fields.
    if isinstance(target, Taggable) and "." not in field:
        return target.field_tags(field).get(LABEL_TAG, default)
    return default
