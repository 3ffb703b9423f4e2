"""
Rule engine adapter backed by pydantic.

Field rules are the constraints declared on a pydantic model (or on a
dataclass through ``Annotated[..., Field(...)]``). Checking re-runs the
type's validator over the object's current field values and reports
every failure pydantic finds.
"""

import dataclasses
import logging
from typing import Any

from pydantic import BaseModel, PydanticSchemaGenerationError, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from pantopoda.domain.validation.errors import NotValidatableError
from pantopoda.domain.validation.ports import RuleEngine, RuleFailure

logger = logging.getLogger(__name__)


class PydanticRuleEngine(RuleEngine):
    """Evaluates pydantic models and dataclass instances.

    Failures come back in pydantic's order, which follows field
    declaration order. Anything that is not a model or dataclass
    instance is not a valid target.
    """

    def check(self, target: object) -> list[RuleFailure]:
        try:
            self._revalidate(target)
        except PydanticValidationError as exc:
            names = _field_names_by_alias(target)
            return [
                RuleFailure(
                    field=_location(error["loc"], names),
                    rule=error["type"],
                    detail=error["msg"],
                )
                for error in exc.errors()
            ]
        return []

    def _revalidate(self, target: object) -> None:
        if isinstance(target, BaseModel):
            # __dict__ is keyed by field name, not alias.
            type(target).model_validate(dict(target.__dict__), by_name=True)
            return

        if dataclasses.is_dataclass(target) and not isinstance(target, type):
            values = {f.name: getattr(target, f.name) for f in dataclasses.fields(target)}
            try:
                adapter: TypeAdapter[Any] = TypeAdapter(type(target))
            except PydanticSchemaGenerationError as exc:
                logger.debug("No schema for %s: %s", type(target).__name__, exc)
                raise NotValidatableError(target) from exc
            adapter.validate_python(values)
            return

        raise NotValidatableError(target)


def _field_names_by_alias(target: object) -> dict[str, str]:
    if not isinstance(target, BaseModel):
        return {}
    return {
        info.alias: name
        for name, info in type(target).model_fields.items()
        if info.alias and info.alias != name
    }


def _location(loc: tuple, names: dict[str, str]) -> str:
    """Join a pydantic error location into a dotted field path.

    The top-level part is reported by declared field name, never by alias.
    """
    parts = [str(part) for part in loc]
    if parts:
        parts[0] = names.get(parts[0], parts[0])
    return ".".join(parts)
