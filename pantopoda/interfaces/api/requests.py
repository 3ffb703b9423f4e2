"""
Base class for typed incoming request payloads.

Request types subclass BaseRequest and declare their rules with pydantic
``Field`` constraints. Per-field tags go in ``json_schema_extra``:

    class SignUpRequest(BaseRequest):
        UserName: str = Field(..., min_length=3, json_schema_extra={"label": "user name"})
"""

from typing import Mapping

from pydantic import BaseModel, ConfigDict

from pantopoda.domain.validation.ports import Taggable
from pantopoda.shared.naming import to_snake


class BaseRequest(BaseModel, Taggable):
    """Pydantic model exposing its field metadata as tags."""

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def tag_namespace(cls) -> str:
        """Snake_case of the model title, or of the class name."""
        return to_snake(cls.model_config.get("title") or cls.__name__)

    @classmethod
    def field_tags(cls, field_name: str) -> Mapping[str, str]:
        info = cls.model_fields.get(field_name)
        if info is None or not isinstance(info.json_schema_extra, dict):
            return {}
        return {key: str(value) for key, value in info.json_schema_extra.items()}
