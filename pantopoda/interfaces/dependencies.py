"""
Dependency injection for pantopoda components.

Provides FastAPI-compatible dependency functions that wire the
infrastructure adapters into the client and the request validator.
This is the composition root.
"""

from functools import lru_cache
from pathlib import Path

from pantopoda.application.validation.validate_request import RequestValidator
from pantopoda.core.config import settings
from pantopoda.domain.validation.ports import Translator
from pantopoda.infrastructure.http.client import Client
from pantopoda.infrastructure.validation.catalog_translator import CatalogTranslator
from pantopoda.infrastructure.validation.pydantic_rule_engine import PydanticRuleEngine


@lru_cache(maxsize=1)
def get_translator() -> Translator:
    """Build the message translator once per process."""
    if settings.messages_path:
        return CatalogTranslator.from_file(Path(settings.messages_path))
    return CatalogTranslator()


def get_request_validator() -> RequestValidator:
    """Build RequestValidator with its infrastructure dependencies."""
    return RequestValidator(
        rule_engine=PydanticRuleEngine(),
        translator=get_translator(),
    )


def get_client() -> Client:
    """Build the outbound Client with configured default headers."""
    return Client(default_headers={"User-Agent": settings.get_user_agent()})
