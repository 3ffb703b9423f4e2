"""
Request and response envelopes for outbound JSON calls.

A Request bundles what the caller wants to send. A Response holds what
came back from one completed wire exchange. Both are plain value objects;
the client is the only thing that turns one into the other.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, TypeVar

from pydantic import PydanticSchemaGenerationError, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError, to_json

from pantopoda.domain.http.errors import DecodeError, PayloadEncodingError
from pantopoda.domain.http.query import QueryParams, RequestHeaders
from pantopoda.domain.http.status import StatusCode

T = TypeVar("T")

EMPTY_BODY = b"{}"


@dataclass
class Request:
    """Description of one outbound call.

    Attributes:
        payload: JSON-serializable body, or None when the call has no body.
        query: Query parameters appended to the endpoint.
        headers: Headers sent verbatim.
    """

    payload: Any = None
    query: QueryParams = field(default_factory=QueryParams)
    headers: RequestHeaders = field(default_factory=dict)

    def has_body(self) -> bool:
        """Return True when a payload was supplied."""
        return self.payload is not None

    def body(self) -> bytes:
        """Serialize the payload to JSON bytes.

        A request without a payload still sends ``{}`` so the remote
        always receives valid JSON.

        Raises:
            PayloadEncodingError: If the payload cannot be encoded as JSON.
        """
        if not self.has_body():
            return EMPTY_BODY
        try:
            return to_json(self.payload)
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise PayloadEncodingError(str(exc)) from exc


@dataclass(frozen=True)
class Response:
    """Outcome of one completed wire exchange.

    Decoding never consumes ``body``; it can be decoded again into a
    different shape.
    """

    body: bytes
    status: StatusCode
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(self.headers))

    def decode(self, shape: type[T]) -> T:
        """Decode the JSON body into ``shape``.

        ``shape`` is anything pydantic can validate against: a model,
        a dataclass, ``dict``, ``list[int]``, ``typing.Any`` ...

        Raises:
            DecodeError: If the body is not JSON, does not fit ``shape``,
                or ``shape`` is a type pydantic cannot validate.
        """
        try:
            return TypeAdapter(shape).validate_json(self.body)
        except (PydanticValidationError, PydanticSchemaGenerationError) as exc:
            raise DecodeError(shape, str(exc)) from exc

    def json(self) -> Any:
        """Decode the body without a target shape."""
        return self.decode(Any)

    def to_string(self) -> str:
        """Return the raw body as text, whether or not it is JSON."""
        return self.body.decode("utf-8", errors="replace")

    def __str__(self) -> str:
        return self.to_string()
