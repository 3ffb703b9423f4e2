"""
Tests for the Request and Response envelopes.
"""

import json

import pytest
from pydantic import BaseModel

from pantopoda.domain.http.envelopes import Request, Response
from pantopoda.domain.http.errors import DecodeError, PayloadEncodingError
from pantopoda.domain.http.status import StatusCode


class Item(BaseModel):
    id: int
    name: str


class Opaque:
    pass


class TestRequestEnvelope:
    """Tests for Request body serialization."""

    def test_no_payload_sends_empty_object(self) -> None:
        """A request without payload serializes to exactly {}."""
        request = Request()
        assert request.has_body() is False
        assert request.body() == b"{}"

    def test_payload_is_json_encoded(self) -> None:
        """A mapping payload is encoded as JSON."""
        request = Request(payload={"name": "widget", "tags": ["a", "b"]})
        assert request.has_body() is True
        assert json.loads(request.body()) == {"name": "widget", "tags": ["a", "b"]}

    def test_model_payload_is_json_encoded(self) -> None:
        """A pydantic model payload is encoded with its fields."""
        body = Request(payload=Item(id=1, name="widget")).body()
        assert json.loads(body) == {"id": 1, "name": "widget"}

    def test_unencodable_payload_raises(self) -> None:
        """A payload that is not JSON serializable fails at serialization."""
        request = Request(payload={"handle": object()})
        with pytest.raises(PayloadEncodingError):
            request.body()

    def test_defaults_are_not_shared(self) -> None:
        """Each envelope gets its own query and headers."""
        first, second = Request(), Request()
        first.query.add("a", "1")
        first.headers["X-Token"] = "abc"
        assert second.query.empty()
        assert second.headers == {}


class TestResponseEnvelope:
    """Tests for Response decoding."""

    def _response(self, body: bytes) -> Response:
        return Response(body=body, status=StatusCode(200), headers={"Content-Type": "application/json"})

    def test_decode_is_repeatable(self) -> None:
        """The same body decodes into two different shapes."""
        response = self._response(b'{"id": 1, "name": "widget"}')
        assert response.decode(Item) == Item(id=1, name="widget")
        assert response.decode(dict) == {"id": 1, "name": "widget"}
        assert response.json() == {"id": 1, "name": "widget"}

    def test_shape_mismatch_raises(self) -> None:
        """A body that does not fit the shape raises DecodeError."""
        response = self._response(b'{"id": "not-a-number"}')
        with pytest.raises(DecodeError) as exc_info:
            response.decode(Item)
        assert exc_info.value.target is Item

    def test_unsupported_shape_raises(self) -> None:
        """A shape pydantic has no schema for raises DecodeError too."""
        response = self._response(b"{}")
        with pytest.raises(DecodeError) as exc_info:
            response.decode(Opaque)
        assert exc_info.value.target is Opaque

    def test_invalid_json_raises_but_text_is_kept(self) -> None:
        """Non-JSON bodies fail to decode but remain readable as text."""
        response = self._response(b"<html>oops</html>")
        with pytest.raises(DecodeError):
            response.json()
        assert response.to_string() == "<html>oops</html>"
        assert str(response) == "<html>oops</html>"

    def test_headers_are_read_only(self) -> None:
        """Response headers cannot be modified."""
        response = self._response(b"{}")
        with pytest.raises(TypeError):
            response.headers["X-New"] = "1"  # type: ignore[index]
