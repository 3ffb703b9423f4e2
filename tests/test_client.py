"""
Tests for the outbound JSON client.

The wire is replaced with httpx.MockTransport; no network calls.
"""

import json

import httpx
import pytest
from pydantic import BaseModel

from pantopoda.domain.http.envelopes import Request
from pantopoda.domain.http.errors import PayloadEncodingError, ResponseError, TransportError
from pantopoda.domain.http.query import QueryParams
from pantopoda.infrastructure.http.client import Client

BASE_URL = "https://api.example.com"


class Widget(BaseModel):
    id: int
    name: str


class Recorder:
    """Mock transport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 200, payload: object = None) -> None:
        self.status_code = status_code
        self.payload = {"id": 7, "name": "widget"} if payload is None else payload
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload, headers={"X-Trace": "t-1"})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def _client(handler, **kwargs) -> Client:
    return Client(transport=httpx.MockTransport(handler), **kwargs)


class TestClientRequest:
    """Tests for building and sending the wire request."""

    def test_empty_request_sends_empty_json_object(self) -> None:
        """Without payload the body is {} and the endpoint is untouched."""
        recorder = Recorder()
        _client(recorder).get(f"{BASE_URL}/widgets")

        assert recorder.last.method == "GET"
        assert recorder.last.content == b"{}"
        assert recorder.last.url.query == b""
        assert recorder.last.headers["Content-Type"] == "application/json"

    def test_payload_is_sent_as_json(self) -> None:
        """The payload is serialized into the request body."""
        recorder = Recorder()
        _client(recorder).post(f"{BASE_URL}/widgets", Request(payload={"name": "widget"}))

        assert recorder.last.method == "POST"
        assert json.loads(recorder.last.content) == {"name": "widget"}

    def test_query_is_appended(self) -> None:
        """A non-empty query is appended after a question mark."""
        recorder = Recorder()
        query = QueryParams({"tag": ["a", "b"], "limit": ["10"]})
        _client(recorder).get(f"{BASE_URL}/widgets", Request(query=query))

        params = recorder.last.url.params
        assert params.get_list("tag[]") == ["a", "b"]
        assert params.get("limit") == "10"

    def test_query_is_normalized_by_httpx(self) -> None:
        """Spaces go out percent-encoded while array brackets are kept."""
        recorder = Recorder()
        query = QueryParams({"tag": ["a", "b"], "q": ["a b"]})
        _client(recorder).get(f"{BASE_URL}/widgets", Request(query=query))

        assert recorder.last.url.raw_path == b"/widgets?tag[]=a&tag[]=b&q=a%20b"

    def test_query_without_values_adds_no_question_mark(self) -> None:
        """Keys with no values leave the endpoint untouched."""
        recorder = Recorder()
        _client(recorder).get(f"{BASE_URL}/widgets", Request(query=QueryParams({"a": []})))

        assert recorder.last.url.raw_path == b"/widgets"
        assert str(recorder.last.url) == f"{BASE_URL}/widgets"

    def test_headers_are_applied(self) -> None:
        """Request headers are sent and override default headers."""
        recorder = Recorder()
        client = _client(recorder, default_headers={"User-Agent": "pantopoda/test"})
        client.get(
            f"{BASE_URL}/widgets",
            Request(headers={"X-Token": "abc", "user-agent": "custom/1.0"}),
        )

        assert recorder.last.headers["X-Token"] == "abc"
        assert recorder.last.headers["User-Agent"] == "custom/1.0"

    @pytest.mark.parametrize("method", ["get", "post", "put", "patch", "delete"])
    def test_convenience_methods(self, method: str) -> None:
        """Each shortcut sends its own HTTP method."""
        recorder = Recorder()
        getattr(_client(recorder), method)(f"{BASE_URL}/widgets/7")
        assert recorder.last.method == method.upper()

    def test_unencodable_payload_is_not_sent(self) -> None:
        """Encoding failures are raised before anything reaches the wire."""
        recorder = Recorder()
        with pytest.raises(PayloadEncodingError):
            _client(recorder).post(f"{BASE_URL}/widgets", Request(payload={"bad": object()}))
        assert recorder.requests == []


class TestClientResponse:
    """Tests for wrapping wire responses."""

    def test_success_returns_decodable_response(self) -> None:
        """A 2xx answer comes back as a Response envelope."""
        response = _client(Recorder()).get(f"{BASE_URL}/widgets/7")

        assert response.status.value == 200
        assert response.status.is_success()
        assert response.headers["x-trace"] == "t-1"
        assert response.decode(Widget) == Widget(id=7, name="widget")

    def test_not_found_carries_response_and_error(self) -> None:
        """A 404 raises ResponseError that still holds the decodable Response."""
        recorder = Recorder(status_code=404, payload={"error": "missing"})

        with pytest.raises(ResponseError) as exc_info:
            _client(recorder).get(f"{BASE_URL}/widgets/8")

        error = exc_info.value
        assert error.status == "404 Not Found"
        assert error.response is not None
        assert error.response.status.is_client_error()
        assert error.response.decode(dict) == {"error": "missing"}
        assert json.loads(error.payload) == {"error": "missing"}
        assert str(error).startswith("404 Not Found: ")

    def test_server_error_is_reported(self) -> None:
        """5xx answers are wire failures too."""
        with pytest.raises(ResponseError) as exc_info:
            _client(Recorder(status_code=503, payload={})).get(f"{BASE_URL}/widgets")
        assert exc_info.value.response.status.value == 503

    def test_redirects_are_followed(self) -> None:
        """A redirect is followed and only the final answer is returned."""

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/old":
                return httpx.Response(302, headers={"Location": f"{BASE_URL}/new"})
            return httpx.Response(200, json={"moved": True})

        response = _client(handler).get(f"{BASE_URL}/old")
        assert response.json() == {"moved": True}

    def test_transport_failure_raises_transport_error(self) -> None:
        """Connection failures raise TransportError without a Response."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError) as exc_info:
            _client(handler).get(f"{BASE_URL}/widgets")

        assert exc_info.value.method == "GET"
        assert isinstance(exc_info.value.cause, httpx.ConnectError)
