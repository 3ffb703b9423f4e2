"""
Outbound JSON HTTP client.

Turns a Request envelope into one wire exchange over httpx and wraps the
outcome in a Response envelope.

Every call opens its own httpx.Client, so a Client instance carries only
its immutable configuration and can be shared between threads.

No timeout is set here: a call blocks until the transport itself returns
or gives up. No retries. The response body is read fully into memory.

The query string is built verbatim, but httpx normalizes the URL before
sending it: characters that are not valid in a query (a space, for
instance) go out percent-encoded as ``%20``, while ``[]`` in array keys is
left as is.
"""

import logging
from typing import Mapping, Optional

import httpx

from pantopoda.domain.http.envelopes import Request, Response
from pantopoda.domain.http.errors import ResponseError, TransportError
from pantopoda.domain.http.query import apply_headers
from pantopoda.domain.http.status import StatusCode

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}

FAILURE_THRESHOLD = 300


class Client:
    """Sends Request envelopes and returns Response envelopes.

    Args:
        default_headers: Headers sent on every call unless the Request sets
            the same header.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``
            in tests. Defaults to httpx's own transport.
    """

    def __init__(
        self,
        default_headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._default_headers = dict(DEFAULT_HEADERS)
        if default_headers:
            self._default_headers.update(default_headers)
        self._transport = transport

    def request(
        self, method: str, endpoint: str, request: Optional[Request] = None
    ) -> Response:
        """Send ``request`` to ``endpoint`` with the given HTTP method.

        Args:
            method: HTTP method, e.g. "GET".
            endpoint: Absolute URL without a query string.
            request: Payload, query and headers. An empty Request is used
                when omitted.

        Returns:
            The Response envelope of a call answered with a status below 300.

        Raises:
            PayloadEncodingError: If the payload cannot be encoded as JSON.
            TransportError: If no response was received.
            ResponseError: If the status code is 300 or above. The populated
                Response is available on ``error.response``.
        """
        request = request if request is not None else Request()
        body = request.body()

        query_string = request.query.to_string()
        if query_string:
            endpoint = f"{endpoint}?{query_string}"

        headers = httpx.Headers(self._default_headers)
        apply_headers(request.headers, headers)

        try:
            with httpx.Client(
                transport=self._transport, timeout=None, follow_redirects=True
            ) as client:
                wire_request = client.build_request(
                    method, endpoint, content=body, headers=headers
                )
                wire_response = client.send(wire_request)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(method, endpoint, exc) from exc

        status = StatusCode(wire_response.status_code)
        response = Response(
            body=wire_response.content,
            status=status,
            headers=httpx.Headers(wire_response.headers),
        )
        logger.debug("%s %s -> %d", method, endpoint, status.value)

        if status.value >= FAILURE_THRESHOLD:
            status_line = f"{wire_response.status_code} {wire_response.reason_phrase}"
            raise ResponseError(status_line.rstrip(), wire_response.content, response)

        return response

    def get(self, endpoint: str, request: Optional[Request] = None) -> Response:
        """Send a GET request to ``endpoint``."""
        return self.request("GET", endpoint, request)

    def post(self, endpoint: str, request: Optional[Request] = None) -> Response:
        """Send a POST request to ``endpoint``."""
        return self.request("POST", endpoint, request)

    def put(self, endpoint: str, request: Optional[Request] = None) -> Response:
        """Send a PUT request to ``endpoint``."""
        return self.request("PUT", endpoint, request)

    def patch(self, endpoint: str, request: Optional[Request] = None) -> Response:
        """Send a PATCH request to ``endpoint``."""
        return self.request("PATCH", endpoint, request)

    def delete(self, endpoint: str, request: Optional[Request] = None) -> Response:
        """Send a DELETE request to ``endpoint``."""
        return self.request("DELETE", endpoint, request)
