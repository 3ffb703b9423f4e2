"""
HTTP domain: status classification, query encoding, envelopes and wire errors.
"""

from pantopoda.domain.http.envelopes import Request, Response
from pantopoda.domain.http.errors import (
    DecodeError,
    PantopodaError,
    PayloadEncodingError,
    ResponseError,
    TransportError,
    UnknownStatusError,
)
from pantopoda.domain.http.query import QueryParams, RequestHeaders, apply_headers
from pantopoda.domain.http.status import STATUS_CODES, StatusCode, status_for

__all__ = [
    "DecodeError",
    "PantopodaError",
    "PayloadEncodingError",
    "QueryParams",
    "Request",
    "RequestHeaders",
    "Response",
    "ResponseError",
    "STATUS_CODES",
    "StatusCode",
    "TransportError",
    "UnknownStatusError",
    "apply_headers",
    "status_for",
]
