"""
HTTP status codes and their RFC classes.

StatusCode is an immutable value object around the numeric code.
STATUS_CODES is the single table from symbolic status name to code;
callers that need "respond with this status" resolve through it instead
of one helper per status.
"""

from dataclasses import dataclass
from http import HTTPStatus

from pantopoda.domain.http.errors import UnknownStatusError
from pantopoda.shared.naming import to_snake


@dataclass(frozen=True, order=True)
class StatusCode:
    """A numeric HTTP status code.

    Any integer is representable. Codes outside the registered set
    (plus the non-standard 444/451/499/599) are only classified by
    their numeric band.
    """

    value: int

    def is_informational(self) -> bool:
        """Return True for 1xx codes."""
        return 100 <= self.value < 200

    def is_success(self) -> bool:
        """Return True for 2xx codes."""
        return 200 <= self.value < 300

    def is_redirection(self) -> bool:
        """Return True for 3xx codes."""
        return 300 <= self.value < 400

    def is_client_error(self) -> bool:
        """Return True for 4xx codes."""
        return 400 <= self.value < 500

    def is_internal_error(self) -> bool:
        """Return True for codes strictly greater than 500.

        500 itself is not matched by this predicate.
        """
        return self.value > 500

    @property
    def reason(self) -> str:
        """Standard reason phrase, or an empty string for unknown codes."""
        try:
            return HTTPStatus(self.value).phrase
        except ValueError:
            name = _NAMES_BY_CODE.get(self.value)
            return name.replace("_", " ").title() if name else ""

    def __int__(self) -> int:
        """Return the plain integer for wire-level APIs."""
        return self.value

    def __str__(self) -> str:
        return f"{self.value} {self.reason}".rstrip()


STATUS_CODES: dict[str, StatusCode] = {
    # Informational
    "continue": StatusCode(100),
    "switching_protocols": StatusCode(101),
    "processing": StatusCode(102),
    # Success
    "ok": StatusCode(200),
    "created": StatusCode(201),
    "accepted": StatusCode(202),
    "non_authoritative_information": StatusCode(203),
    "no_content": StatusCode(204),
    "reset_content": StatusCode(205),
    "partial_content": StatusCode(206),
    "multi_status": StatusCode(207),
    "already_reported": StatusCode(208),
    "im_used": StatusCode(226),
    # Redirection
    "multiple_choices": StatusCode(300),
    "moved_permanently": StatusCode(301),
    "found": StatusCode(302),
    "see_other": StatusCode(303),
    "not_modified": StatusCode(304),
    "use_proxy": StatusCode(305),
    "temporary_redirect": StatusCode(307),
    "permanent_redirect": StatusCode(308),
    # Client error
    "bad_request": StatusCode(400),
    "unauthorized": StatusCode(401),
    "payment_required": StatusCode(402),
    "forbidden": StatusCode(403),
    "not_found": StatusCode(404),
    "method_not_allowed": StatusCode(405),
    "not_acceptable": StatusCode(406),
    "proxy_authentication_required": StatusCode(407),
    "request_timeout": StatusCode(408),
    "conflict": StatusCode(409),
    "gone": StatusCode(410),
    "length_required": StatusCode(411),
    "precondition_failed": StatusCode(412),
    "payload_too_large": StatusCode(413),
    "request_uri_too_long": StatusCode(414),
    "unsupported_media_type": StatusCode(415),
    "requested_range_not_satisfiable": StatusCode(416),
    "expectation_failed": StatusCode(417),
    "im_a_teapot": StatusCode(418),
    "misdirected_request": StatusCode(421),
    "unprocessable_entity": StatusCode(422),
    "locked": StatusCode(423),
    "failed_dependency": StatusCode(424),
    "upgrade_required": StatusCode(426),
    "precondition_required": StatusCode(428),
    "too_many_requests": StatusCode(429),
    "request_header_fields_too_large": StatusCode(431),
    "connection_closed_without_response": StatusCode(444),
    "unavailable_for_legal_reasons": StatusCode(451),
    "client_closed_request": StatusCode(499),
    # Server error
    "internal_server_error": StatusCode(500),
    "not_implemented": StatusCode(501),
    "bad_gateway": StatusCode(502),
    "service_unavailable": StatusCode(503),
    "gateway_timeout": StatusCode(504),
    "http_version_not_supported": StatusCode(505),
    "variant_also_negotiates": StatusCode(506),
    "insufficient_storage": StatusCode(507),
    "loop_detected": StatusCode(508),
    "not_extended": StatusCode(510),
    "network_authentication_required": StatusCode(511),
    "network_connect_timeout_error": StatusCode(599),
}

# Alternate spellings used by older callers. Listed after the canonical
# names so the reverse lookup keeps the canonical one.
STATUS_CODES.update(
    {
        "no_authoritative_information": STATUS_CODES["non_authoritative_information"],
        "proxy_auth_required": STATUS_CODES["proxy_authentication_required"],
        "version_not_supported": STATUS_CODES["http_version_not_supported"],
    }
)

_NAMES_BY_CODE: dict[int, str] = {}
for _name, _status in STATUS_CODES.items():
    _NAMES_BY_CODE.setdefault(_status.value, _name)


def status_for(name: str) -> StatusCode:
    """Resolve a symbolic status name to its StatusCode.

    Accepts snake_case ("not_found"), CamelCase ("NotFound") or any
    letter case of either.

    Raises:
        UnknownStatusError: If the name is not in the status table.
    """
    key = to_snake(name)
    try:
        return STATUS_CODES[key]
    except KeyError:
        raise UnknownStatusError(name) from None
