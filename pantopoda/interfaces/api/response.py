"""
JSON API response rendering.

Every API response body has the shape ``{"code": <code>, ...payload}``
where empty payload fields are left out. The status is passed either as
a StatusCode or by name through the status table, which replaces one
helper per HTTP status.
"""

from typing import Any, Mapping, Optional

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from pantopoda.domain.http.status import StatusCode, status_for

ResponseHeader = dict[str, str]


class Payload(BaseModel):
    """Placeholder for an API response body."""

    message: str = ""
    data: Any = None

    def to_map(self) -> dict[str, Any]:
        """Return the non-empty payload fields."""
        return {
            key: value
            for key, value in self.model_dump(mode="json").items()
            if not _is_empty(value)
        }


def respond(
    code: str,
    status: StatusCode,
    payload: Optional[Payload] = None,
    *headers: Mapping[str, str],
) -> JSONResponse:
    """Build the JSON response for ``status``.

    Args:
        code: Application-level code placed under ``"code"``.
        status: HTTP status of the response.
        payload: Message and data merged into the body.
        headers: Header mappings, merged in order (later ones win).
    """
    response_header: ResponseHeader = {}
    for header in headers:
        response_header.update(header)

    body: dict[str, Any] = {"code": code}
    if payload is not None:
        body.update(payload.to_map())

    return JSONResponse(status_code=int(status), content=body, headers=response_header)


def respond_with(
    status_name: str,
    code: str,
    payload: Optional[Payload] = None,
    *headers: Mapping[str, str],
) -> JSONResponse:
    """Build the JSON response for a named status such as "not_found".

    Raises:
        UnknownStatusError: If ``status_name`` is not in the status table.
    """
    return respond(code, status_for(status_name), payload, *headers)


def _is_empty(value: Any) -> bool:
    # Zero and False are real data; only missing values and empty containers drop.
    if value is None:
        return True
    if isinstance(value, (str, list, dict, tuple, set)):
        return len(value) == 0
    return False
