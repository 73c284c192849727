"""
Response envelope builder.

Every response leaves the API in one of two shapes:

    {"success": true,  "data": <payload>}
    {"success": false, "error": {"code": ..., "message": ..., "details"?: ...}}

Builders are pure: they serialize the body once and never raise for
payloads FastAPI can encode. ``details`` is omitted from the error body
unless it is given.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from starlette.responses import Response

JSON_MEDIA_TYPE = "application/json"
HTTP_200 = 200
HTTP_500 = 500
INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


@dataclass(frozen=True)
class ResponseEnvelope:
    """Status code plus serialized JSON body of a single response."""

    status_code: int
    body: str

    def to_response(self) -> Response:
        """Render the envelope as a Starlette response."""
        return Response(
            content=self.body,
            status_code=self.status_code,
            media_type=JSON_MEDIA_TYPE,
        )


def _serialize(body: dict[str, Any]) -> str:
    return json.dumps(jsonable_encoder(body, by_alias=True))


def success(payload: Any, status_code: int = HTTP_200) -> ResponseEnvelope:
    """Wrap a success payload.

    Args:
        payload: Operation-specific data. Dataclasses and Pydantic models
            are encoded as JSON objects (Pydantic aliases are honoured).
        status_code: HTTP status code of the response.
    """
    return ResponseEnvelope(
        status_code=status_code,
        body=_serialize({"success": True, "data": payload}),
    )


def error(
    message: str,
    status_code: int = HTTP_500,
    error_code: str = INTERNAL_SERVER_ERROR,
    details: Optional[Any] = None,
) -> ResponseEnvelope:
    """Wrap an error.

    Args:
        message: Caller-safe error message.
        status_code: HTTP status code of the response.
        error_code: Stable machine-readable code.
        details: Extra structured data, included verbatim when not None.
    """
    error_body: dict[str, Any] = {"code": error_code, "message": message}
    if details is not None:
        error_body["details"] = details
    return ResponseEnvelope(
        status_code=status_code,
        body=_serialize({"success": False, "error": error_body}),
    )
