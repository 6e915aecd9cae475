"""JSON envelope codec for route arguments, results and errors."""

from typing import Any

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from dbxteam_sdk._internal.dispatch.models import ApiErrorEnvelope, Route
from dbxteam_sdk.exceptions import DbxTeamProtocolError

BODY_PREVIEW_LENGTH = 1000


def _preview(body: bytes) -> str:
    return body[:BODY_PREVIEW_LENGTH].decode("utf-8", errors="replace")


def encode_argument(route: Route[Any], arg: Any) -> bytes | None:
    """Serialize a route argument to a JSON payload.

    Args:
        route: The route being called.
        arg: Argument model instance (or an equivalent dict).

    Returns:
        The JSON bytes, or None when the route takes no request body.

    Raises:
        DbxTeamProtocolError: The argument is structurally not encodable as
            the route's argument type.
    """
    if route.arg_adapter is None:
        return None
    if arg is None:
        raise DbxTeamProtocolError(f"Route {route.name} requires an argument")
    try:
        value = route.arg_adapter.validate_python(arg)
        return route.arg_adapter.dump_json(value, by_alias=True, exclude_none=True)
    except (ValidationError, PydanticSerializationError) as e:
        raise DbxTeamProtocolError(f"Could not encode argument for {route.name}: {e}") from e


def decode_result(route: Route[Any], body: bytes, status_code: int = 200) -> Any:
    """Decode a 200 response body as the route's success type."""
    if route.result_adapter is None:
        return None
    try:
        return route.result_adapter.validate_json(body)
    except ValidationError as e:
        raise DbxTeamProtocolError(
            f"Unexpected response for {route.name}: {e}",
            status_code=status_code,
            body=_preview(body),
        ) from e


def decode_envelope(body: bytes, status_code: int) -> ApiErrorEnvelope:
    """Decode the generic error envelope."""
    try:
        return ApiErrorEnvelope.model_validate_json(body)
    except ValidationError as e:
        raise DbxTeamProtocolError(
            f"Malformed error envelope (status {status_code}): {e}",
            status_code=status_code,
            body=_preview(body),
        ) from e


def decode_route_error(route: Route[Any], envelope: ApiErrorEnvelope, body: bytes) -> Any:
    """Decode the route-specific ``error`` member of a 409 envelope.

    Routes without a structured error always decode to None.
    """
    if route.error_adapter is None:
        return None
    if envelope.error is None:
        raise DbxTeamProtocolError(
            f"Missing error payload for {route.name}",
            status_code=409,
            body=_preview(body),
        )
    try:
        return route.error_adapter.validate_python(envelope.error)
    except ValidationError as e:
        raise DbxTeamProtocolError(
            f"Unexpected error payload for {route.name}: {e}",
            status_code=409,
            body=_preview(body),
        ) from e
