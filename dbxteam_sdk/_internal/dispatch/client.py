"""Route dispatcher: one generic executor for every RPC route."""

import json
import sys
from typing import Any

import httpx

from dbxteam_sdk._internal.dispatch.codec import (
    BODY_PREVIEW_LENGTH,
    decode_envelope,
    decode_result,
    decode_route_error,
    encode_argument,
)
from dbxteam_sdk._internal.dispatch.models import (
    JSON_CONTENT_TYPE,
    CallResult,
    Failure,
    Route,
    Success,
    T,
)
from dbxteam_sdk._internal.dispatch.redaction import redact_headers, redact_payload
from dbxteam_sdk.exceptions import (
    DbxTeamAPIError,
    DbxTeamApplicationError,
    DbxTeamBadRequestError,
    DbxTeamError,
    DbxTeamTransportError,
)


class RouteDispatcher:
    """Executes routes over an httpx client and returns a CallResult.

    The dispatcher never raises for a failed call: every failure comes back
    as a ``Failure`` holding an exception from ``dbxteam_sdk.exceptions``.
    It keeps no state between calls, performs no retries and caches nothing.
    """

    def __init__(self, http_client: httpx.Client, *, verbose: bool = False) -> None:
        """Initialize the dispatcher.

        Args:
            http_client: Transport used for every request. Base URL,
                credentials and timeouts are configured on it.
            verbose: Log requests and responses to stderr.
        """
        self._http = http_client
        self._verbose = verbose

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if verbose mode is enabled."""
        if self._verbose:
            print(f"[dbxteam-sdk] {message}", file=sys.stderr)

    def _log_argument(self, body: bytes) -> None:
        """Log the encoded argument with credential-like keys masked."""
        if not self._verbose:
            return
        decoded = json.loads(body)
        if isinstance(decoded, dict):
            decoded = redact_payload(decoded)
        self._log_debug(f"arg: {json.dumps(decoded)}")

    def call(self, route: Route[T], arg: Any = None) -> CallResult[T]:
        """Execute one route.

        Args:
            route: Descriptor of the route to call.
            arg: Argument value; ignored for routes without a request body.

        Returns:
            ``Success`` with the decoded value, or ``Failure`` with one of
            DbxTeamTransportError, DbxTeamBadRequestError,
            DbxTeamApplicationError, DbxTeamAPIError or DbxTeamProtocolError.
        """
        try:
            return Success(self._execute(route, arg))
        except DbxTeamError as e:
            self._log_debug(f"{route.name} failed: {type(e).__name__}: {e}")
            return Failure(e)

    def _execute(self, route: Route[T], arg: Any) -> T:
        body = encode_argument(route, arg)
        headers: dict[str, str] = {}
        if body is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE
            self._log_argument(body)

        request = self._http.build_request("POST", route.url_path, content=body, headers=headers)
        if self._verbose:
            headers_log = redact_headers(dict(request.headers))
            self._log_debug(f"req: POST {request.url} headers={headers_log}")
        try:
            response = self._http.send(request)
        except httpx.RequestError as e:
            raise DbxTeamTransportError(f"{route.name}: {e}", cause=e) from e

        content = response.content
        if self._verbose:
            self._log_debug(f"resp: {response.status_code}")
            preview = content[:BODY_PREVIEW_LENGTH].decode("utf-8", errors="replace")
            self._log_debug(f"body: {preview}")

        status = response.status_code
        if status == 200:
            return decode_result(route, content)
        if status == 409:
            envelope = decode_envelope(content, status)
            raise DbxTeamApplicationError(
                envelope.error_summary,
                route=route.name,
                error=decode_route_error(route, envelope, content),
                user_message=envelope.user_message,
            )
        if status == 400:
            # Rejected before routing; the body is plain text, not an envelope.
            raise DbxTeamBadRequestError(content.decode("utf-8", errors="replace"))
        envelope = decode_envelope(content, status)
        raise DbxTeamAPIError(
            envelope.error_summary,
            status_code=status,
            error_summary=envelope.error_summary,
            user_message=envelope.user_message,
        )
