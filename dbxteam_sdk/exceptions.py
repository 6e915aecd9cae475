"""Public exceptions for the dbxteam SDK.

Every failed call surfaces exactly one of these. The dispatcher hands them
back inside a ``Failure``; ``TeamClient`` methods raise them.
"""

from typing import Any


class DbxTeamError(Exception):
    """Base exception for all dbxteam SDK errors."""


class DbxTeamConfigError(DbxTeamError):
    """Configuration error (missing env vars, invalid config)."""


class DbxTeamTransportError(DbxTeamError):
    """The request did not produce a usable response (network, decoding, redirects).

    The original transport exception is kept on ``cause``.
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class DbxTeamProtocolError(DbxTeamError):
    """A request or response did not match the schema expected for it."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DbxTeamAPIError(DbxTeamError):
    """Error envelope returned by the API.

    Raised as-is for statuses other than 200, 400 and 409. Those never carry
    a route-specific error payload.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        error_summary: str | None = None,
        user_message: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_summary = error_summary if error_summary is not None else message
        self.user_message = user_message


class DbxTeamBadRequestError(DbxTeamAPIError):
    """400 response. The raw body text is the message."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=400, error_summary=message)


class DbxTeamApplicationError(DbxTeamAPIError):
    """409 response: the route rejected a well-formed request."""

    def __init__(
        self,
        message: str,
        *,
        route: str,
        error: Any = None,
        user_message: Any = None,
    ) -> None:
        super().__init__(
            message,
            status_code=409,
            error_summary=message,
            user_message=user_message,
        )
        self.route = route
        self.error = error

    @property
    def tag(self) -> str | None:
        """Discriminant of the route-specific error, if there is one."""
        return getattr(self.error, "tag", None)


class AsyncJobFailedError(DbxTeamError):
    """An async job finished in the failed state."""

    def __init__(self, async_job_id: str, failure: Any = None) -> None:
        super().__init__(f"Async job {async_job_id} failed: {failure}")
        self.async_job_id = async_job_id
        self.failure = failure


class AsyncJobPendingError(DbxTeamError):
    """An async job was still in progress after the allowed number of polls."""

    def __init__(self, async_job_id: str, polls: int) -> None:
        super().__init__(f"Async job {async_job_id} still in progress after {polls} polls")
        self.async_job_id = async_job_id
        self.polls = polls
