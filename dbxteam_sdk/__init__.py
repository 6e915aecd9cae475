"""Dropbox team API SDK for Python.

This SDK provides typed access to the team administration routes.

Public API:
    TeamClient - User-facing client
    routes - Route descriptors for every team route
    models - Argument, result and error models

Internal (system-level, not for direct use):
    _internal.dispatch - Generic route dispatcher
    _internal.jobs - Async job launch/poll protocol
    _internal.pagination - Cursor pagination helpers
"""

from dbxteam_sdk._internal.dispatch.models import CallResult, Failure, Success
from dbxteam_sdk._version import __version__
from dbxteam_sdk.client import TeamClient
from dbxteam_sdk.exceptions import (
    AsyncJobFailedError,
    AsyncJobPendingError,
    DbxTeamAPIError,
    DbxTeamApplicationError,
    DbxTeamBadRequestError,
    DbxTeamConfigError,
    DbxTeamError,
    DbxTeamProtocolError,
    DbxTeamTransportError,
)

__all__ = [
    "__version__",
    "TeamClient",
    "CallResult",
    "Success",
    "Failure",
    "DbxTeamError",
    "DbxTeamConfigError",
    "DbxTeamTransportError",
    "DbxTeamProtocolError",
    "DbxTeamAPIError",
    "DbxTeamBadRequestError",
    "DbxTeamApplicationError",
    "AsyncJobFailedError",
    "AsyncJobPendingError",
]
