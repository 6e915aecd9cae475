"""Route dispatch for the dbxteam SDK.

WARNING: This is an internal module used by ``TeamClient``.
Do not call directly from user code.
"""

from dbxteam_sdk._internal.dispatch.client import RouteDispatcher
from dbxteam_sdk._internal.dispatch.models import (
    ApiErrorEnvelope,
    CallResult,
    Failure,
    Route,
    Success,
    TaggedModel,
    UserMessage,
    WireModel,
)

__all__ = [
    "RouteDispatcher",
    "Route",
    "CallResult",
    "Success",
    "Failure",
    "ApiErrorEnvelope",
    "UserMessage",
    "WireModel",
    "TaggedModel",
]
