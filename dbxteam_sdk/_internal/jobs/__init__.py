"""Async job protocol: launch results, poll results and waiting."""

from dbxteam_sdk._internal.jobs.models import (
    AsyncJobId,
    Complete,
    Failed,
    GroupsPollError,
    InProgress,
    LaunchEmptyResult,
    PollArg,
    PollEmptyResult,
    PollError,
)
from dbxteam_sdk._internal.jobs.waiter import wait_for_job

__all__ = [
    "AsyncJobId",
    "Complete",
    "Failed",
    "InProgress",
    "LaunchEmptyResult",
    "PollEmptyResult",
    "PollArg",
    "PollError",
    "GroupsPollError",
    "wait_for_job",
]
