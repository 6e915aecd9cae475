"""Caller-paced waiting on async jobs."""

from collections.abc import Callable
from typing import Any

from dbxteam_sdk._internal.jobs.models import AsyncJobId, Complete, Failed, InProgress
from dbxteam_sdk.exceptions import (
    AsyncJobFailedError,
    AsyncJobPendingError,
    DbxTeamProtocolError,
)


def wait_for_job(
    launch: Complete[Any] | AsyncJobId,
    poll: Callable[[str], Complete[Any] | InProgress | Failed[Any]],
    *,
    wait: Callable[[int], None],
    max_polls: int | None = None,
) -> Any:
    """Drive an async job from its launch result to a terminal state.

    A ``Complete`` launch result is returned without polling. Otherwise
    ``poll`` is called with the job id until it reports ``Complete`` or
    ``Failed``; ``poll`` is never called again after a terminal state.

    Args:
        launch: Result of the launching route.
        poll: Calls the job status route for a job id.
        wait: Called with the number of polls made so far between two
            in-progress polls. Backoff policy belongs to the caller; pass
            ``lambda attempt: time.sleep(...)`` or similar.
        max_polls: Optional cap on poll calls.

    Returns:
        The ``complete`` value of the terminal state (None for empty jobs).

    Raises:
        AsyncJobFailedError: The job reported ``failed``.
        AsyncJobPendingError: ``max_polls`` polls all reported in progress.
    """
    if isinstance(launch, Complete):
        return launch.complete
    if not isinstance(launch, AsyncJobId):
        raise DbxTeamProtocolError(f"Unexpected launch result: {launch!r}")

    job_id = launch.async_job_id
    polls = 0
    while True:
        status = poll(job_id)
        polls += 1
        if isinstance(status, Complete):
            return status.complete
        if isinstance(status, Failed):
            raise AsyncJobFailedError(job_id, status.failed)
        if not isinstance(status, InProgress):
            raise DbxTeamProtocolError(f"Unexpected poll result for job {job_id}: {status!r}")
        if max_polls is not None and polls >= max_polls:
            raise AsyncJobPendingError(job_id, polls)
        wait(polls)
