"""Pydantic models for the async job launch/poll protocol.

Launch routes answer with either ``complete`` (the work finished within the
request) or ``async_job_id``. Poll routes answer ``in_progress`` until the
job reaches ``complete`` or, for some jobs, ``failed``.
"""

from typing import Annotated, Generic, Literal, TypeVar

from pydantic import Field

from dbxteam_sdk._internal.dispatch.models import TaggedModel, WireModel

T = TypeVar("T")
E = TypeVar("E")

# =============================================================================
# Variants
# =============================================================================


class AsyncJobId(TaggedModel):
    """The server accepted the work and is finishing it in the background."""

    tag: Literal["async_job_id"] = Field(default="async_job_id", alias=".tag")
    async_job_id: str


class Complete(TaggedModel, Generic[T]):
    """Terminal success. ``complete`` is None for jobs without a result."""

    tag: Literal["complete"] = Field(default="complete", alias=".tag")
    complete: T | None = None


class InProgress(TaggedModel):
    """The job is still running; poll again later."""

    tag: Literal["in_progress"] = Field(default="in_progress", alias=".tag")


class Failed(TaggedModel, Generic[E]):
    """Terminal failure reported by the poll route."""

    tag: Literal["failed"] = Field(default="failed", alias=".tag")
    failed: E | None = None


# =============================================================================
# Route Shapes
# =============================================================================


class PollArg(WireModel):
    """Argument of every job status route."""

    async_job_id: str


class PollError(TaggedModel):
    """409 error of job status routes."""

    tag: Literal["invalid_async_job_id", "internal_error", "other"] = Field(alias=".tag")


class GroupsPollError(TaggedModel):
    """409 error of groups/job_status/get."""

    tag: Literal["invalid_async_job_id", "internal_error", "access_denied", "other"] = Field(
        alias=".tag"
    )


LaunchEmptyResult = Annotated[Complete[None] | AsyncJobId, Field(discriminator="tag")]
PollEmptyResult = Annotated[InProgress | Complete[None], Field(discriminator="tag")]
