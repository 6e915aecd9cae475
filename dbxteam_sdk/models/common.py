"""Selectors and shared records used across the team namespace."""

from datetime import datetime, timezone
from typing import Annotated, Literal

from pydantic import Field, field_serializer

from dbxteam_sdk._internal.dispatch.models import TaggedModel, WireModel

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# =============================================================================
# User Selectors
# =============================================================================
# Member-lookup routes take exactly one identifier. Which one is the
# caller's choice; the selector variant makes the choice explicit.


class TeamMemberIdSelector(TaggedModel):
    tag: Literal["team_member_id"] = Field(default="team_member_id", alias=".tag")
    team_member_id: str


class ExternalIdSelector(TaggedModel):
    tag: Literal["external_id"] = Field(default="external_id", alias=".tag")
    external_id: str


class EmailSelector(TaggedModel):
    tag: Literal["email"] = Field(default="email", alias=".tag")
    email: str


UserSelectorArg = Annotated[
    TeamMemberIdSelector | ExternalIdSelector | EmailSelector,
    Field(discriminator="tag"),
]


# =============================================================================
# Group Selectors
# =============================================================================


class GroupIdSelector(TaggedModel):
    tag: Literal["group_id"] = Field(default="group_id", alias=".tag")
    group_id: str


class GroupExternalIdSelector(TaggedModel):
    tag: Literal["group_external_id"] = Field(default="group_external_id", alias=".tag")
    group_external_id: str


GroupSelector = Annotated[
    GroupIdSelector | GroupExternalIdSelector,
    Field(discriminator="tag"),
]


class GroupIdsSelector(TaggedModel):
    tag: Literal["group_ids"] = Field(default="group_ids", alias=".tag")
    group_ids: list[str]


class GroupExternalIdsSelector(TaggedModel):
    tag: Literal["group_external_ids"] = Field(default="group_external_ids", alias=".tag")
    group_external_ids: list[str]


GroupsSelector = Annotated[
    GroupIdsSelector | GroupExternalIdsSelector,
    Field(discriminator="tag"),
]


# =============================================================================
# Date Range
# =============================================================================


class DateRange(WireModel):
    """Inclusive start, exclusive end. Either bound may be omitted.

    Aware datetimes are converted to UTC before sending; naive ones are
    taken to be UTC already.
    """

    start_date: datetime | None = None
    end_date: datetime | None = None

    @field_serializer("start_date", "end_date")
    def _format_timestamp(self, value: datetime | None) -> str | None:
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime(TIMESTAMP_FORMAT)


class DateRangeError(TaggedModel):
    tag: Literal["other"] = Field(alias=".tag")
