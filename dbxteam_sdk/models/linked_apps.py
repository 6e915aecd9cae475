"""Linked API app records and the linked_apps/* route shapes."""

from datetime import datetime
from typing import ClassVar, Literal

from pydantic import Field

from dbxteam_sdk._internal.dispatch.models import TaggedModel, WireModel
from dbxteam_sdk._internal.pagination.models import ListPage


class ApiApp(WireModel):
    app_id: str
    app_name: str
    is_app_folder: bool
    publisher: str | None = None
    publisher_url: str | None = None
    linked: datetime | None = None


class MemberLinkedApps(WireModel):
    team_member_id: str
    linked_api_apps: list[ApiApp]


class ListMemberAppsArg(WireModel):
    team_member_id: str


class ListMemberAppsResult(WireModel):
    linked_api_apps: list[ApiApp]


class ListMemberAppsError(TaggedModel):
    tag: Literal["member_not_found", "other"] = Field(alias=".tag")


class ListMembersAppsArg(WireModel):
    """Pass the previous page's cursor to continue the listing."""

    cursor: str | None = None


class ListMembersAppsResult(ListPage):
    items_field: ClassVar[str] = "apps"

    apps: list[MemberLinkedApps]


class ListMembersAppsError(TaggedModel):
    tag: Literal["reset", "other"] = Field(alias=".tag")


class ListTeamAppsArg(ListMembersAppsArg):
    pass


class ListTeamAppsResult(ListMembersAppsResult):
    pass


class ListTeamAppsError(TaggedModel):
    tag: Literal["reset", "other"] = Field(alias=".tag")


class RevokeLinkedApiAppArg(WireModel):
    app_id: str
    team_member_id: str
    keep_app_folder: bool = True


class RevokeLinkedAppError(TaggedModel):
    tag: Literal["app_not_found", "member_not_found", "other"] = Field(alias=".tag")


class RevokeLinkedApiAppBatchArg(WireModel):
    revoke_linked_app: list[RevokeLinkedApiAppArg]


class RevokeLinkedAppStatus(WireModel):
    success: bool
    error_type: RevokeLinkedAppError | None = None


class RevokeLinkedAppBatchResult(WireModel):
    revoke_linked_app_status: list[RevokeLinkedAppStatus]


class RevokeLinkedAppBatchError(TaggedModel):
    tag: Literal["other"] = Field(alias=".tag")
