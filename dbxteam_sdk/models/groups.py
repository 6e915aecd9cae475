"""Group records and the groups/* route shapes."""

from typing import Annotated, Any, ClassVar, Literal

from pydantic import ConfigDict, Field

from dbxteam_sdk._internal.dispatch.models import TaggedModel, WireModel
from dbxteam_sdk._internal.jobs.models import AsyncJobId
from dbxteam_sdk._internal.pagination.models import ListPage
from dbxteam_sdk.models.common import GroupSelector, UserSelectorArg
from dbxteam_sdk.models.members import MemberProfile

# =============================================================================
# Group Records
# =============================================================================


class GroupManagementType(TaggedModel):
    tag: Literal["user_managed", "company_managed", "system_managed", "other"] = Field(
        alias=".tag"
    )


class GroupAccessType(TaggedModel):
    tag: Literal["member", "owner"] = Field(alias=".tag")


class GroupMemberInfo(WireModel):
    profile: MemberProfile
    access_type: GroupAccessType


class GroupSummary(WireModel):
    group_name: str
    group_id: str
    group_management_type: GroupManagementType
    group_external_id: str | None = None
    member_count: int | None = None


class GroupFullInfo(GroupSummary):
    """``members`` is only populated when the request asked for it."""

    created: int
    members: list[GroupMemberInfo] | None = None


# =============================================================================
# Create / Update / Delete
# =============================================================================


class GroupCreateArg(WireModel):
    group_name: str
    group_external_id: str | None = None
    group_management_type: GroupManagementType | None = None


class GroupCreateError(TaggedModel):
    tag: Literal[
        "group_name_already_used",
        "group_name_invalid",
        "external_id_already_in_use",
        "system_managed_group_disallowed",
        "other",
    ] = Field(alias=".tag")


class GroupUpdateArgs(WireModel):
    group: GroupSelector
    return_members: bool = True
    new_group_name: str | None = None
    new_group_external_id: str | None = None
    new_group_management_type: GroupManagementType | None = None


class GroupUpdateError(TaggedModel):
    tag: Literal[
        "group_not_found",
        "other",
        "system_managed_group_disallowed",
        "group_name_already_used",
        "group_name_invalid",
        "external_id_already_in_use",
    ] = Field(alias=".tag")


class GroupDeleteError(TaggedModel):
    tag: Literal[
        "group_not_found",
        "other",
        "system_managed_group_disallowed",
        "group_already_deleted",
    ] = Field(alias=".tag")


class GroupSelectorError(TaggedModel):
    tag: Literal["group_not_found", "other"] = Field(alias=".tag")


# =============================================================================
# Get Info
# =============================================================================


class GroupIdNotFound(TaggedModel):
    tag: Literal["id_not_found"] = Field(default="id_not_found", alias=".tag")
    id_not_found: str


class GroupInfoItem(TaggedModel, GroupFullInfo):
    tag: Literal["group_info"] = Field(default="group_info", alias=".tag")


GroupsGetInfoItem = Annotated[GroupIdNotFound | GroupInfoItem, Field(discriminator="tag")]


class GroupsGetInfoError(TaggedModel):
    tag: Literal["group_not_on_team", "other"] = Field(alias=".tag")


# =============================================================================
# Listing
# =============================================================================


class GroupsListArg(WireModel):
    limit: int = Field(default=1000, ge=1, le=1000)


class GroupsListResult(ListPage):
    items_field: ClassVar[str] = "groups"

    groups: list[GroupSummary]
    cursor: str
    has_more: bool


class GroupsListContinueArg(WireModel):
    cursor: str


class GroupsListContinueError(TaggedModel):
    tag: Literal["invalid_cursor", "other"] = Field(alias=".tag")


class GroupsMembersListArg(WireModel):
    group: GroupSelector
    limit: int = Field(default=1000, ge=1, le=1000)


class GroupsMembersListResult(ListPage):
    items_field: ClassVar[str] = "members"

    members: list[GroupMemberInfo]
    cursor: str
    has_more: bool


class GroupsMembersListContinueArg(WireModel):
    cursor: str


class GroupsMembersListContinueError(TaggedModel):
    tag: Literal["invalid_cursor", "other"] = Field(alias=".tag")


# =============================================================================
# Membership Changes
# =============================================================================


class MemberAccess(WireModel):
    user: UserSelectorArg
    access_type: GroupAccessType


class GroupMembersAddArg(WireModel):
    group: GroupSelector
    members: list[MemberAccess]
    return_members: bool = True


class GroupMembersRemoveArg(WireModel):
    group: GroupSelector
    users: list[UserSelectorArg]
    return_members: bool = True


class GroupMembersSetAccessTypeArg(WireModel):
    group: GroupSelector
    user: UserSelectorArg
    access_type: GroupAccessType
    return_members: bool = True


class GroupMembersChangeResult(WireModel):
    """Membership is updated immediately; access to group-owned content is
    granted or revoked by the background job ``async_job_id``.
    """

    group_info: GroupFullInfo
    async_job_id: str

    @property
    def launch(self) -> AsyncJobId:
        return AsyncJobId(async_job_id=self.async_job_id)


class _GroupMembersChangeError(TaggedModel):
    """Errors whose payload, if any, sits under the key named by the tag."""

    model_config = ConfigDict(extra="allow")

    @property
    def detail(self) -> Any:
        return (self.model_extra or {}).get(self.tag)


class GroupMembersAddError(_GroupMembersChangeError):
    tag: Literal[
        "group_not_found",
        "other",
        "system_managed_group_disallowed",
        "duplicate_user",
        "group_not_in_team",
        "members_not_in_team",
        "users_not_found",
        "user_must_be_active_to_be_owner",
        "user_cannot_be_manager_of_company_managed_group",
    ] = Field(alias=".tag")


class GroupMembersRemoveError(_GroupMembersChangeError):
    tag: Literal[
        "group_not_found",
        "other",
        "system_managed_group_disallowed",
        "member_not_in_group",
        "group_not_in_team",
        "members_not_in_team",
        "users_not_found",
    ] = Field(alias=".tag")


class GroupMemberSetAccessTypeError(TaggedModel):
    tag: Literal[
        "group_not_found",
        "other",
        "system_managed_group_disallowed",
        "member_not_in_group",
        "user_cannot_be_manager_of_company_managed_group",
    ] = Field(alias=".tag")
