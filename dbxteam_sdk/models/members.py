"""Team member records and the members/* route shapes."""

from datetime import datetime
from typing import Annotated, Any, ClassVar, Literal

from pydantic import ConfigDict, Field

from dbxteam_sdk._internal.dispatch.models import TaggedModel, WireModel
from dbxteam_sdk._internal.jobs.models import AsyncJobId, Complete, Failed, InProgress
from dbxteam_sdk._internal.pagination.models import ListPage
from dbxteam_sdk.models.common import UserSelectorArg

# =============================================================================
# Member Records
# =============================================================================


class Name(WireModel):
    given_name: str
    surname: str
    familiar_name: str
    display_name: str
    abbreviated_name: str


class TeamMemberStatus(TaggedModel):
    tag: Literal["active", "invited", "suspended", "removed"] = Field(alias=".tag")


class TeamMembershipType(TaggedModel):
    tag: Literal["full", "limited"] = Field(alias=".tag")


class AdminTier(TaggedModel):
    """Administrative role of a member."""

    tag: Literal["team_admin", "user_management_admin", "support_admin", "member_only"] = Field(
        alias=".tag"
    )


class MemberProfile(WireModel):
    """Basic member profile, as embedded in group listings."""

    team_member_id: str
    email: str
    email_verified: bool
    status: TeamMemberStatus
    name: Name
    membership_type: TeamMembershipType
    external_id: str | None = None
    account_id: str | None = None
    joined_on: datetime | None = None
    persistent_id: str | None = None


class TeamMemberProfile(MemberProfile):
    """Member profile including group membership."""

    groups: list[str] = Field(default_factory=list)
    member_folder_id: str | None = None


class TeamMemberInfo(WireModel):
    profile: TeamMemberProfile
    role: AdminTier


# =============================================================================
# members/add
# =============================================================================


class MemberAddArg(WireModel):
    member_email: str
    member_given_name: str | None = None
    member_surname: str | None = None
    member_external_id: str | None = None
    member_persistent_id: str | None = None
    send_welcome_email: bool = True
    role: AdminTier | None = None


class MembersAddArg(WireModel):
    """At most 20 members per call."""

    new_members: list[MemberAddArg]
    force_async: bool = False


class MemberAddSuccess(TaggedModel, TeamMemberInfo):
    tag: Literal["success"] = Field(default="success", alias=".tag")


class MemberAddFailure(TaggedModel):
    """Per-member failure. The tag names the reason; the value under the same
    key is the email or external id it applies to.
    """

    model_config = ConfigDict(extra="allow")

    tag: Literal[
        "team_license_limit",
        "free_team_member_limit_reached",
        "user_already_on_team",
        "user_on_another_team",
        "user_already_paired",
        "user_migration_failed",
        "duplicate_external_member_id",
        "duplicate_member_persistent_id",
        "persistent_id_disabled",
        "user_creation_failed",
    ] = Field(alias=".tag")

    @property
    def detail(self) -> Any:
        return (self.model_extra or {}).get(self.tag)


MemberAddResult = Annotated[MemberAddSuccess | MemberAddFailure, Field(discriminator="tag")]

MembersAddLaunch = Annotated[
    Complete[list[MemberAddResult]] | AsyncJobId,
    Field(discriminator="tag"),
]

MembersAddJobStatus = Annotated[
    InProgress | Complete[list[MemberAddResult]] | Failed[str],
    Field(discriminator="tag"),
]


# =============================================================================
# members/get_info
# =============================================================================


class MembersGetInfoArgs(WireModel):
    members: list[UserSelectorArg]


class MemberIdNotFound(TaggedModel):
    tag: Literal["id_not_found"] = Field(default="id_not_found", alias=".tag")
    id_not_found: str


class MemberInfoItem(TaggedModel, TeamMemberInfo):
    tag: Literal["member_info"] = Field(default="member_info", alias=".tag")


MembersGetInfoItem = Annotated[MemberIdNotFound | MemberInfoItem, Field(discriminator="tag")]


class MembersGetInfoError(TaggedModel):
    tag: Literal["other"] = Field(alias=".tag")


# =============================================================================
# members/list
# =============================================================================


class MembersListArg(WireModel):
    limit: int = Field(default=1000, ge=1, le=1000)
    include_removed: bool = False


class MembersListResult(ListPage):
    items_field: ClassVar[str] = "members"

    members: list[TeamMemberInfo]
    cursor: str
    has_more: bool


class MembersListError(TaggedModel):
    tag: Literal["other"] = Field(alias=".tag")


class MembersListContinueArg(WireModel):
    cursor: str


class MembersListContinueError(TaggedModel):
    tag: Literal["invalid_cursor", "other"] = Field(alias=".tag")


# =============================================================================
# Member Lifecycle
# =============================================================================


class MembersRecoverArg(WireModel):
    user: UserSelectorArg


class MembersRecoverError(TaggedModel):
    tag: Literal[
        "user_not_found",
        "user_unrecoverable",
        "user_not_in_team",
        "team_license_limit",
        "other",
    ] = Field(alias=".tag")


class MembersDeactivateArg(WireModel):
    user: UserSelectorArg
    wipe_data: bool = True


class MembersRemoveArg(MembersDeactivateArg):
    transfer_dest_id: UserSelectorArg | None = None
    transfer_admin_id: UserSelectorArg | None = None
    keep_account: bool = False


class MembersRemoveError(TaggedModel):
    tag: Literal[
        "user_not_found",
        "user_not_in_team",
        "other",
        "remove_last_admin",
        "removed_and_transfer_dest_should_differ",
        "removed_and_transfer_admin_should_differ",
        "transfer_dest_user_not_found",
        "transfer_dest_user_not_in_team",
        "transfer_admin_user_not_found",
        "transfer_admin_user_not_in_team",
        "unspecified_transfer_admin_id",
        "transfer_admin_is_not_admin",
        "cannot_keep_account_and_transfer",
        "cannot_keep_account_and_delete_data",
        "email_address_too_long_to_be_disabled",
    ] = Field(alias=".tag")


class MembersSuspendError(TaggedModel):
    tag: Literal[
        "user_not_found",
        "user_not_in_team",
        "other",
        "suspend_inactive_user",
        "suspend_last_admin",
        "team_license_limit",
    ] = Field(alias=".tag")


class MembersUnsuspendArg(WireModel):
    user: UserSelectorArg


class MembersUnsuspendError(TaggedModel):
    tag: Literal[
        "user_not_found",
        "user_not_in_team",
        "other",
        "unsuspend_non_suspended_member",
        "team_license_limit",
    ] = Field(alias=".tag")


class MembersSendWelcomeError(TaggedModel):
    tag: Literal["user_not_found", "user_not_in_team", "other"] = Field(alias=".tag")


# =============================================================================
# Permissions and Profile
# =============================================================================


class MembersSetPermissionsArg(WireModel):
    user: UserSelectorArg
    new_role: AdminTier


class MembersSetPermissionsResult(WireModel):
    team_member_id: str
    role: AdminTier


class MembersSetPermissionsError(TaggedModel):
    tag: Literal[
        "user_not_found",
        "user_not_in_team",
        "last_admin",
        "cannot_set_permissions",
        "team_license_limit",
        "other",
    ] = Field(alias=".tag")


class MembersSetProfileArg(WireModel):
    """At least one ``new_*`` field must be set."""

    user: UserSelectorArg
    new_email: str | None = None
    new_external_id: str | None = None
    new_given_name: str | None = None
    new_surname: str | None = None
    new_persistent_id: str | None = None


class MembersSetProfileError(TaggedModel):
    tag: Literal[
        "user_not_found",
        "user_not_in_team",
        "external_id_and_new_external_id_unsafe",
        "no_new_data_specified",
        "email_reserved_for_other_user",
        "external_id_used_by_other_user",
        "set_profile_disallowed",
        "param_cannot_be_empty",
        "persistent_id_disabled",
        "persistent_id_used_by_other_user",
        "other",
    ] = Field(alias=".tag")
