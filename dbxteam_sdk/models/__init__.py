"""Public models for the team namespace.

Arguments, results and route-specific error unions for every route of
``TeamClient``. Tagged unions are decoded on their ``.tag`` discriminant.

Example:
    from dbxteam_sdk.models import EmailSelector, MembersRemoveArg

    arg = MembersRemoveArg(user=EmailSelector(email="ex-employee@example.com"))
"""

from dbxteam_sdk._internal.dispatch.models import UserMessage
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
from dbxteam_sdk._internal.pagination.models import ListPage
from dbxteam_sdk.models.common import (
    DateRange,
    DateRangeError,
    EmailSelector,
    ExternalIdSelector,
    GroupExternalIdSelector,
    GroupExternalIdsSelector,
    GroupIdSelector,
    GroupIdsSelector,
    GroupSelector,
    GroupsSelector,
    TeamMemberIdSelector,
    UserSelectorArg,
)
from dbxteam_sdk.models.team import TeamGetInfoResult
from dbxteam_sdk.models.groups import (
    GroupAccessType,
    GroupCreateArg,
    GroupCreateError,
    GroupDeleteError,
    GroupFullInfo,
    GroupIdNotFound,
    GroupInfoItem,
    GroupManagementType,
    GroupMemberInfo,
    GroupMemberSetAccessTypeError,
    GroupMembersAddArg,
    GroupMembersAddError,
    GroupMembersChangeResult,
    GroupMembersRemoveArg,
    GroupMembersRemoveError,
    GroupMembersSetAccessTypeArg,
    GroupSelectorError,
    GroupSummary,
    GroupUpdateArgs,
    GroupUpdateError,
    GroupsGetInfoError,
    GroupsGetInfoItem,
    GroupsListArg,
    GroupsListContinueArg,
    GroupsListContinueError,
    GroupsListResult,
    GroupsMembersListArg,
    GroupsMembersListContinueArg,
    GroupsMembersListContinueError,
    GroupsMembersListResult,
    MemberAccess,
)
from dbxteam_sdk.models.members import (
    AdminTier,
    MemberAddArg,
    MemberAddFailure,
    MemberAddResult,
    MemberAddSuccess,
    MemberIdNotFound,
    MemberInfoItem,
    MemberProfile,
    MembersAddArg,
    MembersAddJobStatus,
    MembersAddLaunch,
    MembersDeactivateArg,
    MembersGetInfoArgs,
    MembersGetInfoError,
    MembersGetInfoItem,
    MembersListArg,
    MembersListContinueArg,
    MembersListContinueError,
    MembersListError,
    MembersListResult,
    MembersRecoverArg,
    MembersRecoverError,
    MembersRemoveArg,
    MembersRemoveError,
    MembersSendWelcomeError,
    MembersSetPermissionsArg,
    MembersSetPermissionsError,
    MembersSetPermissionsResult,
    MembersSetProfileArg,
    MembersSetProfileError,
    MembersSuspendError,
    MembersUnsuspendArg,
    MembersUnsuspendError,
    Name,
    TeamMemberInfo,
    TeamMemberProfile,
    TeamMemberStatus,
    TeamMembershipType,
)
from dbxteam_sdk.models.devices import (
    ActiveWebSession,
    DesktopClientSession,
    DesktopPlatform,
    DeviceSession,
    ListMemberDevicesArg,
    ListMemberDevicesError,
    ListMemberDevicesResult,
    ListMembersDevicesArg,
    ListMembersDevicesError,
    ListMembersDevicesResult,
    ListTeamDevicesArg,
    ListTeamDevicesError,
    ListTeamDevicesResult,
    MemberDevices,
    MobileClientPlatform,
    MobileClientSession,
    RevokeDesktopClient,
    RevokeDeviceSessionArg,
    RevokeDeviceSessionBatchArg,
    RevokeDeviceSessionBatchError,
    RevokeDeviceSessionBatchResult,
    RevokeDeviceSessionError,
    RevokeDeviceSessionStatus,
    RevokeMobileClient,
    RevokeWebSession,
)
from dbxteam_sdk.models.linked_apps import (
    ApiApp,
    ListMemberAppsArg,
    ListMemberAppsError,
    ListMemberAppsResult,
    ListMembersAppsArg,
    ListMembersAppsError,
    ListMembersAppsResult,
    ListTeamAppsArg,
    ListTeamAppsError,
    ListTeamAppsResult,
    MemberLinkedApps,
    RevokeLinkedApiAppArg,
    RevokeLinkedApiAppBatchArg,
    RevokeLinkedAppBatchError,
    RevokeLinkedAppBatchResult,
    RevokeLinkedAppError,
    RevokeLinkedAppStatus,
)
from dbxteam_sdk.models.properties import (
    AddPropertyTemplateArg,
    AddPropertyTemplateResult,
    GetPropertyTemplateArg,
    GetPropertyTemplateResult,
    ListPropertyTemplateIds,
    ModifyPropertyTemplateError,
    ModifyPropertyTemplateFailure,
    PropertyFieldTemplate,
    PropertyGroupTemplate,
    PropertyTemplateError,
    PropertyTemplateFailure,
    PropertyType,
    TemplateNotFound,
    UpdatePropertyTemplateArg,
    UpdatePropertyTemplateResult,
)
from dbxteam_sdk.models.reports import (
    BaseDfbReport,
    DevicesActive,
    GetActivityReport,
    GetDevicesReport,
    GetMembershipReport,
    GetStorageReport,
    StorageBucket,
)

__all__ = [
    "UserMessage",
    "AsyncJobId",
    "Complete",
    "Failed",
    "GroupsPollError",
    "InProgress",
    "LaunchEmptyResult",
    "PollArg",
    "PollEmptyResult",
    "PollError",
    "ListPage",
    "DateRange",
    "DateRangeError",
    "EmailSelector",
    "ExternalIdSelector",
    "GroupExternalIdSelector",
    "GroupExternalIdsSelector",
    "GroupIdSelector",
    "GroupIdsSelector",
    "GroupSelector",
    "GroupsSelector",
    "TeamMemberIdSelector",
    "UserSelectorArg",
    "TeamGetInfoResult",
    "GroupAccessType",
    "GroupCreateArg",
    "GroupCreateError",
    "GroupDeleteError",
    "GroupFullInfo",
    "GroupIdNotFound",
    "GroupInfoItem",
    "GroupManagementType",
    "GroupMemberInfo",
    "GroupMemberSetAccessTypeError",
    "GroupMembersAddArg",
    "GroupMembersAddError",
    "GroupMembersChangeResult",
    "GroupMembersRemoveArg",
    "GroupMembersRemoveError",
    "GroupMembersSetAccessTypeArg",
    "GroupSelectorError",
    "GroupSummary",
    "GroupUpdateArgs",
    "GroupUpdateError",
    "GroupsGetInfoError",
    "GroupsGetInfoItem",
    "GroupsListArg",
    "GroupsListContinueArg",
    "GroupsListContinueError",
    "GroupsListResult",
    "GroupsMembersListArg",
    "GroupsMembersListContinueArg",
    "GroupsMembersListContinueError",
    "GroupsMembersListResult",
    "MemberAccess",
    "AdminTier",
    "MemberAddArg",
    "MemberAddFailure",
    "MemberAddResult",
    "MemberAddSuccess",
    "MemberIdNotFound",
    "MemberInfoItem",
    "MemberProfile",
    "MembersAddArg",
    "MembersAddJobStatus",
    "MembersAddLaunch",
    "MembersDeactivateArg",
    "MembersGetInfoArgs",
    "MembersGetInfoError",
    "MembersGetInfoItem",
    "MembersListArg",
    "MembersListContinueArg",
    "MembersListContinueError",
    "MembersListError",
    "MembersListResult",
    "MembersRecoverArg",
    "MembersRecoverError",
    "MembersRemoveArg",
    "MembersRemoveError",
    "MembersSendWelcomeError",
    "MembersSetPermissionsArg",
    "MembersSetPermissionsError",
    "MembersSetPermissionsResult",
    "MembersSetProfileArg",
    "MembersSetProfileError",
    "MembersSuspendError",
    "MembersUnsuspendArg",
    "MembersUnsuspendError",
    "Name",
    "TeamMemberInfo",
    "TeamMemberProfile",
    "TeamMemberStatus",
    "TeamMembershipType",
    "ActiveWebSession",
    "DesktopClientSession",
    "DesktopPlatform",
    "DeviceSession",
    "ListMemberDevicesArg",
    "ListMemberDevicesError",
    "ListMemberDevicesResult",
    "ListMembersDevicesArg",
    "ListMembersDevicesError",
    "ListMembersDevicesResult",
    "ListTeamDevicesArg",
    "ListTeamDevicesError",
    "ListTeamDevicesResult",
    "MemberDevices",
    "MobileClientPlatform",
    "MobileClientSession",
    "RevokeDesktopClient",
    "RevokeDeviceSessionArg",
    "RevokeDeviceSessionBatchArg",
    "RevokeDeviceSessionBatchError",
    "RevokeDeviceSessionBatchResult",
    "RevokeDeviceSessionError",
    "RevokeDeviceSessionStatus",
    "RevokeMobileClient",
    "RevokeWebSession",
    "ApiApp",
    "ListMemberAppsArg",
    "ListMemberAppsError",
    "ListMemberAppsResult",
    "ListMembersAppsArg",
    "ListMembersAppsError",
    "ListMembersAppsResult",
    "ListTeamAppsArg",
    "ListTeamAppsError",
    "ListTeamAppsResult",
    "MemberLinkedApps",
    "RevokeLinkedApiAppArg",
    "RevokeLinkedApiAppBatchArg",
    "RevokeLinkedAppBatchError",
    "RevokeLinkedAppBatchResult",
    "RevokeLinkedAppError",
    "RevokeLinkedAppStatus",
    "AddPropertyTemplateArg",
    "AddPropertyTemplateResult",
    "GetPropertyTemplateArg",
    "GetPropertyTemplateResult",
    "ListPropertyTemplateIds",
    "ModifyPropertyTemplateError",
    "ModifyPropertyTemplateFailure",
    "PropertyFieldTemplate",
    "PropertyGroupTemplate",
    "PropertyTemplateError",
    "PropertyTemplateFailure",
    "PropertyType",
    "TemplateNotFound",
    "UpdatePropertyTemplateArg",
    "UpdatePropertyTemplateResult",
    "BaseDfbReport",
    "DevicesActive",
    "GetActivityReport",
    "GetDevicesReport",
    "GetMembershipReport",
    "GetStorageReport",
    "StorageBucket",
]
