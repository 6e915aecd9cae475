"""Route table for the team namespace.

One ``Route`` per RPC. ``TeamClient`` methods are thin wrappers over these
descriptors; adding a route means adding a line here and a method there.
"""

from typing import Any

from dbxteam_sdk._internal.dispatch.models import Route
from dbxteam_sdk._internal.jobs.models import (
    GroupsPollError,
    LaunchEmptyResult,
    PollArg,
    PollEmptyResult,
    PollError,
)
from dbxteam_sdk.models.common import (
    DateRange,
    DateRangeError,
    GroupSelector,
    GroupsSelector,
    UserSelectorArg,
)
from dbxteam_sdk.models.devices import (
    ListMemberDevicesArg,
    ListMemberDevicesError,
    ListMemberDevicesResult,
    ListMembersDevicesArg,
    ListMembersDevicesError,
    ListMembersDevicesResult,
    ListTeamDevicesArg,
    ListTeamDevicesError,
    ListTeamDevicesResult,
    RevokeDeviceSessionArg,
    RevokeDeviceSessionBatchArg,
    RevokeDeviceSessionBatchError,
    RevokeDeviceSessionBatchResult,
    RevokeDeviceSessionError,
)
from dbxteam_sdk.models.groups import (
    GroupCreateArg,
    GroupCreateError,
    GroupDeleteError,
    GroupFullInfo,
    GroupMembersAddArg,
    GroupMembersAddError,
    GroupMembersChangeResult,
    GroupMemberSetAccessTypeError,
    GroupMembersRemoveArg,
    GroupMembersRemoveError,
    GroupMembersSetAccessTypeArg,
    GroupSelectorError,
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
    GroupUpdateArgs,
    GroupUpdateError,
)
from dbxteam_sdk.models.linked_apps import (
    ListMemberAppsArg,
    ListMemberAppsError,
    ListMemberAppsResult,
    ListMembersAppsArg,
    ListMembersAppsError,
    ListMembersAppsResult,
    ListTeamAppsArg,
    ListTeamAppsError,
    ListTeamAppsResult,
    RevokeLinkedApiAppArg,
    RevokeLinkedApiAppBatchArg,
    RevokeLinkedAppBatchError,
    RevokeLinkedAppBatchResult,
    RevokeLinkedAppError,
)
from dbxteam_sdk.models.members import (
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
    TeamMemberInfo,
)
from dbxteam_sdk.models.properties import (
    AddPropertyTemplateArg,
    AddPropertyTemplateResult,
    GetPropertyTemplateArg,
    GetPropertyTemplateResult,
    ListPropertyTemplateIds,
    ModifyPropertyTemplateError,
    PropertyTemplateError,
    UpdatePropertyTemplateArg,
    UpdatePropertyTemplateResult,
)
from dbxteam_sdk.models.reports import (
    GetActivityReport,
    GetDevicesReport,
    GetMembershipReport,
    GetStorageReport,
)
from dbxteam_sdk.models.team import TeamGetInfoResult


def _route(path: str, arg: Any, result: Any, error: Any = None) -> Route[Any]:
    return Route(name=path, path=path, arg_type=arg, result_type=result, error_type=error)


# =============================================================================
# alpha/groups
# =============================================================================

ALPHA_GROUPS_CREATE = _route("alpha/groups/create", GroupCreateArg, GroupFullInfo, GroupCreateError)
ALPHA_GROUPS_GET_INFO = _route(
    "alpha/groups/get_info", GroupsSelector, list[GroupsGetInfoItem], GroupsGetInfoError
)
ALPHA_GROUPS_LIST = _route("alpha/groups/list", GroupsListArg, GroupsListResult)
ALPHA_GROUPS_LIST_CONTINUE = _route(
    "alpha/groups/list/continue", GroupsListContinueArg, GroupsListResult, GroupsListContinueError
)
ALPHA_GROUPS_UPDATE = _route(
    "alpha/groups/update", GroupUpdateArgs, GroupFullInfo, GroupUpdateError
)

# =============================================================================
# devices
# =============================================================================

DEVICES_LIST_MEMBER_DEVICES = _route(
    "devices/list_member_devices",
    ListMemberDevicesArg,
    ListMemberDevicesResult,
    ListMemberDevicesError,
)
DEVICES_LIST_MEMBERS_DEVICES = _route(
    "devices/list_members_devices",
    ListMembersDevicesArg,
    ListMembersDevicesResult,
    ListMembersDevicesError,
)
DEVICES_LIST_TEAM_DEVICES = _route(
    "devices/list_team_devices",
    ListTeamDevicesArg,
    ListTeamDevicesResult,
    ListTeamDevicesError,
)
DEVICES_REVOKE_DEVICE_SESSION = _route(
    "devices/revoke_device_session", RevokeDeviceSessionArg, None, RevokeDeviceSessionError
)
DEVICES_REVOKE_DEVICE_SESSION_BATCH = _route(
    "devices/revoke_device_session_batch",
    RevokeDeviceSessionBatchArg,
    RevokeDeviceSessionBatchResult,
    RevokeDeviceSessionBatchError,
)

# =============================================================================
# team
# =============================================================================

GET_INFO = _route("get_info", None, TeamGetInfoResult)

# =============================================================================
# groups
# =============================================================================

GROUPS_CREATE = _route("groups/create", GroupCreateArg, GroupFullInfo, GroupCreateError)
GROUPS_DELETE = _route("groups/delete", GroupSelector, LaunchEmptyResult, GroupDeleteError)
GROUPS_GET_INFO = _route(
    "groups/get_info", GroupsSelector, list[GroupsGetInfoItem], GroupsGetInfoError
)
GROUPS_JOB_STATUS_GET = _route("groups/job_status/get", PollArg, PollEmptyResult, GroupsPollError)
GROUPS_LIST = _route("groups/list", GroupsListArg, GroupsListResult)
GROUPS_LIST_CONTINUE = _route(
    "groups/list/continue", GroupsListContinueArg, GroupsListResult, GroupsListContinueError
)
GROUPS_MEMBERS_ADD = _route(
    "groups/members/add", GroupMembersAddArg, GroupMembersChangeResult, GroupMembersAddError
)
GROUPS_MEMBERS_LIST = _route(
    "groups/members/list", GroupsMembersListArg, GroupsMembersListResult, GroupSelectorError
)
GROUPS_MEMBERS_LIST_CONTINUE = _route(
    "groups/members/list/continue",
    GroupsMembersListContinueArg,
    GroupsMembersListResult,
    GroupsMembersListContinueError,
)
GROUPS_MEMBERS_REMOVE = _route(
    "groups/members/remove",
    GroupMembersRemoveArg,
    GroupMembersChangeResult,
    GroupMembersRemoveError,
)
GROUPS_MEMBERS_SET_ACCESS_TYPE = _route(
    "groups/members/set_access_type",
    GroupMembersSetAccessTypeArg,
    list[GroupsGetInfoItem],
    GroupMemberSetAccessTypeError,
)
GROUPS_UPDATE = _route("groups/update", GroupUpdateArgs, GroupFullInfo, GroupUpdateError)

# =============================================================================
# linked_apps
# =============================================================================

LINKED_APPS_LIST_MEMBER_LINKED_APPS = _route(
    "linked_apps/list_member_linked_apps",
    ListMemberAppsArg,
    ListMemberAppsResult,
    ListMemberAppsError,
)
LINKED_APPS_LIST_MEMBERS_LINKED_APPS = _route(
    "linked_apps/list_members_linked_apps",
    ListMembersAppsArg,
    ListMembersAppsResult,
    ListMembersAppsError,
)
LINKED_APPS_LIST_TEAM_LINKED_APPS = _route(
    "linked_apps/list_team_linked_apps",
    ListTeamAppsArg,
    ListTeamAppsResult,
    ListTeamAppsError,
)
LINKED_APPS_REVOKE_LINKED_APP = _route(
    "linked_apps/revoke_linked_app", RevokeLinkedApiAppArg, None, RevokeLinkedAppError
)
LINKED_APPS_REVOKE_LINKED_APP_BATCH = _route(
    "linked_apps/revoke_linked_app_batch",
    RevokeLinkedApiAppBatchArg,
    RevokeLinkedAppBatchResult,
    RevokeLinkedAppBatchError,
)

# =============================================================================
# members
# =============================================================================

MEMBERS_ADD = _route("members/add", MembersAddArg, MembersAddLaunch)
MEMBERS_ADD_JOB_STATUS_GET = _route(
    "members/add/job_status/get", PollArg, MembersAddJobStatus, PollError
)
MEMBERS_GET_INFO = _route(
    "members/get_info", MembersGetInfoArgs, list[MembersGetInfoItem], MembersGetInfoError
)
MEMBERS_LIST = _route("members/list", MembersListArg, MembersListResult, MembersListError)
MEMBERS_LIST_CONTINUE = _route(
    "members/list/continue", MembersListContinueArg, MembersListResult, MembersListContinueError
)
MEMBERS_RECOVER = _route("members/recover", MembersRecoverArg, None, MembersRecoverError)
MEMBERS_REMOVE = _route("members/remove", MembersRemoveArg, LaunchEmptyResult, MembersRemoveError)
MEMBERS_REMOVE_JOB_STATUS_GET = _route(
    "members/remove/job_status/get", PollArg, PollEmptyResult, PollError
)
MEMBERS_SEND_WELCOME_EMAIL = _route(
    "members/send_welcome_email", UserSelectorArg, None, MembersSendWelcomeError
)
MEMBERS_SET_ADMIN_PERMISSIONS = _route(
    "members/set_admin_permissions",
    MembersSetPermissionsArg,
    MembersSetPermissionsResult,
    MembersSetPermissionsError,
)
MEMBERS_SET_PROFILE = _route(
    "members/set_profile", MembersSetProfileArg, TeamMemberInfo, MembersSetProfileError
)
MEMBERS_SUSPEND = _route("members/suspend", MembersDeactivateArg, None, MembersSuspendError)
MEMBERS_UNSUSPEND = _route("members/unsuspend", MembersUnsuspendArg, None, MembersUnsuspendError)

# =============================================================================
# properties/template
# =============================================================================

PROPERTIES_TEMPLATE_ADD = _route(
    "properties/template/add",
    AddPropertyTemplateArg,
    AddPropertyTemplateResult,
    ModifyPropertyTemplateError,
)
PROPERTIES_TEMPLATE_GET = _route(
    "properties/template/get",
    GetPropertyTemplateArg,
    GetPropertyTemplateResult,
    PropertyTemplateError,
)
PROPERTIES_TEMPLATE_LIST = _route(
    "properties/template/list", None, ListPropertyTemplateIds, PropertyTemplateError
)
PROPERTIES_TEMPLATE_UPDATE = _route(
    "properties/template/update",
    UpdatePropertyTemplateArg,
    UpdatePropertyTemplateResult,
    ModifyPropertyTemplateError,
)

# =============================================================================
# reports
# =============================================================================

REPORTS_GET_ACTIVITY = _route("reports/get_activity", DateRange, GetActivityReport, DateRangeError)
REPORTS_GET_DEVICES = _route("reports/get_devices", DateRange, GetDevicesReport, DateRangeError)
REPORTS_GET_MEMBERSHIP = _route(
    "reports/get_membership", DateRange, GetMembershipReport, DateRangeError
)
REPORTS_GET_STORAGE = _route("reports/get_storage", DateRange, GetStorageReport, DateRangeError)


ALL_ROUTES: tuple[Route[Any], ...] = (
    ALPHA_GROUPS_CREATE,
    ALPHA_GROUPS_GET_INFO,
    ALPHA_GROUPS_LIST,
    ALPHA_GROUPS_LIST_CONTINUE,
    ALPHA_GROUPS_UPDATE,
    DEVICES_LIST_MEMBER_DEVICES,
    DEVICES_LIST_MEMBERS_DEVICES,
    DEVICES_LIST_TEAM_DEVICES,
    DEVICES_REVOKE_DEVICE_SESSION,
    DEVICES_REVOKE_DEVICE_SESSION_BATCH,
    GET_INFO,
    GROUPS_CREATE,
    GROUPS_DELETE,
    GROUPS_GET_INFO,
    GROUPS_JOB_STATUS_GET,
    GROUPS_LIST,
    GROUPS_LIST_CONTINUE,
    GROUPS_MEMBERS_ADD,
    GROUPS_MEMBERS_LIST,
    GROUPS_MEMBERS_LIST_CONTINUE,
    GROUPS_MEMBERS_REMOVE,
    GROUPS_MEMBERS_SET_ACCESS_TYPE,
    GROUPS_UPDATE,
    LINKED_APPS_LIST_MEMBER_LINKED_APPS,
    LINKED_APPS_LIST_MEMBERS_LINKED_APPS,
    LINKED_APPS_LIST_TEAM_LINKED_APPS,
    LINKED_APPS_REVOKE_LINKED_APP,
    LINKED_APPS_REVOKE_LINKED_APP_BATCH,
    MEMBERS_ADD,
    MEMBERS_ADD_JOB_STATUS_GET,
    MEMBERS_GET_INFO,
    MEMBERS_LIST,
    MEMBERS_LIST_CONTINUE,
    MEMBERS_RECOVER,
    MEMBERS_REMOVE,
    MEMBERS_REMOVE_JOB_STATUS_GET,
    MEMBERS_SEND_WELCOME_EMAIL,
    MEMBERS_SET_ADMIN_PERMISSIONS,
    MEMBERS_SET_PROFILE,
    MEMBERS_SUSPEND,
    MEMBERS_UNSUSPEND,
    PROPERTIES_TEMPLATE_ADD,
    PROPERTIES_TEMPLATE_GET,
    PROPERTIES_TEMPLATE_LIST,
    PROPERTIES_TEMPLATE_UPDATE,
    REPORTS_GET_ACTIVITY,
    REPORTS_GET_DEVICES,
    REPORTS_GET_MEMBERSHIP,
    REPORTS_GET_STORAGE,
)

ROUTES: dict[str, Route[Any]] = {route.name: route for route in ALL_ROUTES}
