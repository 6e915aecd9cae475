"""User-facing client for the team namespace.

Example:
    from dbxteam_sdk import TeamClient
    from dbxteam_sdk.models import EmailSelector, MembersListArg, MembersRemoveArg

    with TeamClient.from_env() as client:
        for member in client.members_list_all(MembersListArg(limit=100)):
            print(member.profile.email)

        launch = client.members_remove(
            MembersRemoveArg(user=EmailSelector(email="ex-employee@example.com"))
        )
"""

import os
from collections.abc import Callable, Iterator
from typing import Any

import httpx

from dbxteam_sdk import routes
from dbxteam_sdk._internal.dispatch.client import RouteDispatcher
from dbxteam_sdk._internal.dispatch.models import CallResult, Route, T
from dbxteam_sdk._internal.http import DEFAULT_API_URL, DEFAULT_TIMEOUT, create_http_client
from dbxteam_sdk._internal.jobs.models import PollArg
from dbxteam_sdk._internal.jobs.waiter import wait_for_job
from dbxteam_sdk._internal.pagination.iterator import iter_items
from dbxteam_sdk.exceptions import DbxTeamConfigError
from dbxteam_sdk.models.common import DateRange, GroupSelector, GroupsSelector, UserSelectorArg
from dbxteam_sdk.models.devices import (
    ListMemberDevicesArg,
    ListMemberDevicesResult,
    ListMembersDevicesArg,
    ListMembersDevicesResult,
    ListTeamDevicesArg,
    ListTeamDevicesResult,
    MemberDevices,
    RevokeDeviceSessionArg,
    RevokeDeviceSessionBatchArg,
    RevokeDeviceSessionBatchResult,
)
from dbxteam_sdk.models.groups import (
    GroupCreateArg,
    GroupFullInfo,
    GroupMemberInfo,
    GroupMembersAddArg,
    GroupMembersChangeResult,
    GroupMembersRemoveArg,
    GroupMembersSetAccessTypeArg,
    GroupsGetInfoItem,
    GroupsListArg,
    GroupsListContinueArg,
    GroupsListResult,
    GroupsMembersListArg,
    GroupsMembersListContinueArg,
    GroupsMembersListResult,
    GroupSummary,
    GroupUpdateArgs,
)
from dbxteam_sdk.models.linked_apps import (
    ListMemberAppsArg,
    ListMemberAppsResult,
    ListMembersAppsArg,
    ListMembersAppsResult,
    ListTeamAppsArg,
    ListTeamAppsResult,
    MemberLinkedApps,
    RevokeLinkedApiAppArg,
    RevokeLinkedApiAppBatchArg,
    RevokeLinkedAppBatchResult,
)
from dbxteam_sdk.models.members import (
    MemberAddResult,
    MembersAddArg,
    MembersAddJobStatus,
    MembersAddLaunch,
    MembersDeactivateArg,
    MembersGetInfoArgs,
    MembersGetInfoItem,
    MembersListArg,
    MembersListContinueArg,
    MembersListResult,
    MembersRecoverArg,
    MembersRemoveArg,
    MembersSetPermissionsArg,
    MembersSetPermissionsResult,
    MembersSetProfileArg,
    MembersUnsuspendArg,
    TeamMemberInfo,
)
from dbxteam_sdk.models.properties import (
    AddPropertyTemplateArg,
    AddPropertyTemplateResult,
    GetPropertyTemplateArg,
    GetPropertyTemplateResult,
    ListPropertyTemplateIds,
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

DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)

WaitFn = Callable[[int], None]


class TeamClient:
    """Client for team administration routes.

    Every route method returns the decoded result or raises one of the
    exceptions in ``dbxteam_sdk.exceptions``. Use ``call()`` to get the
    outcome as a ``Success``/``Failure`` value instead.

    Use ``TeamClient.from_env()`` to create a client from environment variables.
    """

    def __init__(
        self,
        *,
        access_token: str | None = None,
        api_url: str = DEFAULT_API_URL,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        verbose: bool = False,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the team client.

        Args:
            access_token: Team access token. Required unless ``http_client``
                is given and already authenticates requests.
            api_url: Base URL of the API host.
            timeout_ms: Request timeout in milliseconds.
            verbose: Log requests and responses to stderr.
            http_client: Pre-configured transport. The caller keeps ownership
                and is responsible for closing it.

        Raises:
            DbxTeamConfigError: Neither an access token nor a client was given.
        """
        if http_client is None and not access_token:
            raise DbxTeamConfigError("An access token is required")
        self._owns_http_client = http_client is None
        self._http = http_client or create_http_client(
            access_token=access_token,  # type: ignore[arg-type]
            timeout=timeout_ms / 1000,
            base_url=api_url,
        )
        self._verbose = verbose
        self._dispatcher = RouteDispatcher(self._http, verbose=verbose)

    @classmethod
    def from_env(cls) -> "TeamClient":
        """Create a team client from environment variables.

        Required environment variables:
            DBXTEAM_ACCESS_TOKEN: The team access token.

        Optional environment variables:
            DBXTEAM_API_URL: Base URL of the API host.
            DBXTEAM_VERBOSE: Set to "1" to enable verbose logging.
            DBXTEAM_TIMEOUT_MS: Request timeout in milliseconds.

        Returns:
            A configured TeamClient.

        Raises:
            DbxTeamConfigError: DBXTEAM_ACCESS_TOKEN is not set.
            ValueError: DBXTEAM_TIMEOUT_MS is not an integer.
        """
        access_token = os.environ.get("DBXTEAM_ACCESS_TOKEN")
        if not access_token:
            raise DbxTeamConfigError("DBXTEAM_ACCESS_TOKEN is not set")

        api_url = os.environ.get("DBXTEAM_API_URL") or DEFAULT_API_URL
        verbose = os.environ.get("DBXTEAM_VERBOSE", "") == "1"
        timeout_ms = int(os.environ.get("DBXTEAM_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(
            access_token=access_token,
            api_url=api_url,
            timeout_ms=timeout_ms,
            verbose=verbose,
        )

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> "TeamClient":
        return self

    def __exit__(self, exc_type: Any, exc: Any, traceback: Any) -> None:
        self.close()

    def call(self, route: Route[T], arg: Any = None) -> CallResult[T]:
        """Execute a route and return its outcome without raising.

        Args:
            route: A descriptor from ``dbxteam_sdk.routes``.
            arg: The route's argument, or None for routes without one.

        Returns:
            ``Success`` holding the result, or ``Failure`` holding the error.
        """
        return self._dispatcher.call(route, arg)

    def _invoke(self, route: Route[T], arg: Any = None) -> T:
        return self._dispatcher.call(route, arg).unwrap()

    # =========================================================================
    # Team
    # =========================================================================

    def get_info(self) -> TeamGetInfoResult:
        """Retrieve information about the team."""
        return self._invoke(routes.GET_INFO)

    # =========================================================================
    # Groups
    # =========================================================================

    def groups_create(self, arg: GroupCreateArg) -> GroupFullInfo:
        """Create a new, empty group."""
        return self._invoke(routes.GROUPS_CREATE, arg)

    def groups_delete(self, arg: GroupSelector) -> Any:
        """Delete a group.

        The group is gone immediately; revoking group-owned resources may
        continue in the background. Returns a LaunchEmptyResult: ``Complete``
        or an ``AsyncJobId`` to poll with ``groups_job_status_get``.
        """
        return self._invoke(routes.GROUPS_DELETE, arg)

    def groups_get_info(self, arg: GroupsSelector) -> list[GroupsGetInfoItem]:
        """Retrieve information about one or more groups."""
        return self._invoke(routes.GROUPS_GET_INFO, arg)

    def groups_job_status_get(self, arg: PollArg) -> Any:
        """Poll a job started by ``groups_delete`` or a membership change."""
        return self._invoke(routes.GROUPS_JOB_STATUS_GET, arg)

    def groups_list(self, arg: GroupsListArg) -> GroupsListResult:
        return self._invoke(routes.GROUPS_LIST, arg)

    def groups_list_continue(self, arg: GroupsListContinueArg) -> GroupsListResult:
        return self._invoke(routes.GROUPS_LIST_CONTINUE, arg)

    def groups_members_add(self, arg: GroupMembersAddArg) -> GroupMembersChangeResult:
        """Add members to a group.

        Members are added immediately; access to group-owned resources is
        granted by the job named in the result.
        """
        return self._invoke(routes.GROUPS_MEMBERS_ADD, arg)

    def groups_members_list(self, arg: GroupsMembersListArg) -> GroupsMembersListResult:
        return self._invoke(routes.GROUPS_MEMBERS_LIST, arg)

    def groups_members_list_continue(
        self, arg: GroupsMembersListContinueArg
    ) -> GroupsMembersListResult:
        return self._invoke(routes.GROUPS_MEMBERS_LIST_CONTINUE, arg)

    def groups_members_remove(self, arg: GroupMembersRemoveArg) -> GroupMembersChangeResult:
        """Remove members from a group. May remove the group's only owner."""
        return self._invoke(routes.GROUPS_MEMBERS_REMOVE, arg)

    def groups_members_set_access_type(
        self, arg: GroupMembersSetAccessTypeArg
    ) -> list[GroupsGetInfoItem]:
        return self._invoke(routes.GROUPS_MEMBERS_SET_ACCESS_TYPE, arg)

    def groups_update(self, arg: GroupUpdateArgs) -> GroupFullInfo:
        return self._invoke(routes.GROUPS_UPDATE, arg)

    # Older variant of the groups routes; same shapes.

    def alpha_groups_create(self, arg: GroupCreateArg) -> GroupFullInfo:
        return self._invoke(routes.ALPHA_GROUPS_CREATE, arg)

    def alpha_groups_get_info(self, arg: GroupsSelector) -> list[GroupsGetInfoItem]:
        return self._invoke(routes.ALPHA_GROUPS_GET_INFO, arg)

    def alpha_groups_list(self, arg: GroupsListArg) -> GroupsListResult:
        return self._invoke(routes.ALPHA_GROUPS_LIST, arg)

    def alpha_groups_list_continue(self, arg: GroupsListContinueArg) -> GroupsListResult:
        return self._invoke(routes.ALPHA_GROUPS_LIST_CONTINUE, arg)

    def alpha_groups_update(self, arg: GroupUpdateArgs) -> GroupFullInfo:
        return self._invoke(routes.ALPHA_GROUPS_UPDATE, arg)

    # =========================================================================
    # Devices
    # =========================================================================

    def devices_list_member_devices(self, arg: ListMemberDevicesArg) -> ListMemberDevicesResult:
        """List all device sessions of one team member."""
        return self._invoke(routes.DEVICES_LIST_MEMBER_DEVICES, arg)

    def devices_list_members_devices(
        self, arg: ListMembersDevicesArg
    ) -> ListMembersDevicesResult:
        """List device sessions of all members, one page per call."""
        return self._invoke(routes.DEVICES_LIST_MEMBERS_DEVICES, arg)

    def devices_list_team_devices(self, arg: ListTeamDevicesArg) -> ListTeamDevicesResult:
        return self._invoke(routes.DEVICES_LIST_TEAM_DEVICES, arg)

    def devices_revoke_device_session(self, arg: RevokeDeviceSessionArg) -> None:
        self._invoke(routes.DEVICES_REVOKE_DEVICE_SESSION, arg)

    def devices_revoke_device_session_batch(
        self, arg: RevokeDeviceSessionBatchArg
    ) -> RevokeDeviceSessionBatchResult:
        return self._invoke(routes.DEVICES_REVOKE_DEVICE_SESSION_BATCH, arg)

    # =========================================================================
    # Linked Apps
    # =========================================================================

    def linked_apps_list_member_linked_apps(self, arg: ListMemberAppsArg) -> ListMemberAppsResult:
        """List apps linked to one member. Team-linked apps are not included."""
        return self._invoke(routes.LINKED_APPS_LIST_MEMBER_LINKED_APPS, arg)

    def linked_apps_list_members_linked_apps(
        self, arg: ListMembersAppsArg
    ) -> ListMembersAppsResult:
        return self._invoke(routes.LINKED_APPS_LIST_MEMBERS_LINKED_APPS, arg)

    def linked_apps_list_team_linked_apps(self, arg: ListTeamAppsArg) -> ListTeamAppsResult:
        return self._invoke(routes.LINKED_APPS_LIST_TEAM_LINKED_APPS, arg)

    def linked_apps_revoke_linked_app(self, arg: RevokeLinkedApiAppArg) -> None:
        self._invoke(routes.LINKED_APPS_REVOKE_LINKED_APP, arg)

    def linked_apps_revoke_linked_app_batch(
        self, arg: RevokeLinkedApiAppBatchArg
    ) -> RevokeLinkedAppBatchResult:
        return self._invoke(routes.LINKED_APPS_REVOKE_LINKED_APP_BATCH, arg)

    # =========================================================================
    # Members
    # =========================================================================

    def members_add(self, arg: MembersAddArg) -> MembersAddLaunch:
        """Add up to 20 members to the team.

        Returns ``Complete`` with per-member results, or an ``AsyncJobId`` to
        poll with ``members_add_job_status_get``.
        """
        return self._invoke(routes.MEMBERS_ADD, arg)

    def members_add_job_status_get(self, arg: PollArg) -> MembersAddJobStatus:
        return self._invoke(routes.MEMBERS_ADD_JOB_STATUS_GET, arg)

    def members_get_info(self, arg: MembersGetInfoArgs) -> list[MembersGetInfoItem]:
        """Look up several members. Unknown ids come back as ``id_not_found``."""
        return self._invoke(routes.MEMBERS_GET_INFO, arg)

    def members_list(self, arg: MembersListArg) -> MembersListResult:
        return self._invoke(routes.MEMBERS_LIST, arg)

    def members_list_continue(self, arg: MembersListContinueArg) -> MembersListResult:
        return self._invoke(routes.MEMBERS_LIST_CONTINUE, arg)

    def members_recover(self, arg: MembersRecoverArg) -> None:
        self._invoke(routes.MEMBERS_RECOVER, arg)

    def members_remove(self, arg: MembersRemoveArg) -> Any:
        """Remove a member from the team.

        This is not a deactivation: re-adding the email creates a new
        account. Returns a LaunchEmptyResult; poll an ``AsyncJobId`` with
        ``members_remove_job_status_get``.
        """
        return self._invoke(routes.MEMBERS_REMOVE, arg)

    def members_remove_job_status_get(self, arg: PollArg) -> Any:
        return self._invoke(routes.MEMBERS_REMOVE_JOB_STATUS_GET, arg)

    def members_send_welcome_email(self, arg: UserSelectorArg) -> None:
        """Send a welcome email to a pending member. No-op for other members."""
        self._invoke(routes.MEMBERS_SEND_WELCOME_EMAIL, arg)

    def members_set_admin_permissions(
        self, arg: MembersSetPermissionsArg
    ) -> MembersSetPermissionsResult:
        return self._invoke(routes.MEMBERS_SET_ADMIN_PERMISSIONS, arg)

    def members_set_profile(self, arg: MembersSetProfileArg) -> TeamMemberInfo:
        return self._invoke(routes.MEMBERS_SET_PROFILE, arg)

    def members_suspend(self, arg: MembersDeactivateArg) -> None:
        self._invoke(routes.MEMBERS_SUSPEND, arg)

    def members_unsuspend(self, arg: MembersUnsuspendArg) -> None:
        self._invoke(routes.MEMBERS_UNSUSPEND, arg)

    # =========================================================================
    # Property Templates
    # =========================================================================

    def properties_template_add(self, arg: AddPropertyTemplateArg) -> AddPropertyTemplateResult:
        return self._invoke(routes.PROPERTIES_TEMPLATE_ADD, arg)

    def properties_template_get(self, arg: GetPropertyTemplateArg) -> GetPropertyTemplateResult:
        return self._invoke(routes.PROPERTIES_TEMPLATE_GET, arg)

    def properties_template_list(self) -> ListPropertyTemplateIds:
        return self._invoke(routes.PROPERTIES_TEMPLATE_LIST)

    def properties_template_update(
        self, arg: UpdatePropertyTemplateArg
    ) -> UpdatePropertyTemplateResult:
        return self._invoke(routes.PROPERTIES_TEMPLATE_UPDATE, arg)

    # =========================================================================
    # Reports
    # =========================================================================

    def reports_get_activity(self, arg: DateRange) -> GetActivityReport:
        return self._invoke(routes.REPORTS_GET_ACTIVITY, arg)

    def reports_get_devices(self, arg: DateRange) -> GetDevicesReport:
        return self._invoke(routes.REPORTS_GET_DEVICES, arg)

    def reports_get_membership(self, arg: DateRange) -> GetMembershipReport:
        return self._invoke(routes.REPORTS_GET_MEMBERSHIP, arg)

    def reports_get_storage(self, arg: DateRange) -> GetStorageReport:
        return self._invoke(routes.REPORTS_GET_STORAGE, arg)

    # =========================================================================
    # Pagination Helpers
    # =========================================================================

    def groups_list_all(self, arg: GroupsListArg | None = None) -> Iterator[GroupSummary]:
        """Iterate over every group, following cursors until exhausted."""
        return iter_items(
            lambda: self.groups_list(arg or GroupsListArg()),
            lambda cursor: self.groups_list_continue(GroupsListContinueArg(cursor=cursor)),
        )

    def alpha_groups_list_all(self, arg: GroupsListArg | None = None) -> Iterator[GroupSummary]:
        return iter_items(
            lambda: self.alpha_groups_list(arg or GroupsListArg()),
            lambda cursor: self.alpha_groups_list_continue(GroupsListContinueArg(cursor=cursor)),
        )

    def groups_members_list_all(self, arg: GroupsMembersListArg) -> Iterator[GroupMemberInfo]:
        return iter_items(
            lambda: self.groups_members_list(arg),
            lambda cursor: self.groups_members_list_continue(
                GroupsMembersListContinueArg(cursor=cursor)
            ),
        )

    def members_list_all(self, arg: MembersListArg | None = None) -> Iterator[TeamMemberInfo]:
        """Iterate over every team member, following cursors until exhausted."""
        return iter_items(
            lambda: self.members_list(arg or MembersListArg()),
            lambda cursor: self.members_list_continue(MembersListContinueArg(cursor=cursor)),
        )

    def devices_list_members_devices_all(
        self, arg: ListMembersDevicesArg | None = None
    ) -> Iterator[MemberDevices]:
        """Iterate over device sessions of every member.

        This listing continues by re-issuing the same route with the cursor.
        """
        first = arg or ListMembersDevicesArg()
        return iter_items(
            lambda: self.devices_list_members_devices(first),
            lambda cursor: self.devices_list_members_devices(
                first.model_copy(update={"cursor": cursor})
            ),
        )

    def devices_list_team_devices_all(
        self, arg: ListTeamDevicesArg | None = None
    ) -> Iterator[MemberDevices]:
        first = arg or ListTeamDevicesArg()
        return iter_items(
            lambda: self.devices_list_team_devices(first),
            lambda cursor: self.devices_list_team_devices(
                first.model_copy(update={"cursor": cursor})
            ),
        )

    def linked_apps_list_members_linked_apps_all(
        self, arg: ListMembersAppsArg | None = None
    ) -> Iterator[MemberLinkedApps]:
        first = arg or ListMembersAppsArg()
        return iter_items(
            lambda: self.linked_apps_list_members_linked_apps(first),
            lambda cursor: self.linked_apps_list_members_linked_apps(
                first.model_copy(update={"cursor": cursor})
            ),
        )

    def linked_apps_list_team_linked_apps_all(
        self, arg: ListTeamAppsArg | None = None
    ) -> Iterator[MemberLinkedApps]:
        first = arg or ListTeamAppsArg()
        return iter_items(
            lambda: self.linked_apps_list_team_linked_apps(first),
            lambda cursor: self.linked_apps_list_team_linked_apps(
                first.model_copy(update={"cursor": cursor})
            ),
        )

    # =========================================================================
    # Async Job Helpers
    # =========================================================================
    # Each helper launches the job and polls until it finishes. ``wait`` is
    # called between in-progress polls with the poll count; it sets the pace.

    def groups_delete_and_wait(
        self, arg: GroupSelector, *, wait: WaitFn, max_polls: int | None = None
    ) -> None:
        wait_for_job(
            self.groups_delete(arg),
            lambda job_id: self.groups_job_status_get(PollArg(async_job_id=job_id)),
            wait=wait,
            max_polls=max_polls,
        )

    def groups_members_add_and_wait(
        self, arg: GroupMembersAddArg, *, wait: WaitFn, max_polls: int | None = None
    ) -> GroupFullInfo:
        """Add group members and wait until their access is granted."""
        result = self.groups_members_add(arg)
        wait_for_job(
            result.launch,
            lambda job_id: self.groups_job_status_get(PollArg(async_job_id=job_id)),
            wait=wait,
            max_polls=max_polls,
        )
        return result.group_info

    def groups_members_remove_and_wait(
        self, arg: GroupMembersRemoveArg, *, wait: WaitFn, max_polls: int | None = None
    ) -> GroupFullInfo:
        result = self.groups_members_remove(arg)
        wait_for_job(
            result.launch,
            lambda job_id: self.groups_job_status_get(PollArg(async_job_id=job_id)),
            wait=wait,
            max_polls=max_polls,
        )
        return result.group_info

    def members_add_and_wait(
        self, arg: MembersAddArg, *, wait: WaitFn, max_polls: int | None = None
    ) -> list[MemberAddResult]:
        """Add members and return the per-member results once the job is done."""
        return wait_for_job(
            self.members_add(arg),
            lambda job_id: self.members_add_job_status_get(PollArg(async_job_id=job_id)),
            wait=wait,
            max_polls=max_polls,
        )

    def members_remove_and_wait(
        self, arg: MembersRemoveArg, *, wait: WaitFn, max_polls: int | None = None
    ) -> None:
        wait_for_job(
            self.members_remove(arg),
            lambda job_id: self.members_remove_job_status_get(PollArg(async_job_id=job_id)),
            wait=wait,
            max_polls=max_polls,
        )
