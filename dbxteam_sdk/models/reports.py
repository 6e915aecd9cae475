"""Usage report shapes for reports/*.

Each report holds one value per day starting at ``start_date``. Days the
server has no data for are null.
"""

from dbxteam_sdk._internal.dispatch.models import WireModel


class BaseDfbReport(WireModel):
    start_date: str


class GetActivityReport(BaseDfbReport):
    adds: list[int | None]
    edits: list[int | None]
    deletes: list[int | None]
    active_users_28_day: list[int | None]
    active_users_7_day: list[int | None]
    active_users_1_day: list[int | None]
    active_shared_folders_28_day: list[int | None]
    active_shared_folders_7_day: list[int | None]
    active_shared_folders_1_day: list[int | None]
    shared_links_created: list[int | None]
    shared_links_viewed_by_team: list[int | None]
    shared_links_viewed_by_outside_user: list[int | None]
    shared_links_viewed_by_not_logged_in: list[int | None]
    shared_links_viewed_total: list[int | None]


class DevicesActive(WireModel):
    windows: list[int | None]
    macos: list[int | None]
    linux: list[int | None]
    ios: list[int | None]
    android: list[int | None]
    other: list[int | None]
    total: list[int | None]


class GetDevicesReport(BaseDfbReport):
    active_1_day: DevicesActive
    active_7_day: DevicesActive
    active_28_day: DevicesActive


class GetMembershipReport(BaseDfbReport):
    team_size: list[int | None]
    pending_invites: list[int | None]
    members_joined: list[int | None]
    suspended_members: list[int | None]
    licenses: list[int | None]


class StorageBucket(WireModel):
    bucket: str
    users: int


class GetStorageReport(BaseDfbReport):
    total_usage: list[int | None]
    shared_usage: list[int | None]
    unshared_usage: list[int | None]
    shared_folders: list[int | None]
    member_storage_map: list[list[StorageBucket]]
