"""Device session records and the devices/* route shapes."""

from datetime import datetime
from typing import Annotated, ClassVar, Literal

from pydantic import Field

from dbxteam_sdk._internal.dispatch.models import TaggedModel, WireModel
from dbxteam_sdk._internal.pagination.models import ListPage

# =============================================================================
# Sessions
# =============================================================================


class DeviceSession(WireModel):
    session_id: str
    ip_address: str | None = None
    country: str | None = None
    created: datetime | None = None
    updated: datetime | None = None


class ActiveWebSession(DeviceSession):
    user_agent: str
    os: str
    browser: str
    expires: datetime | None = None


class DesktopPlatform(TaggedModel):
    tag: Literal["windows", "mac", "linux", "other"] = Field(alias=".tag")


class MobileClientPlatform(TaggedModel):
    tag: Literal["iphone", "ipad", "android", "windows_phone", "blackberry", "other"] = Field(
        alias=".tag"
    )


class DesktopClientSession(DeviceSession):
    host_name: str
    client_version: str
    platform: str
    is_delete_on_unlink_supported: bool
    client_type: DesktopPlatform | None = None


class MobileClientSession(DeviceSession):
    device_name: str
    client_version: str | None = None
    os_version: str | None = None
    last_carrier: str | None = None
    client_type: MobileClientPlatform | None = None


class MemberDevices(WireModel):
    team_member_id: str
    web_sessions: list[ActiveWebSession] | None = None
    desktop_clients: list[DesktopClientSession] | None = None
    mobile_clients: list[MobileClientSession] | None = None


# =============================================================================
# Listing
# =============================================================================


class ListMemberDevicesArg(WireModel):
    team_member_id: str
    include_web_sessions: bool = True
    include_desktop_clients: bool = True
    include_mobile_clients: bool = True


class ListMemberDevicesResult(WireModel):
    active_web_sessions: list[ActiveWebSession] | None = None
    desktop_client_sessions: list[DesktopClientSession] | None = None
    mobile_client_sessions: list[MobileClientSession] | None = None


class ListMemberDevicesError(TaggedModel):
    tag: Literal["member_not_found", "other"] = Field(alias=".tag")


class ListMembersDevicesArg(WireModel):
    """Pass the previous page's cursor to continue the listing."""

    cursor: str | None = None
    include_web_sessions: bool = True
    include_desktop_clients: bool = True
    include_mobile_clients: bool = True


class ListMembersDevicesResult(ListPage):
    items_field: ClassVar[str] = "devices"

    devices: list[MemberDevices]


class ListMembersDevicesError(TaggedModel):
    """``reset`` means the cursor is no longer valid; restart the listing."""

    tag: Literal["reset", "other"] = Field(alias=".tag")


class ListTeamDevicesArg(ListMembersDevicesArg):
    pass


class ListTeamDevicesResult(ListMembersDevicesResult):
    pass


class ListTeamDevicesError(TaggedModel):
    tag: Literal["reset", "other"] = Field(alias=".tag")


# =============================================================================
# Revocation
# =============================================================================


class RevokeWebSession(TaggedModel):
    tag: Literal["web_session"] = Field(default="web_session", alias=".tag")
    session_id: str
    team_member_id: str


class RevokeDesktopClient(TaggedModel):
    tag: Literal["desktop_client"] = Field(default="desktop_client", alias=".tag")
    session_id: str
    team_member_id: str
    delete_on_unlink: bool = False


class RevokeMobileClient(TaggedModel):
    tag: Literal["mobile_client"] = Field(default="mobile_client", alias=".tag")
    session_id: str
    team_member_id: str


RevokeDeviceSessionArg = Annotated[
    RevokeWebSession | RevokeDesktopClient | RevokeMobileClient,
    Field(discriminator="tag"),
]


class RevokeDeviceSessionError(TaggedModel):
    tag: Literal["device_session_not_found", "member_not_found", "other"] = Field(alias=".tag")


class RevokeDeviceSessionBatchArg(WireModel):
    revoke_devices: list[RevokeDeviceSessionArg]


class RevokeDeviceSessionStatus(WireModel):
    success: bool
    error_type: RevokeDeviceSessionError | None = None


class RevokeDeviceSessionBatchResult(WireModel):
    revoke_devices_status: list[RevokeDeviceSessionStatus]


class RevokeDeviceSessionBatchError(TaggedModel):
    tag: Literal["other"] = Field(alias=".tag")
