"""Team-level information."""

from typing import Any

from dbxteam_sdk._internal.dispatch.models import WireModel


class TeamGetInfoResult(WireModel):
    name: str
    team_id: str
    num_licensed_users: int
    num_provisioned_users: int
    num_used_licenses: int | None = None
    policies: dict[str, Any] | None = None
