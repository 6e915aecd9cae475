"""Tests for tagged-union decoding of route models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from dbxteam_sdk._internal.jobs.models import Complete, Failed, InProgress
from dbxteam_sdk.models.common import EmailSelector, ExternalIdSelector, UserSelectorArg
from dbxteam_sdk.models.devices import RevokeDesktopClient, RevokeDeviceSessionBatchArg
from dbxteam_sdk.models.groups import GroupIdNotFound, GroupInfoItem, GroupsGetInfoItem
from dbxteam_sdk.models.members import (
    MemberAddFailure,
    MemberAddSuccess,
    MembersAddJobStatus,
    MembersAddLaunch,
    MemberInfoItem,
    MembersGetInfoItem,
)
from dbxteam_sdk.models.properties import ModifyPropertyTemplateError, TemplateNotFound

PROFILE = {
    "team_member_id": "dbmid:1",
    "email": "a@example.com",
    "email_verified": False,
    "status": {".tag": "invited"},
    "name": {
        "given_name": "Ada",
        "surname": "Lovelace",
        "familiar_name": "Ada",
        "display_name": "Ada Lovelace",
        "abbreviated_name": "AL",
    },
    "membership_type": {".tag": "full"},
}


class TestUserSelector:
    """Tests for the user selector union."""

    def test_decode_by_tag(self):
        """Should pick the variant named by .tag."""
        selector = TypeAdapter(UserSelectorArg).validate_python(
            {".tag": "external_id", "external_id": "hr-42"}
        )
        assert isinstance(selector, ExternalIdSelector)
        assert selector.external_id == "hr-42"

    def test_dump_uses_wire_tag(self):
        """Should serialize the tag under .tag."""
        assert EmailSelector(email="a@example.com").model_dump(by_alias=True) == {
            ".tag": "email",
            "email": "a@example.com",
        }

    def test_unknown_tag(self):
        """Should reject tags outside the union."""
        with pytest.raises(ValidationError):
            TypeAdapter(UserSelectorArg).validate_python({".tag": "phone", "phone": "1"})


class TestGetInfoItems:
    """Tests for per-id lookup results."""

    def test_members_get_info_mixed(self):
        """Should decode found and missing members in one list."""
        items = TypeAdapter(list[MembersGetInfoItem]).validate_python(
            [
                {".tag": "id_not_found", "id_not_found": "nobody@example.com"},
                {".tag": "member_info", "profile": PROFILE, "role": {".tag": "team_admin"}},
            ]
        )
        assert items[0].id_not_found == "nobody@example.com"
        assert isinstance(items[1], MemberInfoItem)
        assert items[1].role.tag == "team_admin"

    def test_groups_get_info(self):
        """Should decode group info items with the struct fields inline."""
        items = TypeAdapter(list[GroupsGetInfoItem]).validate_python(
            [
                {
                    ".tag": "group_info",
                    "group_name": "Eng",
                    "group_id": "g:1",
                    "group_management_type": {".tag": "company_managed"},
                    "created": 1700000000000,
                },
                {".tag": "id_not_found", "id_not_found": "g:2"},
            ]
        )
        assert isinstance(items[0], GroupInfoItem)
        assert items[0].created == 1700000000000
        assert isinstance(items[1], GroupIdNotFound)


class TestMembersAdd:
    """Tests for members/add results."""

    def test_launch_complete_with_results(self):
        """Should decode per-member successes and failures."""
        launch = TypeAdapter(MembersAddLaunch).validate_python(
            {
                ".tag": "complete",
                "complete": [
                    {".tag": "success", "profile": PROFILE, "role": {".tag": "member_only"}},
                    {".tag": "user_already_on_team", "user_already_on_team": "b@example.com"},
                ],
            }
        )
        assert isinstance(launch, Complete)
        success, failure = launch.complete
        assert isinstance(success, MemberAddSuccess)
        assert success.profile.status.tag == "invited"
        assert isinstance(failure, MemberAddFailure)
        assert failure.detail == "b@example.com"

    def test_job_status_variants(self):
        """Should decode in_progress and failed poll answers."""
        adapter = TypeAdapter(MembersAddJobStatus)
        assert isinstance(adapter.validate_python({".tag": "in_progress"}), InProgress)
        failed = adapter.validate_python({".tag": "failed", "failed": "Could not add members"})
        assert isinstance(failed, Failed)
        assert failed.failed == "Could not add members"


class TestOtherUnions:
    """Tests for remaining tagged unions."""

    def test_property_template_error(self):
        """Should decode the data-carrying and void variants."""
        adapter = TypeAdapter(ModifyPropertyTemplateError)
        not_found = adapter.validate_python(
            {".tag": "template_not_found", "template_not_found": "ptid:1"}
        )
        assert isinstance(not_found, TemplateNotFound)
        assert adapter.validate_python({".tag": "too_many_templates"}).tag == "too_many_templates"

    def test_revoke_batch_argument(self):
        """Should serialize each device session variant with its tag."""
        arg = RevokeDeviceSessionBatchArg(
            revoke_devices=[RevokeDesktopClient(session_id="s1", team_member_id="dbmid:1")]
        )
        assert arg.model_dump(by_alias=True, exclude_none=True) == {
            "revoke_devices": [
                {
                    ".tag": "desktop_client",
                    "session_id": "s1",
                    "team_member_id": "dbmid:1",
                    "delete_on_unlink": False,
                }
            ]
        }
