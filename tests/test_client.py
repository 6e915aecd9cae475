"""Tests for TeamClient."""

import json
import os
from unittest.mock import patch

import httpx
import pytest
import respx

from dbxteam_sdk import TeamClient, routes
from dbxteam_sdk._internal.dispatch.models import Failure
from dbxteam_sdk.exceptions import (
    AsyncJobFailedError,
    DbxTeamApplicationError,
    DbxTeamConfigError,
)
from dbxteam_sdk.models.common import EmailSelector, GroupIdSelector
from dbxteam_sdk.models.devices import ListMembersDevicesArg
from dbxteam_sdk.models.groups import GroupAccessType, GroupMembersAddArg, MemberAccess
from dbxteam_sdk.models.members import (
    MemberAddArg,
    MembersAddArg,
    MembersListArg,
    MembersRemoveArg,
    MembersUnsuspendArg,
)

BASE_URL = "http://test"


def make_client() -> TeamClient:
    return TeamClient(http_client=httpx.Client(base_url=BASE_URL))


def member_json(n: int) -> dict:
    return {
        "profile": {
            "team_member_id": f"dbmid:{n}",
            "email": f"user{n}@example.com",
            "email_verified": True,
            "status": {".tag": "active"},
            "name": {
                "given_name": "User",
                "surname": str(n),
                "familiar_name": "User",
                "display_name": f"User {n}",
                "abbreviated_name": "U",
            },
            "membership_type": {".tag": "full"},
        },
        "role": {".tag": "member_only"},
    }


def members_page(start: int, count: int, cursor: str, has_more: bool) -> httpx.Response:
    return httpx.Response(
        200,
        json={
            "members": [member_json(n) for n in range(start, start + count)],
            "cursor": cursor,
            "has_more": has_more,
        },
    )


GROUP_INFO = {
    "group_name": "Eng",
    "group_id": "g:1",
    "group_management_type": {".tag": "user_managed"},
    "created": 1700000000000,
    "member_count": 1,
}


class TestTeamClientFromEnv:
    """Tests for TeamClient.from_env()."""

    def test_from_env_with_all_vars(self):
        """Should apply every configuration variable."""
        env = {
            "DBXTEAM_ACCESS_TOKEN": "sl.token",
            "DBXTEAM_API_URL": "https://api.example.test",
            "DBXTEAM_VERBOSE": "1",
            "DBXTEAM_TIMEOUT_MS": "5000",
        }
        with patch.dict(os.environ, env, clear=True):
            client = TeamClient.from_env()
        assert client._verbose is True
        assert client._http.timeout.read == 5.0
        assert str(client._http.base_url).startswith("https://api.example.test")
        client.close()

    def test_from_env_defaults(self):
        """Should use the public API host and quiet logging by default."""
        with patch.dict(os.environ, {"DBXTEAM_ACCESS_TOKEN": "sl.token"}, clear=True):
            client = TeamClient.from_env()
        assert client._verbose is False
        assert client._http.timeout.read == 30.0
        assert str(client._http.base_url).startswith("https://api.dropboxapi.com")
        client.close()

    def test_from_env_missing_token(self):
        """Should raise a config error when the token is missing."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(DbxTeamConfigError):
                TeamClient.from_env()

    def test_from_env_malformed_timeout_ms_raises(self):
        """Should raise ValueError for a non-integer timeout."""
        env = {"DBXTEAM_ACCESS_TOKEN": "sl.token", "DBXTEAM_TIMEOUT_MS": "soon"}
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValueError):
                TeamClient.from_env()

    def test_verbose_only_for_one(self):
        """Should treat values other than "1" as quiet."""
        env = {"DBXTEAM_ACCESS_TOKEN": "sl.token", "DBXTEAM_VERBOSE": "true"}
        with patch.dict(os.environ, env, clear=True):
            client = TeamClient.from_env()
        assert client._verbose is False
        client.close()


class TestTeamClientLifecycle:
    """Tests for construction and closing."""

    def test_requires_token_or_client(self):
        """Should refuse to build without credentials."""
        with pytest.raises(DbxTeamConfigError):
            TeamClient()

    def test_closes_owned_client(self):
        """Should close the transport it created."""
        with TeamClient(access_token="sl.token") as client:
            http = client._http
        assert http.is_closed

    def test_keeps_injected_client_open(self):
        """Should leave an injected transport to its owner."""
        http = httpx.Client(base_url=BASE_URL)
        with TeamClient(http_client=http):
            pass
        assert not http.is_closed
        http.close()

    @respx.mock
    def test_sends_bearer_token(self):
        """Should authenticate every request with the access token."""
        route = respx.post(f"{BASE_URL}/2/team/members/unsuspend").mock(
            return_value=httpx.Response(200, content=b"null")
        )
        with TeamClient(access_token="sl.token", api_url=BASE_URL) as client:
            client.members_unsuspend(MembersUnsuspendArg(user=EmailSelector(email="a@example.com")))

        request = route.calls[0].request
        assert request.headers["Authorization"] == "Bearer sl.token"
        assert request.headers["User-Agent"].startswith("dbxteam-sdk/")


class TestRouteMethods:
    """Tests for route methods and call()."""

    @respx.mock
    def test_method_raises_application_error(self):
        """Should raise the decoded route error."""
        respx.post(f"{BASE_URL}/2/team/members/unsuspend").mock(
            return_value=httpx.Response(
                409,
                json={
                    "error_summary": "unsuspend_non_suspended_member/",
                    "error": {".tag": "unsuspend_non_suspended_member"},
                },
            )
        )

        with pytest.raises(DbxTeamApplicationError) as exc_info:
            make_client().members_unsuspend(
                MembersUnsuspendArg(user=EmailSelector(email="a@example.com"))
            )

        assert exc_info.value.tag == "unsuspend_non_suspended_member"

    @respx.mock
    def test_call_returns_failure(self):
        """Should return the failure instead of raising."""
        respx.post(f"{BASE_URL}/2/team/groups/list").mock(
            return_value=httpx.Response(500, json={"error_summary": "internal_error/"})
        )

        result = make_client().call(routes.GROUPS_LIST, {"limit": 10})

        assert isinstance(result, Failure)
        assert result.error.status_code == 500

    @respx.mock
    def test_get_info(self):
        """Should call the no-argument route."""
        respx.post(f"{BASE_URL}/2/team/get_info").mock(
            return_value=httpx.Response(
                200,
                json={
                    "name": "Acme",
                    "team_id": "dbtid:1",
                    "num_licensed_users": 5,
                    "num_provisioned_users": 2,
                },
            )
        )

        info = make_client().get_info()

        assert info.team_id == "dbtid:1"


class TestPaginationHelpers:
    """Tests for the *_all iterators."""

    @respx.mock
    def test_members_list_all(self):
        """Should follow continuation cursors across three pages."""
        respx.post(f"{BASE_URL}/2/team/members/list").mock(
            return_value=members_page(0, 4, "c1", True)
        )
        cont = respx.post(f"{BASE_URL}/2/team/members/list/continue").mock(
            side_effect=[members_page(4, 4, "c2", True), members_page(8, 2, "c3", False)]
        )

        members = list(make_client().members_list_all(MembersListArg(limit=4)))

        assert [m.profile.team_member_id for m in members] == [f"dbmid:{n}" for n in range(10)]
        assert cont.call_count == 2
        sent = [json.loads(call.request.content)["cursor"] for call in cont.calls]
        assert sent == ["c1", "c2"]

    @respx.mock
    def test_devices_listing_reissues_route_with_cursor(self):
        """Should continue device listings through the same route."""
        route = respx.post(f"{BASE_URL}/2/team/devices/list_members_devices").mock(
            side_effect=[
                httpx.Response(
                    200,
                    json={
                        "devices": [{"team_member_id": "dbmid:1"}],
                        "cursor": "d1",
                        "has_more": True,
                    },
                ),
                httpx.Response(
                    200,
                    json={"devices": [{"team_member_id": "dbmid:2"}], "has_more": False},
                ),
            ]
        )

        devices = list(
            make_client().devices_list_members_devices_all(
                ListMembersDevicesArg(include_web_sessions=False)
            )
        )

        assert [d.team_member_id for d in devices] == ["dbmid:1", "dbmid:2"]
        first, second = (json.loads(call.request.content) for call in route.calls)
        assert "cursor" not in first
        assert second["cursor"] == "d1"
        assert second["include_web_sessions"] is False


class TestAsyncJobHelpers:
    """Tests for the *_and_wait helpers."""

    @respx.mock
    def test_members_remove_and_wait(self):
        """Should poll until complete and stop."""
        respx.post(f"{BASE_URL}/2/team/members/remove").mock(
            return_value=httpx.Response(
                200, json={".tag": "async_job_id", "async_job_id": "dbjid:1"}
            )
        )
        poll = respx.post(f"{BASE_URL}/2/team/members/remove/job_status/get").mock(
            side_effect=[
                httpx.Response(200, json={".tag": "in_progress"}),
                httpx.Response(200, json={".tag": "in_progress"}),
                httpx.Response(200, json={".tag": "complete"}),
            ]
        )
        waits: list[int] = []

        make_client().members_remove_and_wait(
            MembersRemoveArg(user=EmailSelector(email="a@example.com")), wait=waits.append
        )

        assert poll.call_count == 3
        assert waits == [1, 2]
        assert json.loads(poll.calls[0].request.content) == {"async_job_id": "dbjid:1"}

    @respx.mock
    def test_members_add_and_wait_fast_path(self):
        """Should return results without polling when the launch completed."""
        respx.post(f"{BASE_URL}/2/team/members/add").mock(
            return_value=httpx.Response(
                200,
                json={
                    ".tag": "complete",
                    "complete": [{".tag": "success", **member_json(1)}],
                },
            )
        )
        results = make_client().members_add_and_wait(
            MembersAddArg(new_members=[MemberAddArg(member_email="user1@example.com")]),
            wait=lambda attempt: None,
        )

        assert results[0].profile.email == "user1@example.com"
        assert len(respx.calls) == 1

    @respx.mock
    def test_members_add_and_wait_failed(self):
        """Should raise when the job fails."""
        respx.post(f"{BASE_URL}/2/team/members/add").mock(
            return_value=httpx.Response(
                200, json={".tag": "async_job_id", "async_job_id": "dbjid:2"}
            )
        )
        respx.post(f"{BASE_URL}/2/team/members/add/job_status/get").mock(
            return_value=httpx.Response(200, json={".tag": "failed", "failed": "quota"})
        )

        with pytest.raises(AsyncJobFailedError):
            make_client().members_add_and_wait(
                MembersAddArg(new_members=[MemberAddArg(member_email="x@example.com")]),
                wait=lambda attempt: None,
            )

    @respx.mock
    def test_groups_members_add_and_wait(self):
        """Should wait for the access job and return the updated group."""
        respx.post(f"{BASE_URL}/2/team/groups/members/add").mock(
            return_value=httpx.Response(
                200, json={"group_info": GROUP_INFO, "async_job_id": "dbjid:3"}
            )
        )
        poll = respx.post(f"{BASE_URL}/2/team/groups/job_status/get").mock(
            return_value=httpx.Response(200, json={".tag": "complete"})
        )

        group = make_client().groups_members_add_and_wait(
            GroupMembersAddArg(
                group=GroupIdSelector(group_id="g:1"),
                members=[
                    MemberAccess(
                        user=EmailSelector(email="a@example.com"),
                        access_type=GroupAccessType(tag="member"),
                    )
                ],
            ),
            wait=lambda attempt: None,
        )

        assert group.group_id == "g:1"
        assert poll.call_count == 1
