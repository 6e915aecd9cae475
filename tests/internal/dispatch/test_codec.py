"""Tests for the route codec."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from dbxteam_sdk import routes
from dbxteam_sdk._internal.dispatch.codec import (
    decode_envelope,
    decode_result,
    decode_route_error,
    encode_argument,
)
from dbxteam_sdk.exceptions import DbxTeamProtocolError
from dbxteam_sdk.models.common import DateRange, GroupIdSelector
from dbxteam_sdk.models.members import MembersListArg


class TestEncodeArgument:
    """Tests for encode_argument."""

    def test_omits_unset_optional_fields(self):
        """Should not send None-valued optional fields."""
        body = encode_argument(routes.DEVICES_LIST_MEMBERS_DEVICES, {"include_web_sessions": False})
        assert "cursor" not in json.loads(body)

    def test_accepts_dicts(self):
        """Should validate plain dicts against the argument type."""
        body = encode_argument(routes.MEMBERS_LIST, {"limit": 3})
        assert json.loads(body) == {"limit": 3, "include_removed": False}

    def test_rejects_invalid_argument(self):
        """Should raise a protocol error for structurally invalid arguments."""
        with pytest.raises(DbxTeamProtocolError):
            encode_argument(routes.MEMBERS_LIST, {"limit": "many"})

    def test_no_body_route(self):
        """Should return None for routes without an argument."""
        assert encode_argument(routes.GET_INFO, None) is None

    def test_tagged_selector(self):
        """Should write the discriminant under .tag."""
        body = encode_argument(routes.GROUPS_DELETE, GroupIdSelector(group_id="g:1"))
        assert json.loads(body) == {".tag": "group_id", "group_id": "g:1"}

    def test_date_range_timestamps(self):
        """Should format timestamps as UTC seconds."""
        arg = DateRange(start_date=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
        body = encode_argument(routes.REPORTS_GET_STORAGE, arg)
        assert json.loads(body) == {"start_date": "2024-01-02T03:04:05Z"}

    def test_date_range_converts_to_utc(self):
        """Should send the UTC instant for datetimes in other zones."""
        plus_two = timezone(timedelta(hours=2))
        arg = DateRange(
            start_date=datetime(2024, 1, 1, 12, tzinfo=plus_two),
            end_date=datetime(2024, 1, 2, 1, 30, tzinfo=plus_two),
        )
        body = encode_argument(routes.REPORTS_GET_ACTIVITY, arg)
        assert json.loads(body) == {
            "start_date": "2024-01-01T10:00:00Z",
            "end_date": "2024-01-01T23:30:00Z",
        }

    def test_date_range_naive_taken_as_utc(self):
        """Should send naive datetimes unchanged."""
        arg = DateRange(end_date=datetime(2024, 5, 6))
        body = encode_argument(routes.REPORTS_GET_ACTIVITY, arg)
        assert json.loads(body) == {"end_date": "2024-05-06T00:00:00Z"}


class TestDecode:
    """Tests for the decode helpers."""

    def test_decode_result_void_route(self):
        """Should ignore the body of void routes."""
        assert decode_result(routes.MEMBERS_UNSUSPEND, b"null") is None

    def test_decode_result_keeps_body_preview(self):
        """Should attach the body to protocol errors."""
        with pytest.raises(DbxTeamProtocolError) as exc_info:
            decode_result(routes.MEMBERS_LIST, b"not json")
        assert exc_info.value.body == "not json"

    def test_decode_envelope_rejects_missing_summary(self):
        """Should require error_summary."""
        with pytest.raises(DbxTeamProtocolError):
            decode_envelope(b'{"error": {}}', 500)

    def test_decode_route_error_missing_payload(self):
        """Should reject a 409 without an error member when the route defines one."""
        envelope = decode_envelope(b'{"error_summary": "x"}', 409)
        with pytest.raises(DbxTeamProtocolError):
            decode_route_error(routes.MEMBERS_LIST_CONTINUE, envelope, b"")

    def test_decode_route_error(self):
        """Should decode the error member against the route error type."""
        body = b'{"error_summary": "reset/", "error": {".tag": "reset"}}'
        envelope = decode_envelope(body, 409)
        error = decode_route_error(routes.DEVICES_LIST_MEMBERS_DEVICES, envelope, body)
        assert error.tag == "reset"


def test_members_list_limit_bounds():
    """Should enforce the listing limit on the argument model."""
    with pytest.raises(ValueError):
        MembersListArg(limit=0)
