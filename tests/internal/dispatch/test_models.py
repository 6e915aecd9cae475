"""Tests for dispatcher models."""

import pytest

from dbxteam_sdk import routes
from dbxteam_sdk._internal.dispatch.models import (
    ApiErrorEnvelope,
    Failure,
    Route,
    Success,
)
from dbxteam_sdk.exceptions import DbxTeamProtocolError
from dbxteam_sdk.models.members import MembersListArg, MembersListResult


class TestRoute:
    """Tests for the Route descriptor."""

    def test_url_path(self):
        """Should place the route below the version and namespace."""
        assert routes.MEMBERS_LIST_CONTINUE.url_path == "/2/team/members/list/continue"

    def test_adapters_built_from_types(self):
        """Should build adapters only for declared types."""
        route = Route(name="members/list", path="members/list", arg_type=MembersListArg)
        assert route.arg_adapter is not None
        assert route.result_adapter is None
        assert route.error_adapter is None
        assert route.has_request_body is True

    def test_route_is_immutable(self):
        """Should not allow mutation after creation."""
        with pytest.raises(AttributeError):
            routes.MEMBERS_LIST.path = "other"  # type: ignore[misc]

    def test_routes_without_argument(self):
        """Should mark no-argument routes."""
        assert routes.GET_INFO.has_request_body is False
        assert routes.PROPERTIES_TEMPLATE_LIST.has_request_body is False

    def test_route_table(self):
        """Should index every route by name."""
        assert routes.ROUTES["members/list"] is routes.MEMBERS_LIST
        assert len(routes.ROUTES) == 49
        assert all(name == route.path for name, route in routes.ROUTES.items())

    def test_route_table_lists_each_route_once(self):
        """Should index exactly the declared route constants."""
        names = [route.name for route in routes.ALL_ROUTES]
        assert len(names) == len(set(names)) == len(routes.ROUTES)
        assert routes.GET_INFO in routes.ALL_ROUTES


class TestCallResult:
    """Tests for Success and Failure."""

    def test_success_unwrap(self):
        """Should return the value."""
        result = Success(MembersListResult(members=[], cursor="c", has_more=False))
        assert result.ok is True
        assert result.unwrap().has_more is False

    def test_failure_unwrap_raises(self):
        """Should raise the carried error."""
        result = Failure(DbxTeamProtocolError("bad"))
        assert result.ok is False
        with pytest.raises(DbxTeamProtocolError):
            result.unwrap()


class TestApiErrorEnvelope:
    """Tests for the error envelope."""

    def test_minimal_envelope(self):
        """Should require only the summary."""
        envelope = ApiErrorEnvelope.model_validate_json(b'{"error_summary": "other/"}')
        assert envelope.error_summary == "other/"
        assert envelope.user_message is None
        assert envelope.error is None

    def test_ignores_unknown_fields(self):
        """Should ignore fields it does not know."""
        envelope = ApiErrorEnvelope.model_validate(
            {"error_summary": "x", "request_id": "abc", "error": {".tag": "other"}}
        )
        assert envelope.error == {".tag": "other"}
