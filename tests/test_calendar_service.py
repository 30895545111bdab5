"""
Tests for the calendar service module.
"""

import pytest
from datetime import datetime
from unittest.mock import patch, MagicMock

from brainstormai.models.event import AuthTokens
from brainstormai.services.calendar_service import CalendarService


@pytest.fixture
def tokens():
    """Fixture providing a user's OAuth tokens."""
    return AuthTokens(access_token="access-123", refresh_token="refresh-456", expiry_date=1735689600000)


@pytest.fixture
def calendar_service():
    return CalendarService(
        client_id="client-id",
        client_secret="client-secret",
        redirect_uri="http://localhost:5000/oauth2callback",
    )


@pytest.fixture
def mock_build():
    """Fixture providing a mocked Google API discovery build."""
    with patch('brainstormai.services.calendar_service.build') as mock_build:
        yield mock_build


@pytest.fixture
def mock_events(mock_build):
    return mock_build.return_value.events.return_value


@pytest.fixture
def mock_flow():
    with patch('brainstormai.services.calendar_service.Flow') as mock_flow:
        yield mock_flow


class TestCalendarServiceAuth:
    """Tests for the OAuth helpers."""

    def test_generate_auth_url(self, calendar_service, mock_flow):
        flow = mock_flow.from_client_config.return_value
        flow.authorization_url.return_value = ("https://accounts.google.com/o/oauth2/auth?x=1", "user-1")

        url = calendar_service.generate_auth_url(state="user-1")

        assert url == "https://accounts.google.com/o/oauth2/auth?x=1"
        flow.authorization_url.assert_called_once_with(access_type="offline", prompt="consent", state="user-1")
        client_config = mock_flow.from_client_config.call_args[0][0]
        assert client_config["web"]["client_id"] == "client-id"
        assert mock_flow.from_client_config.call_args.kwargs["redirect_uri"] == "http://localhost:5000/oauth2callback"

    def test_get_tokens_from_code(self, calendar_service, mock_flow):
        flow = mock_flow.from_client_config.return_value
        flow.credentials = MagicMock(token="access-123", refresh_token="refresh-456", expiry=datetime(2025, 1, 1))

        tokens = calendar_service.get_tokens_from_code("auth-code")

        flow.fetch_token.assert_called_once_with(code="auth-code")
        assert tokens.access_token == "access-123"
        assert tokens.refresh_token == "refresh-456"
        assert tokens.expiry_date == 1735689600000

    @patch('brainstormai.services.calendar_service.logger')
    def test_get_tokens_from_code_error(self, mock_logger, calendar_service, mock_flow):
        mock_flow.from_client_config.return_value.fetch_token.side_effect = Exception("invalid_grant")

        with pytest.raises(Exception, match="invalid_grant"):
            calendar_service.get_tokens_from_code("bad-code")

        mock_logger.error.assert_called_once()


class TestCalendarServiceEvents:
    """Tests for the event operations."""

    @patch('brainstormai.services.calendar_service.Credentials')
    def test_credentials_built_from_tokens(self, mock_credentials, calendar_service, tokens, mock_build, mock_events):
        mock_events.insert.return_value.execute.return_value = {"id": "evt-1"}

        calendar_service.create_event(tokens, {"summary": "Lunch"})

        kwargs = mock_credentials.call_args.kwargs
        assert kwargs["token"] == "access-123"
        assert kwargs["refresh_token"] == "refresh-456"
        assert kwargs["client_id"] == "client-id"
        assert kwargs["expiry"] == datetime(2025, 1, 1)
        mock_build.assert_called_once_with(
            "calendar", "v3", credentials=mock_credentials.return_value, cache_discovery=False
        )

    def test_create_event(self, calendar_service, tokens, mock_events):
        created = {"id": "evt-1", "summary": "Lunch with Sam", "htmlLink": "https://calendar.google.com/evt-1"}
        mock_events.insert.return_value.execute.return_value = created
        body = {"summary": "Lunch with Sam", "start": {"dateTime": "2025-08-10T12:00:00-07:00"}}

        result = calendar_service.create_event(tokens, body)

        assert result == created
        mock_events.insert.assert_called_once_with(calendarId="primary", body=body, sendUpdates="all")

    @patch('brainstormai.services.calendar_service.logger')
    def test_create_event_error(self, mock_logger, calendar_service, tokens, mock_events):
        mock_events.insert.return_value.execute.side_effect = Exception("Invalid Credentials")

        with pytest.raises(Exception, match="Invalid Credentials"):
            calendar_service.create_event(tokens, {"summary": "Lunch"})

        mock_logger.error.assert_called_once()

    def test_list_events(self, calendar_service, tokens, mock_events):
        mock_events.list.return_value.execute.return_value = {"items": [{"id": "evt-1"}]}

        events = calendar_service.list_events(tokens, time_min="2025-08-01T00:00:00Z", max_results=5)

        assert events == [{"id": "evt-1"}]
        mock_events.list.assert_called_once_with(
            calendarId="primary",
            timeMin="2025-08-01T00:00:00Z",
            maxResults=5,
            singleEvents=True,
            orderBy="startTime",
        )

    def test_list_events_drops_start_time_order_for_recurring(self, calendar_service, tokens, mock_events):
        mock_events.list.return_value.execute.return_value = {}

        events = calendar_service.list_events(tokens, calendar_id="team", single_events=False)

        assert events == []
        kwargs = mock_events.list.call_args.kwargs
        assert kwargs["calendarId"] == "team"
        assert "orderBy" not in kwargs

    def test_update_event(self, calendar_service, tokens, mock_events):
        mock_events.patch.return_value.execute.return_value = {"id": "evt-1", "summary": "Dinner"}

        result = calendar_service.update_event(tokens, "evt-1", {"summary": "Dinner"})

        assert result["summary"] == "Dinner"
        mock_events.patch.assert_called_once_with(
            calendarId="primary", eventId="evt-1", body={"summary": "Dinner"}, sendUpdates="all"
        )

    def test_delete_event(self, calendar_service, tokens, mock_events):
        calendar_service.delete_event(tokens, "evt-1", "team")

        mock_events.delete.assert_called_once_with(calendarId="team", eventId="evt-1", sendUpdates="all")
        mock_events.delete.return_value.execute.assert_called_once()


if __name__ == "__main__":
    import sys
    sys.exit(pytest.main(["-v", __file__]))
