"""Shared test fixtures for BrainstormAI tests."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from brainstormai.agent import PersonaAgent
from brainstormai.models.event import AuthTokens
from brainstormai.services.token_store import InMemoryTokenStore


IDEAS_RESPONSE = """
**1. Idea Name:** EcoNest
  - **Concept:** Modular furniture kits made from recycled materials.
  - **Key Features:** Foldable desk, solar lamp, storage walls.
  - **Target Market:** Young professionals in city apartments.
  - **Unique Value Proposition:** Low prices with a clean look.
  - **Monetization:** Direct sales and a refurbishment plan.
  - **Potential Challenges/Considerations:** Sourcing recycled wood.
  - **Summary:** Space-saving eco furniture for renters.
"""

LUNCH_EVENT_DETAILS = {
    "summary": "Lunch with Sam",
    "description": "Lunch tomorrow at noon.",
    "start": {"dateTime": "20250810T120000-0700", "timeZone": "America/Los_Angeles"},
    "end": {"dateTime": "20250810T130000-0700", "timeZone": "America/Los_Angeles"},
}

LUNCH_EVENT_RESPONSE = (
    "```json\n"
    + json.dumps({"type": "calendar_event", "eventDetails": LUNCH_EVENT_DETAILS}, indent=2)
    + "\n```"
)


@pytest.fixture
def ideas_response():
    return IDEAS_RESPONSE


@pytest.fixture
def lunch_event_response():
    return LUNCH_EVENT_RESPONSE


@pytest.fixture
def created_event():
    """Fixture providing the event resource returned by the calendar API."""
    return {
        "id": "evt-1",
        "summary": "Lunch with Sam",
        "htmlLink": "https://www.google.com/calendar/event?eid=evt-1",
    }


@pytest.fixture
def auth_tokens():
    return AuthTokens(access_token="access-123", refresh_token="refresh-456")


@pytest.fixture
def mock_ai_service():
    """Fixture providing a mocked AI service."""
    mock_service = MagicMock()
    mock_service.generate_content = AsyncMock(return_value=IDEAS_RESPONSE)
    return mock_service


@pytest.fixture
def mock_calendar_service(created_event):
    """Fixture providing a mocked calendar service."""
    mock_service = MagicMock()
    mock_service.create_event.return_value = created_event
    return mock_service


@pytest.fixture
def token_store():
    return InMemoryTokenStore()


@pytest.fixture
def agent(mock_ai_service, mock_calendar_service):
    """Fixture providing a PersonaAgent with mocked collaborators."""
    return PersonaAgent(
        ai_service=mock_ai_service,
        calendar_service=mock_calendar_service,
        personas={"Ada": "an expert business consultant and a creative innovator"},
        fallback_time_zone="America/Los_Angeles",
    )
