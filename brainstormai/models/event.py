"""
Data models for calendar intents and events.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Literal, Optional

from brainstormai.utils.constants import CALENDAR_EVENT_TYPE

class EventDateTime(BaseModel):
    """A start or end point of an event, as the calendar API expects it."""

    model_config = ConfigDict(extra="allow")

    dateTime: str
    timeZone: Optional[str] = None

class NormalizedEventDetails(BaseModel):
    """Event details with start and end guaranteed to be present."""

    model_config = ConfigDict(extra="allow")

    summary: Optional[str] = None
    description: Optional[str] = None
    start: EventDateTime
    end: EventDateTime
    timeZone: Optional[str] = None

    def to_event_body(self) -> Dict[str, Any]:
        """Convert to a Google Calendar event resource."""
        return self.model_dump(exclude_none=True, exclude={"timeZone"})

class CalendarEventIntent(BaseModel):
    """A model response asking for a calendar event to be created."""

    type: Literal["calendar_event"] = CALENDAR_EVENT_TYPE
    eventDetails: Dict[str, Any] = Field(..., description="Event details exactly as the model produced them")

class IdeaText(BaseModel):
    """A model response to be treated as free-form idea text."""

    text: str

class AuthTokens(BaseModel):
    """OAuth tokens held for one user."""

    model_config = ConfigDict(extra="allow")

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expiry_date: Optional[int] = Field(None, description="Expiry in milliseconds since the epoch")

    @property
    def is_authorized(self) -> bool:
        return bool(self.access_token)
