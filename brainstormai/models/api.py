"""
Request and response models for the HTTP API.
"""

from pydantic import BaseModel
from typing import Any, Dict, List, Optional

class ChatRequest(BaseModel):
    input: Optional[str] = None
    persona: Optional[str] = None

class ConversationMessage(BaseModel):
    sender: str
    text: str

class ChatResponse(BaseModel):
    conversation: List[ConversationMessage]

class CreateEventRequest(BaseModel):
    eventDetails: Optional[Dict[str, Any]] = None
    calendarId: Optional[str] = None

class UpdateEventRequest(BaseModel):
    updatedEventDetails: Optional[Dict[str, Any]] = None
    calendarId: Optional[str] = None

class DeleteEventRequest(BaseModel):
    calendarId: Optional[str] = None

class EventResponse(BaseModel):
    message: str
    eventId: Optional[str] = None
    htmlLink: Optional[str] = None
    event: Dict[str, Any]
