"""
FastAPI server for BrainstormAI.
Provides the chat endpoint, Google OAuth routes and calendar event endpoints.
"""

from typing import Optional
from urllib.parse import quote

from fastapi import Depends, FastAPI, Header, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse, Response

from brainstormai.factory import create_calendar_service, create_orchestrator, create_token_store
from brainstormai.models.api import (
    ChatRequest,
    ChatResponse,
    ConversationMessage,
    CreateEventRequest,
    DeleteEventRequest,
    EventResponse,
    UpdateEventRequest,
)
from brainstormai.models.event import AuthTokens
from brainstormai.orchestrator import ChatOrchestrator
from brainstormai.services.calendar_service import CalendarService
from brainstormai.services.token_store import TokenStore
from brainstormai.utils.config import config
from brainstormai.utils.constants import ERROR_SENDER
from brainstormai.utils.logger import logger


def get_user_id(x_user_id: Optional[str] = Header(None)) -> str:
    """Caller identity; falls back to the configured default user."""
    return x_user_id or config.default_user_id


def require_tokens(request: Request, user_id: str = Depends(get_user_id)) -> AuthTokens:
    tokens = request.app.state.token_store.get_tokens(user_id)
    if tokens is None or not tokens.is_authorized:
        raise HTTPException(
            status_code=401,
            detail="User not authenticated with Google Calendar. Please connect your account first.",
        )
    return tokens


def create_app(
    orchestrator: Optional[ChatOrchestrator] = None,
    calendar_service: Optional[CalendarService] = None,
    token_store: Optional[TokenStore] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Collaborators that are not passed in are created from configuration.
    """
    token_store = token_store or create_token_store()
    calendar_service = calendar_service or create_calendar_service()
    orchestrator = orchestrator or create_orchestrator(token_store, calendar_service)

    app = FastAPI(
        title="BrainstormAI API",
        description="Business idea brainstorming with Google Calendar scheduling",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.orchestrator = orchestrator
    app.state.calendar_service = calendar_service
    app.state.token_store = token_store

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {
            "message": "BrainstormAI API is running",
            "status": "healthy",
            "version": "1.0.0",
        }

    @app.post("/chat", response_model=ChatResponse)
    async def chat(chat_request: ChatRequest, user_id: str = Depends(get_user_id)):
        if not chat_request.input or not chat_request.input.strip():
            raise HTTPException(status_code=400, detail="Invalid input provided.")

        persona = chat_request.persona or config.default_persona
        try:
            result = await app.state.orchestrator.respond(persona, chat_request.input, user_id)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        if not result.succeeded:
            body = ChatResponse(conversation=[ConversationMessage(sender=ERROR_SENDER, text=result.text)])
            return JSONResponse(status_code=500, content=body.model_dump())
        return ChatResponse(conversation=[ConversationMessage(sender=persona, text=result.text)])

    @app.get("/auth/google/calendar")
    def authorize_calendar(user_id: str = Depends(get_user_id)):
        auth_url = app.state.calendar_service.generate_auth_url(state=user_id)
        return RedirectResponse(auth_url)

    @app.get("/oauth2callback")
    def oauth2callback(code: Optional[str] = None, state: Optional[str] = None):
        if not code:
            return RedirectResponse("/?auth_error=true&message=Authorization%20code%20missing.")

        user_id = state or config.default_user_id
        try:
            tokens = app.state.calendar_service.get_tokens_from_code(code)
        except Exception as e:
            logger.error(f"Error exchanging code for tokens: {e}")
            return RedirectResponse(f"/?auth_error=true&message={quote(str(e))}")

        app.state.token_store.save_tokens(user_id, tokens)
        logger.info(f"Successfully obtained Google Calendar tokens for {user_id}")
        return RedirectResponse("/?auth_success=true")

    @app.post("/api/calendar/events", status_code=201, response_model=EventResponse)
    def create_event(event_request: CreateEventRequest, tokens: AuthTokens = Depends(require_tokens)):
        details = event_request.eventDetails
        if not details or not details.get("summary") or not details.get("start") or not details.get("end"):
            raise HTTPException(status_code=400, detail="Missing required event details (summary, start, end).")
        try:
            event = app.state.calendar_service.create_event(tokens, details, event_request.calendarId)
        except Exception as e:
            logger.error(f"Failed to create calendar event: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to create calendar event: {e}")
        return EventResponse(
            message="Event created successfully!",
            eventId=event.get("id"),
            htmlLink=event.get("htmlLink"),
            event=event,
        )

    @app.get("/api/calendar/events")
    def list_events(
        calendarId: Optional[str] = None,
        timeMin: Optional[str] = None,
        maxResults: int = 10,
        singleEvents: bool = True,
        orderBy: Optional[str] = "startTime",
        tokens: AuthTokens = Depends(require_tokens),
    ):
        try:
            events = app.state.calendar_service.list_events(
                tokens,
                calendar_id=calendarId,
                time_min=timeMin,
                max_results=maxResults,
                single_events=singleEvents,
                order_by=orderBy,
            )
        except Exception as e:
            logger.error(f"Failed to list calendar events: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to list calendar events: {e}")
        return {"events": events}

    @app.put("/api/calendar/events/{event_id}", response_model=EventResponse)
    def update_event(
        event_id: str,
        update_request: UpdateEventRequest,
        tokens: AuthTokens = Depends(require_tokens),
    ):
        if not update_request.updatedEventDetails:
            raise HTTPException(status_code=400, detail="Missing updated event details.")
        try:
            event = app.state.calendar_service.update_event(
                tokens, event_id, update_request.updatedEventDetails, update_request.calendarId
            )
        except Exception as e:
            logger.error(f"Failed to update calendar event: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to update calendar event: {e}")
        return EventResponse(
            message="Event updated successfully!",
            eventId=event.get("id"),
            htmlLink=event.get("htmlLink"),
            event=event,
        )

    @app.delete("/api/calendar/events/{event_id}", status_code=204)
    def delete_event(
        event_id: str,
        delete_request: Optional[DeleteEventRequest] = None,
        tokens: AuthTokens = Depends(require_tokens),
    ):
        calendar_id = delete_request.calendarId if delete_request else None
        try:
            app.state.calendar_service.delete_event(tokens, event_id, calendar_id)
        except Exception as e:
            logger.error(f"Failed to delete calendar event: {e}")
            raise HTTPException(status_code=500, detail=f"Failed to delete calendar event: {e}")
        return Response(status_code=204)

    return app
