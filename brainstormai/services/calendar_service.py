"""
Calendar Service for Google OAuth and Google Calendar event operations.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow
from googleapiclient.discovery import build

from brainstormai.models.event import AuthTokens
from brainstormai.utils.constants import (
    CALENDAR_SCOPES,
    GOOGLE_AUTH_URI,
    GOOGLE_TOKEN_URI,
    PRIMARY_CALENDAR_ID,
)
from brainstormai.utils.logger import logger

class CalendarService:
    """Service for Google Calendar operations on behalf of a user."""

    def __init__(self, client_id: str, client_secret: str, redirect_uri: str):
        """
        Initialize the calendar service.

        Args:
            client_id: OAuth 2.0 client ID
            client_secret: OAuth 2.0 client secret
            redirect_uri: Where Google sends the user after consent
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri

    def _create_flow(self) -> Flow:
        client_config = {
            "web": {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "auth_uri": GOOGLE_AUTH_URI,
                "token_uri": GOOGLE_TOKEN_URI,
                "redirect_uris": [self.redirect_uri],
            }
        }
        return Flow.from_client_config(
            client_config,
            scopes=CALENDAR_SCOPES,
            redirect_uri=self.redirect_uri,
            autogenerate_code_verifier=False,
        )

    def generate_auth_url(self, state: Optional[str] = None) -> str:
        """
        Build the Google consent URL for calendar access.

        Args:
            state: Opaque value echoed back to the callback, used to carry the user id

        Returns:
            Authorization URL
        """
        flow = self._create_flow()
        auth_url, _ = flow.authorization_url(
            access_type="offline",
            prompt="consent",
            state=state,
        )
        return auth_url

    def get_tokens_from_code(self, code: str) -> AuthTokens:
        """
        Exchange the authorization code from the OAuth callback for tokens.

        Args:
            code: Authorization code from Google's redirect

        Returns:
            AuthTokens for the user
        """
        flow = self._create_flow()
        try:
            flow.fetch_token(code=code)
        except Exception as e:
            logger.error(f"Error exchanging authorization code for tokens: {e}")
            raise

        credentials = flow.credentials
        expiry_date = None
        if credentials.expiry:
            expiry_date = int(credentials.expiry.replace(tzinfo=timezone.utc).timestamp() * 1000)
        return AuthTokens(
            access_token=credentials.token,
            refresh_token=credentials.refresh_token,
            expiry_date=expiry_date,
        )

    def _build_service(self, tokens: AuthTokens):
        expiry = None
        if tokens.expiry_date:
            # google-auth compares expiry against a naive UTC datetime
            expiry = datetime.fromtimestamp(tokens.expiry_date / 1000, tz=timezone.utc).replace(tzinfo=None)
        credentials = Credentials(
            token=tokens.access_token,
            refresh_token=tokens.refresh_token,
            token_uri=GOOGLE_TOKEN_URI,
            client_id=self.client_id,
            client_secret=self.client_secret,
            scopes=CALENDAR_SCOPES,
            expiry=expiry,
        )
        return build("calendar", "v3", credentials=credentials, cache_discovery=False)

    def create_event(
        self,
        tokens: AuthTokens,
        event_details: Dict[str, Any],
        calendar_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create a new event in the user's calendar.

        Args:
            tokens: The user's OAuth tokens
            event_details: Google Calendar event resource
            calendar_id: Calendar to insert into, the primary calendar by default

        Returns:
            The created event resource
        """
        service = self._build_service(tokens)
        try:
            event = service.events().insert(
                calendarId=calendar_id or PRIMARY_CALENDAR_ID,
                body=event_details,
                sendUpdates="all",
            ).execute()
        except Exception as e:
            logger.error(f"Error creating calendar event: {e}")
            raise
        logger.info(f"Created calendar event {event.get('id')}: {event.get('summary')}")
        return event

    def list_events(
        self,
        tokens: AuthTokens,
        calendar_id: Optional[str] = None,
        time_min: Optional[str] = None,
        max_results: int = 10,
        single_events: bool = True,
        order_by: Optional[str] = "startTime",
    ) -> List[Dict[str, Any]]:
        """
        List upcoming events from the user's calendar.

        Ordering by start time is only honoured by the API for single events,
        so it is dropped when recurring events are requested unexpanded.
        """
        service = self._build_service(tokens)
        params = {
            "calendarId": calendar_id or PRIMARY_CALENDAR_ID,
            "timeMin": time_min or datetime.now(timezone.utc).isoformat(),
            "maxResults": max_results,
            "singleEvents": single_events,
        }
        if order_by and (single_events or order_by != "startTime"):
            params["orderBy"] = order_by
        try:
            events_result = service.events().list(**params).execute()
        except Exception as e:
            logger.error(f"Error listing calendar events: {e}")
            raise
        return events_result.get("items", [])

    def update_event(
        self,
        tokens: AuthTokens,
        event_id: str,
        updated_event_details: Dict[str, Any],
        calendar_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Apply a partial update to an existing event."""
        service = self._build_service(tokens)
        try:
            event = service.events().patch(
                calendarId=calendar_id or PRIMARY_CALENDAR_ID,
                eventId=event_id,
                body=updated_event_details,
                sendUpdates="all",
            ).execute()
        except Exception as e:
            logger.error(f"Error updating calendar event {event_id}: {e}")
            raise
        logger.info(f"Updated calendar event {event_id}")
        return event

    def delete_event(self, tokens: AuthTokens, event_id: str, calendar_id: Optional[str] = None) -> None:
        """Delete an event from the user's calendar."""
        service = self._build_service(tokens)
        try:
            service.events().delete(
                calendarId=calendar_id or PRIMARY_CALENDAR_ID,
                eventId=event_id,
                sendUpdates="all",
            ).execute()
        except Exception as e:
            logger.error(f"Error deleting calendar event {event_id}: {e}")
            raise
        logger.info(f"Deleted calendar event {event_id}")
