"""Constants used throughout the application."""

# Chat orchestration
MAX_RETRIES = 3
RETRY_DELAY_SECONDS = 1.0

# Model output conventions
CALENDAR_EVENT_TYPE = "calendar_event"
NOT_AVAILABLE = "N/A"

# Calendar defaults
DEFAULT_EVENT_HOUR = 9
DEFAULT_EVENT_DURATION_HOURS = 1
PRIMARY_CALENDAR_ID = "primary"

# Google OAuth
CALENDAR_SCOPES = ["https://www.googleapis.com/auth/calendar"]
GOOGLE_AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"
CALENDAR_AUTH_ROUTE = "/auth/google/calendar"

# User-facing messages
AUTHORIZATION_REQUIRED_MESSAGE = (
    "I can help schedule that, but I need access to your Google Calendar. "
    f"Please connect your Google account first by visiting {CALENDAR_AUTH_ROUTE}."
)
EVENT_CREATED_MESSAGE = (
    'I\'ve successfully added "{summary}" to your Google Calendar! '
    "You can view it here: {link}"
)
ERROR_SENDER = "⚠️ Error"

# Used when no personas file is available
DEFAULT_PERSONAS = {
    "Ada": "an expert business consultant and a creative innovator",
}

# File paths
PROMPT_FILE = "prompts/talk_as.txt"
