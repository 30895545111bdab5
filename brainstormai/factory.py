"""
Factory for creating service instances and the chat orchestrator.
"""

from brainstormai.agent import PersonaAgent
from brainstormai.orchestrator import ChatOrchestrator
from brainstormai.services.calendar_service import CalendarService
from brainstormai.services.gemini_service import GeminiService
from brainstormai.services.token_store import InMemoryTokenStore, MongoTokenStore, TokenStore
from brainstormai.utils.config import config
from brainstormai.utils.constants import DEFAULT_PERSONAS

def create_token_store(store_type=None) -> TokenStore:
    """
    Factory to create the token store named in the configuration.

    Args:
        store_type: Type of store to use ("memory" or "mongodb")

    Returns:
        TokenStore instance
    """
    store_type = store_type or config.token_store
    if store_type == "memory":
        return InMemoryTokenStore()
    elif store_type == "mongodb":
        return MongoTokenStore(config.mongo_uri, config.mongo_db_name)
    else:
        raise ValueError(f"Unsupported token store: {store_type}")

def create_calendar_service() -> CalendarService:
    return CalendarService(
        client_id=config.google_client_id,
        client_secret=config.google_client_secret,
        redirect_uri=config.google_redirect_uri,
    )

def create_orchestrator(token_store: TokenStore, calendar_service: CalendarService = None) -> ChatOrchestrator:
    """
    Wire the Gemini service, calendar service and agent into an orchestrator.

    Args:
        token_store: Store used to look up each user's OAuth tokens
        calendar_service: Calendar collaborator, created from config when omitted

    Returns:
        ChatOrchestrator instance
    """
    ai_service = GeminiService(config.google_ai_api_key, config.google_ai_model)
    agent = PersonaAgent(
        ai_service=ai_service,
        calendar_service=calendar_service or create_calendar_service(),
        personas=config.personas or DEFAULT_PERSONAS,
        fallback_time_zone=config.default_timezone,
    )
    return ChatOrchestrator(
        agent=agent,
        token_store=token_store,
        max_retries=config.max_retries,
        retry_delay_seconds=config.retry_delay_seconds,
    )
