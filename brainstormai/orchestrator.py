"""
Chat orchestration: bounded retries around the persona agent.
"""

import asyncio
from typing import Awaitable, Callable

from brainstormai.agent import PersonaAgent
from brainstormai.models.chat import ChatResult
from brainstormai.services.token_store import TokenStore
from brainstormai.utils.constants import MAX_RETRIES, RETRY_DELAY_SECONDS
from brainstormai.utils.logger import logger

INCOMPLETE_IDEAS_ERROR = "no business ideas could be extracted from the model response"


class ChatOrchestrator:
    """Drives up to max_retries agent attempts for one chat request."""

    def __init__(
        self,
        agent: PersonaAgent,
        token_store: TokenStore,
        max_retries: int = MAX_RETRIES,
        retry_delay_seconds: float = RETRY_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize the orchestrator.

        Args:
            agent: Agent that performs a single attempt
            token_store: Where OAuth tokens are looked up by user id
            max_retries: Maximum number of attempts per request
            retry_delay_seconds: Base delay, multiplied by the attempt count between attempts
            sleep: Coroutine used to wait between attempts
        """
        self.agent = agent
        self.token_store = token_store
        self.max_retries = max_retries
        self.retry_delay_seconds = retry_delay_seconds
        self.sleep = sleep

    async def respond(self, persona_name: str, message: str, user_id: str) -> ChatResult:
        """
        Answer a user message, retrying failed or incomplete attempts.

        An attempt succeeds when it creates an event, asks the user to connect
        their calendar, or yields at least one usable idea. Raised errors and
        empty idea listings are retried with a linearly growing delay.

        Args:
            persona_name: Persona to answer as
            message: The user's message
            user_id: Identity whose OAuth tokens are used for calendar actions

        Returns:
            ChatResult with the final text; succeeded is False once retries are exhausted
        """
        self.agent.describe_persona(persona_name)
        tokens = await asyncio.to_thread(self.token_store.get_tokens, user_id)

        attempt = 0
        last_error = None
        api_error = False
        while attempt < self.max_retries:
            try:
                reply = await self.agent.talk_as(persona_name, message, tokens)
                if reply.is_complete:
                    logger.info(f"Chat reply ({reply.kind.value}) ready after {attempt + 1} attempt(s)")
                    return ChatResult(text=reply.text, succeeded=True, attempts=attempt + 1, reply=reply)
                last_error = INCOMPLETE_IDEAS_ERROR
                api_error = False
                logger.warning(f"Retry {attempt + 1}: AI response was incomplete for ideas. Retrying...")
            except Exception as e:
                last_error = str(e)
                api_error = True
                logger.error(f"Attempt {attempt + 1} failed during AI response generation: {e}")

            attempt += 1
            if attempt < self.max_retries:
                await self.sleep(self.retry_delay_seconds * attempt)

        logger.error(f"Giving up after {attempt} attempts: {last_error}")
        if api_error:
            text = (
                f"Failed to get a complete AI response after {self.max_retries} attempts "
                f"due to an API error: {last_error}"
            )
        else:
            text = (
                f"Failed to get a complete AI response after {self.max_retries} attempts "
                f"({last_error}). Please try again or refine your request."
            )
        return ChatResult(text=text, succeeded=False, attempts=attempt, last_error=last_error)
