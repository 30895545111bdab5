"""
Persona agent: one round trip of prompt, model call, classification and action.
"""

import asyncio
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional

from brainstormai.classifier import classify
from brainstormai.formatter import format_ideas
from brainstormai.models.chat import ChatReply, ReplyKind
from brainstormai.models.event import AuthTokens, CalendarEventIntent
from brainstormai.normalizer import normalize
from brainstormai.services.ai_service import AIService
from brainstormai.services.calendar_service import CalendarService
from brainstormai.utils.constants import (
    AUTHORIZATION_REQUIRED_MESSAGE,
    EVENT_CREATED_MESSAGE,
    PROMPT_FILE,
)
from brainstormai.utils.logger import logger

PROMPT_PATH = Path(__file__).parent / PROMPT_FILE


class PersonaAgent:
    """Answers a user message in the voice of a persona."""

    def __init__(
        self,
        ai_service: AIService,
        calendar_service: CalendarService,
        personas: Dict[str, str],
        fallback_time_zone: str,
    ):
        """
        Initialize the agent.

        Args:
            ai_service: Model used to generate responses
            calendar_service: Calendar collaborator used for event intents
            personas: Mapping of persona name to description
            fallback_time_zone: Time zone for events that do not name one
        """
        self.ai_service = ai_service
        self.calendar_service = calendar_service
        self.personas = personas
        self.fallback_time_zone = fallback_time_zone
        with open(PROMPT_PATH, 'r') as prompt_file:
            self.prompt_template = prompt_file.read()

    def describe_persona(self, persona_name: str) -> str:
        if persona_name not in self.personas:
            raise ValueError(f"Unknown persona: {persona_name}")
        return self.personas[persona_name]

    def build_prompt(self, persona_name: str, message: str, now: Optional[datetime] = None) -> str:
        current = now or datetime.now(timezone.utc)
        return self.prompt_template.format(
            persona_name=persona_name,
            persona_description=self.describe_persona(persona_name),
            message=message,
            current_datetime=current.isoformat(),
            current_timezone=self.fallback_time_zone,
        )

    async def talk_as(self, persona_name: str, message: str, tokens: Optional[AuthTokens]) -> ChatReply:
        """
        Run one attempt: ask the model, then create an event or format ideas.

        Model and calendar errors propagate to the caller.

        Args:
            persona_name: Persona to answer as
            message: The user's message
            tokens: The user's OAuth tokens, if they connected a calendar

        Returns:
            ChatReply describing what happened
        """
        prompt = self.build_prompt(persona_name, message)
        raw_response = await self.ai_service.generate_content(prompt)

        intent = classify(raw_response)
        if isinstance(intent, CalendarEventIntent):
            return await self._create_event(intent, tokens)

        ideas = format_ideas(intent.text)
        logger.info(f"Formatted {len(ideas.records)} idea(s) with status {ideas.status.value}")
        return ChatReply(kind=ReplyKind.IDEAS, text=ideas.text, ideas=ideas)

    async def _create_event(self, intent: CalendarEventIntent, tokens: Optional[AuthTokens]) -> ChatReply:
        if tokens is None or not tokens.is_authorized:
            logger.info("Calendar event requested without calendar authorization")
            return ChatReply(kind=ReplyKind.AUTHORIZATION_REQUIRED, text=AUTHORIZATION_REQUIRED_MESSAGE)

        event_details = normalize(intent.eventDetails, self.fallback_time_zone)
        event = await asyncio.to_thread(
            self.calendar_service.create_event, tokens, event_details.to_event_body()
        )
        text = EVENT_CREATED_MESSAGE.format(summary=event.get("summary"), link=event.get("htmlLink"))
        return ChatReply(kind=ReplyKind.EVENT_CREATED, text=text)
