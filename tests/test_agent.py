"""
Tests for the PersonaAgent.
"""

import pytest
from datetime import datetime, timezone

from brainstormai.models.chat import ReplyKind
from brainstormai.models.event import AuthTokens
from brainstormai.models.idea import FormatStatus
from brainstormai.utils.constants import AUTHORIZATION_REQUIRED_MESSAGE


class TestBuildPrompt:
    """Tests for prompt construction."""

    def test_prompt_contains_persona_and_message(self, agent):
        now = datetime(2025, 8, 9, 15, 30, tzinfo=timezone.utc)
        prompt = agent.build_prompt("Ada", "Ideas for urban gardening", now=now)

        assert 'You are "Ada", an expert business consultant and a creative innovator.' in prompt
        assert 'User Input: "Ideas for urban gardening"' in prompt
        assert "2025-08-09T15:30:00+00:00" in prompt
        assert "America/Los_Angeles" in prompt
        assert '"type": "calendar_event"' in prompt

    def test_unknown_persona(self, agent):
        with pytest.raises(ValueError, match="Unknown persona"):
            agent.build_prompt("Nobody", "hello")


class TestTalkAs:
    """Tests for one agent attempt."""

    @pytest.mark.asyncio
    async def test_ideas_reply(self, agent, mock_ai_service, mock_calendar_service):
        reply = await agent.talk_as("Ada", "Ideas for eco furniture", None)

        assert reply.kind == ReplyKind.IDEAS
        assert reply.ideas.status == FormatStatus.FULL
        assert reply.text.startswith("**1. Idea Name:** EcoNest")
        assert reply.is_complete
        mock_ai_service.generate_content.assert_awaited_once()
        mock_calendar_service.create_event.assert_not_called()

    @pytest.mark.asyncio
    async def test_event_created(self, agent, mock_ai_service, mock_calendar_service, lunch_event_response, auth_tokens):
        mock_ai_service.generate_content.return_value = lunch_event_response

        reply = await agent.talk_as("Ada", "Schedule lunch with Sam tomorrow at noon", auth_tokens)

        assert reply.kind == ReplyKind.EVENT_CREATED
        assert '"Lunch with Sam"' in reply.text
        assert "https://www.google.com/calendar/event?eid=evt-1" in reply.text

        tokens, body = mock_calendar_service.create_event.call_args[0]
        assert tokens == auth_tokens
        assert body["summary"] == "Lunch with Sam"
        assert body["start"]["dateTime"] == "2025-08-10T12:00:00-0700"
        assert body["end"]["dateTime"] == "2025-08-10T13:00:00-0700"

    @pytest.mark.asyncio
    async def test_event_without_tokens(self, agent, mock_ai_service, mock_calendar_service, lunch_event_response):
        mock_ai_service.generate_content.return_value = lunch_event_response

        reply = await agent.talk_as("Ada", "Schedule lunch with Sam tomorrow at noon", None)

        assert reply.kind == ReplyKind.AUTHORIZATION_REQUIRED
        assert reply.text == AUTHORIZATION_REQUIRED_MESSAGE
        assert reply.is_complete
        mock_calendar_service.create_event.assert_not_called()

    @pytest.mark.asyncio
    async def test_event_with_empty_access_token(self, agent, mock_ai_service, mock_calendar_service, lunch_event_response):
        mock_ai_service.generate_content.return_value = lunch_event_response

        reply = await agent.talk_as("Ada", "Schedule lunch", AuthTokens(refresh_token="refresh-only"))

        assert reply.kind == ReplyKind.AUTHORIZATION_REQUIRED
        mock_calendar_service.create_event.assert_not_called()

    @pytest.mark.asyncio
    async def test_calendar_error_propagates(self, agent, mock_ai_service, mock_calendar_service, lunch_event_response, auth_tokens):
        mock_ai_service.generate_content.return_value = lunch_event_response
        mock_calendar_service.create_event.side_effect = Exception("Invalid Credentials")

        with pytest.raises(Exception, match="Invalid Credentials"):
            await agent.talk_as("Ada", "Schedule lunch", auth_tokens)

    @pytest.mark.asyncio
    async def test_unlabelled_text_is_incomplete(self, agent, mock_ai_service):
        mock_ai_service.generate_content.return_value = "I am not sure what you mean."

        reply = await agent.talk_as("Ada", "hmm", None)

        assert reply.kind == ReplyKind.IDEAS
        assert reply.ideas.status == FormatStatus.EMPTY
        assert reply.text == ""
        assert not reply.is_complete


if __name__ == "__main__":
    import sys
    sys.exit(pytest.main(["-v", __file__]))
