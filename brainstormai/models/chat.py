"""
Data models describing chat replies and orchestration results.
"""

from enum import Enum
from pydantic import BaseModel
from typing import Optional

from brainstormai.models.idea import FormatStatus, FormattedIdeas

class ReplyKind(str, Enum):
    EVENT_CREATED = "event_created"
    AUTHORIZATION_REQUIRED = "authorization_required"
    IDEAS = "ideas"

class ChatReply(BaseModel):
    """Outcome of a single agent attempt."""

    kind: ReplyKind
    text: str
    ideas: Optional[FormattedIdeas] = None

    @property
    def is_complete(self) -> bool:
        """Whether the reply can be returned to the user without retrying."""
        if self.kind != ReplyKind.IDEAS:
            return True
        return self.ideas is not None and self.ideas.status != FormatStatus.EMPTY

class ChatResult(BaseModel):
    """Final outcome of the retry loop for one chat request."""

    text: str
    succeeded: bool
    attempts: int
    last_error: Optional[str] = None
    reply: Optional[ChatReply] = None
