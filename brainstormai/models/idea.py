"""
Shared data models for business ideas and formatter results.
"""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import List

from brainstormai.utils.constants import NOT_AVAILABLE

class IdeaRecord(BaseModel):
    """Model representing one business idea extracted from a model response."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Title of the idea")
    concept: str = Field(NOT_AVAILABLE, description="Core idea and the problem it addresses")
    keyFeatures: str = Field(NOT_AVAILABLE, description="Main functionalities or offerings")
    targetMarket: str = Field(NOT_AVAILABLE, description="Who the idea is for")
    uniqueValueProposition: str = Field(NOT_AVAILABLE, description="What differentiates the idea")
    monetization: str = Field(NOT_AVAILABLE, description="Revenue streams")
    challenges: str = Field(NOT_AVAILABLE, description="Potential challenges or considerations")
    summary: str = Field(NOT_AVAILABLE, description="Short overview of the idea")

    def missing_fields(self) -> List[str]:
        """Names of the fields that could not be extracted."""
        return [
            field_name for field_name, value in self.model_dump().items()
            if value == NOT_AVAILABLE
        ]

class FormatStatus(str, Enum):
    EMPTY = "empty"
    PARTIAL = "partial"
    FULL = "full"

class FormattedIdeas(BaseModel):
    """Tagged result of formatting a model response into ideas."""

    model_config = ConfigDict(frozen=True)

    status: FormatStatus
    records: List[IdeaRecord] = Field(default_factory=list)
    text: str = ""
