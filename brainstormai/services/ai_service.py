"""
Abstract base class for AI services used in BrainstormAI.
This provides a common interface for different AI models.
"""

from abc import ABC, abstractmethod

class AIService(ABC):
    """Abstract base class for AI services."""

    @abstractmethod
    async def generate_content(self, prompt: str) -> str:
        """
        Send a prompt to the model and return its text response.

        Args:
            prompt: The full prompt to send

        Returns:
            Text returned by the model
        """
        pass
