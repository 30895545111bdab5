"""
Gemini service implementation for BrainstormAI.
Handles text generation using Google's Gemini models.
"""

from google import genai

from brainstormai.services.ai_service import AIService
from brainstormai.utils.logger import logger

class GeminiService(AIService):
    """Gemini service implementation."""

    def __init__(self, google_api_key: str, model: str, temperature: float = 0.7):
        """
        Initialize the Gemini service.

        Args:
            google_api_key: Google AI API key
            model: Gemini model to use
            temperature: Sampling temperature for generation
        """
        self.google_api_key = google_api_key
        self.model = model
        self.temperature = temperature
        self.gemini_client = genai.Client(api_key=google_api_key)

    async def generate_content(self, prompt: str) -> str:
        """
        Generate a response for the prompt with the configured Gemini model.

        Errors from the API are logged and re-raised so callers can retry.

        Args:
            prompt: The full prompt to send

        Returns:
            Text content of the response, empty if the model returned none
        """
        logger.debug(f"Sending prompt to Gemini model {self.model}")
        try:
            response = await self.gemini_client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config={"temperature": self.temperature},
            )
        except Exception as e:
            logger.error(f"Error generating content with Gemini: {e}")
            raise

        text_content = response.text or ""
        logger.debug(f"Received {len(text_content)} characters from Gemini")
        return text_content
