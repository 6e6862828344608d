"""
Google Gemini Feedback Model

Requests a structured interview assessment from Gemini, constrained to the
FeedbackAssessment schema.
"""

import logging
from typing import Optional

from google import genai
from google.genai import types
from pydantic import ValidationError

from interview_feedback.models import FeedbackAssessment
from interview_feedback.config import GEMINI_CONFIG
from interview_feedback.errors import FeedbackGenerationError
from interview_feedback.prompts import FEEDBACK_SYSTEM_INSTRUCTION, build_feedback_prompt

logger = logging.getLogger(__name__)


class GeminiFeedbackModel:
    """
    Wrapper around the google-genai client for feedback generation.

    Uses gemini-2.0-flash-001 unless configured otherwise.
    """

    def __init__(
        self,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        api_key: Optional[str] = None,
        client: Optional[genai.Client] = None,
    ):
        """
        Initialize the feedback model.

        Args:
            model: Gemini model name (default: from GEMINI_CONFIG)
            temperature: Sampling temperature (default: from GEMINI_CONFIG)
            api_key: Google API key (optional, falls back to GEMINI_CONFIG
                     and then to the library's environment lookup)
            client: Pre-built client, mainly for tests
        """
        self.model = model or GEMINI_CONFIG["model"]
        self.temperature = GEMINI_CONFIG["temperature"] if temperature is None else temperature
        self._api_key = api_key or GEMINI_CONFIG["api_key"]
        self._client = client

        self.config = types.GenerateContentConfig(
            system_instruction=FEEDBACK_SYSTEM_INSTRUCTION,
            temperature=self.temperature,
            response_mime_type="application/json",
            response_schema=FeedbackAssessment,
        )

    @property
    def client(self) -> genai.Client:
        """The google-genai client, created on first use."""
        if self._client is None:
            if self._api_key:
                self._client = genai.Client(api_key=self._api_key)
            else:
                self._client = genai.Client()
        return self._client

    async def generate(self, formatted_transcript: str) -> FeedbackAssessment:
        """
        Evaluate a formatted transcript.

        Args:
            formatted_transcript: Output of prompts.format_transcript

        Returns:
            The parsed assessment

        Raises:
            FeedbackGenerationError: If the call fails or the output does not
                match the schema
        """
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=build_feedback_prompt(formatted_transcript),
                config=self.config,
            )
        except Exception as e:
            raise FeedbackGenerationError(f"Gemini request failed: {e}") from e

        parsed = getattr(response, "parsed", None)
        if isinstance(parsed, FeedbackAssessment):
            return parsed

        # The SDK leaves `parsed` empty when its own validation fails
        text = getattr(response, "text", None)
        if not text:
            raise FeedbackGenerationError("Gemini returned an empty response")

        try:
            return FeedbackAssessment.model_validate_json(text)
        except ValidationError as e:
            logger.warning(f"⚠️ Gemini output did not match the feedback schema: {text[:400]}")
            raise FeedbackGenerationError(f"Gemini output did not match the feedback schema: {e}") from e
