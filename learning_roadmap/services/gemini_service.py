"""
Google Gemini Service for roadmap generation.
Calls the Generative Language REST API (generateContent) with an API key.

One request per call: failures are reported, never retried.
"""

import logging
import time
from typing import Any

import httpx

from learning_roadmap.config import settings
from learning_roadmap.exceptions import ConfigurationError, GenerationError

logger = logging.getLogger(__name__)

# Lazy singleton instance
_gemini_service_instance = None


def get_gemini_service() -> "GeminiService":
    """
    Get or create singleton GeminiService instance (lazy initialization).

    Returns:
        GeminiService: Singleton instance

    Raises:
        ConfigurationError: If no API key is configured
    """
    global _gemini_service_instance

    if _gemini_service_instance is None:
        logger.info("🤖 Initializing GeminiService (first use)...")
        _gemini_service_instance = GeminiService()
        logger.info("✅ GeminiService ready (will reuse for future requests)")

    return _gemini_service_instance


class GeminiService:
    """Google Gemini service for Markdown roadmap generation."""

    def __init__(self):
        """
        Initialize GeminiService from settings.
        Fails before any network call if the API key is missing.
        """
        if not settings.gemini_api_key:
            logger.error("❌ GEMINI_API_KEY (or API_KEY) is not configured")
            raise ConfigurationError()

        self.api_key = settings.gemini_api_key
        self.model = settings.gemini_model
        self.api_base = settings.gemini_api_base.rstrip("/")
        self.timeout = settings.gemini_timeout
        self.temperature = settings.gemini_temperature

        logger.info("✅ GeminiService initialized")
        logger.info(f"   🤖 Model: {self.model}")
        logger.debug(f"   ⏱️  Timeout: {self.timeout}s")

    @property
    def api_url(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    def build_payload(
        self,
        user_prompt: str,
        system_instruction: str = "",
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> dict[str, Any]:
        """
        Build the generateContent request body.

        Args:
            user_prompt: Per-request prompt
            system_instruction: Fixed persona/format instructions
            temperature: Sampling temperature (None for model default)
            max_tokens: Maximum tokens to generate (None for model default)

        Returns:
            JSON-serializable request payload
        """
        payload: dict[str, Any] = {
            "contents": [
                {
                    "role": "user",
                    "parts": [{"text": user_prompt}],
                }
            ],
        }

        if system_instruction:
            payload["systemInstruction"] = {"parts": [{"text": system_instruction}]}

        if temperature is None:
            temperature = self.temperature

        generation_config = {}
        if temperature is not None:
            generation_config["temperature"] = temperature
        if max_tokens:
            generation_config["maxOutputTokens"] = max_tokens
        if generation_config:
            payload["generationConfig"] = generation_config

        return payload

    @staticmethod
    def extract_text(result: dict[str, Any]) -> str:
        """
        Pull the generated text out of a generateContent response.

        Raises:
            GenerationError: If the response has no usable text
        """
        try:
            parts = result["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError) as e:
            feedback = result.get("promptFeedback") if isinstance(result, dict) else None
            logger.error(f"❌ Gemini response has no candidates (feedback: {feedback})")
            raise GenerationError() from e

        text = "".join(part.get("text", "") for part in parts if isinstance(part, dict))
        if not text.strip():
            logger.error("❌ Gemini returned an empty response")
            raise GenerationError()

        return text

    async def generate_response_async(
        self,
        user_prompt: str,
        system_instruction: str = "",
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """
        Generate a response for the given prompt.

        Args:
            user_prompt: Per-request prompt
            system_instruction: Fixed persona/format instructions
            temperature: Sampling temperature (None for configured default)
            max_tokens: Maximum tokens to generate

        Returns:
            Generated text

        Raises:
            GenerationError: On transport errors, non-2xx status or empty output
        """
        start_time = time.time()
        payload = self.build_payload(
            user_prompt=user_prompt,
            system_instruction=system_instruction,
            temperature=temperature,
            max_tokens=max_tokens,
        )

        # API key travels in a header, never in the URL
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }

        logger.debug("   📤 Sending request to Gemini API...")
        logger.debug(f"   📏 Prompt length: {len(user_prompt)} chars")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.api_url,
                    json=payload,
                    headers=headers,
                )
                response.raise_for_status()
                result = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"❌ Gemini API returned {e.response.status_code}: {e.response.text[:500]}"
            )
            raise GenerationError() from e
        except httpx.HTTPError as e:
            logger.error(f"❌ Gemini API request failed: {e}", exc_info=True)
            raise GenerationError() from e
        except ValueError as e:
            logger.error(f"❌ Gemini API returned invalid JSON: {e}")
            raise GenerationError() from e

        generated_text = self.extract_text(result)

        duration = time.time() - start_time
        logger.info(f"✅ Gemini response generated in {duration:.2f}s")
        logger.debug(f"   📝 Response length: {len(generated_text)} chars")

        return generated_text
