from typing import List, Optional

import httpx

from helpdesk.logging_config import get_logger
from helpdesk.services.llm.base import LLMError, LLMProvider, LLMResponse

logger = get_logger("llm.gemini")


class GeminiProvider(LLMProvider):
    """Google Generative Language API provider."""

    def __init__(
        self,
        api_key: str,
        default_model: str = "gemini-2.0-flash",
        timeout_seconds: float = 30.0,
    ):
        self.api_key = api_key
        self.default_model = default_model
        self.timeout_seconds = timeout_seconds
        self.base_url = "https://generativelanguage.googleapis.com/v1beta/models"

    def generate(
        self,
        segments: List[str],
        model: Optional[str] = None,
    ) -> LLMResponse:
        """Generate response from Gemini. Each segment becomes one text part of a single user turn."""

        model = model or self.default_model
        payload = {"contents": [{"role": "user", "parts": [{"text": segment} for segment in segments]}]}
        logger.debug(f"Gemini request: model={model}, segments_count={len(segments)}")

        try:
            with httpx.Client(timeout=self.timeout_seconds) as client:
                response = client.post(
                    f"{self.base_url}/{model}:generateContent",
                    headers={"x-goog-api-key": self.api_key, "Content-Type": "application/json"},
                    json=payload,
                )
        except httpx.HTTPError as exc:
            raise LLMError(f"Gemini request failed: {exc}") from exc

        logger.debug(f"Gemini response status: {response.status_code}")

        if response.status_code != 200:
            logger.error(f"Gemini error: {response.text}")
            raise LLMError(f"Gemini API error: {response.status_code} - {response.text}")

        data = response.json()

        content = ""
        candidates = data.get("candidates") or []
        if candidates:
            parts = (candidates[0].get("content") or {}).get("parts") or []
            content = "".join(part.get("text", "") for part in parts)
        logger.debug(f"Gemini content: {content[:100] if content else 'EMPTY'}")

        return LLMResponse(
            content=content,
            model=data.get("modelVersion", model),
            usage=data.get("usageMetadata"),
        )
