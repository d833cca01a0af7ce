from helpdesk.services.llm.base import LLMError, LLMProvider, LLMResponse
from helpdesk.services.llm.gemini_provider import GeminiProvider

__all__ = ["LLMError", "LLMProvider", "LLMResponse", "GeminiProvider"]
