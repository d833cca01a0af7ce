from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


class LLMError(Exception):
    """Generative model call failed."""


@dataclass
class LLMResponse:
    content: str
    model: str
    usage: Optional[dict] = None


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    def generate(
        self,
        segments: List[str],
        model: Optional[str] = None,
    ) -> LLMResponse:
        """Generate text from an ordered sequence of text segments."""
        pass
