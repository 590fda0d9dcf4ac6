"""
Provider request types and the common client interface.

Both LLM providers used by jobcraft expose an OpenAI-style chat
completions API.  :class:`ProviderClient` hides the difference between
calling one over plain HTTP and calling one through its SDK, so the
operations only ever see ``complete(request) -> str``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class ProviderRequest:
    """One chat completion request.

    ``temperature`` and ``max_tokens`` are omitted from the wire request
    when ``None``.
    """

    model: str
    messages: Tuple[ChatMessage, ...]
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


class ProviderClient(ABC):
    """Abstract base class for LLM provider clients."""

    @abstractmethod
    def complete(self, request: ProviderRequest) -> str:
        """Send ``request`` and return the first completion's text.

        Raises:
            ProviderError: On transport, HTTP status or SDK failures.
            ExtractionError: If the response carries no completion text.
        """
        raise NotImplementedError
