"""
Chat completions through the OpenAI Python SDK.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import openai

from ..errors import ProviderError
from .base import ProviderClient, ProviderRequest
from .extract import extract_completion

logger = logging.getLogger(__name__)


class SdkProvider(ProviderClient):
    """Provider that uses ``client.chat.completions.create``.

    Args:
        api_key: OpenAI API key.  Required unless ``client`` is given.
        client: A preconfigured ``openai.OpenAI`` compatible client.
    """

    def __init__(self, api_key: Optional[str] = None, client: Any = None) -> None:
        if client is None:
            if not api_key:
                raise ValueError("OPENAI_API_KEY not provided")
            client = openai.OpenAI(api_key=api_key)
        self.client = client

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    @staticmethod
    def build_kwargs(request: ProviderRequest) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "model": request.model,
            "messages": [message.to_dict() for message in request.messages],
        }
        if request.temperature is not None:
            kwargs["temperature"] = request.temperature
        if request.max_tokens is not None:
            kwargs["max_tokens"] = request.max_tokens
        return kwargs

    def complete(self, request: ProviderRequest) -> str:
        logger.debug("Calling OpenAI chat completions (model=%s)", request.model)
        try:
            completion = self.client.chat.completions.create(**self.build_kwargs(request))
        except openai.OpenAIError as exc:
            raise ProviderError(f"OpenAI request failed: {exc}") from exc
        return extract_completion(completion)
