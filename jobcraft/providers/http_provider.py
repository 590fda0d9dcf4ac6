"""
Chat completions over plain HTTP.

Used for Perplexity, whose API is OpenAI compatible but reached here
with a direct ``requests.post``.  One request per call: no retries, no
streaming and no timeout beyond the transport default.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

import requests

from ..config import PERPLEXITY_CHAT_URL
from ..errors import ProviderError
from .base import ProviderClient, ProviderRequest
from .extract import extract_completion

logger = logging.getLogger(__name__)


class DirectHttpProvider(ProviderClient):
    """Provider that POSTs to a chat completions endpoint."""

    def __init__(self, api_key: str | None, endpoint: str = PERPLEXITY_CHAT_URL) -> None:
        if not api_key:
            raise ValueError("PERPLEXITY_API_KEY not provided")
        self._api_key = api_key
        self.endpoint = endpoint

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(endpoint={self.endpoint!r})"

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    @staticmethod
    def build_payload(request: ProviderRequest) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": request.model,
            "messages": [message.to_dict() for message in request.messages],
        }
        if request.temperature is not None:
            payload["temperature"] = request.temperature
        if request.max_tokens is not None:
            payload["max_tokens"] = request.max_tokens
        payload["stream"] = False
        return payload

    def complete(self, request: ProviderRequest) -> str:
        logger.debug("POST %s (model=%s)", self.endpoint, request.model)
        try:
            response = requests.post(
                self.endpoint,
                headers=self._headers(),
                json=self.build_payload(request),
            )
        except requests.RequestException as exc:
            raise ProviderError(f"Request to {self.endpoint} failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError:
            # Error pages are not always JSON
            data = response.text

        if not 200 <= response.status_code < 300:
            logger.debug("Provider answered HTTP %s", response.status_code)
            raise ProviderError(f"API error: {json.dumps(data)}")
        return extract_completion(data)
