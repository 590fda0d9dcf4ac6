"""
LLM provider clients.

Two variants sit behind :class:`ProviderClient`:

* :class:`DirectHttpProvider` – raw HTTP POST (Perplexity).
* :class:`SdkProvider` – the OpenAI Python SDK.

:func:`get_provider` builds the right one from :class:`~jobcraft.config.Settings`.
"""

from __future__ import annotations

from ..config import OPENAI, PERPLEXITY, Settings
from .base import ChatMessage, ProviderClient, ProviderRequest  # noqa: F401
from .extract import extract_completion  # noqa: F401
from .http_provider import DirectHttpProvider
from .sdk_provider import SdkProvider


def get_provider(kind: str, settings: Settings) -> ProviderClient:
    """Return a provider client of the given kind.

    Args:
        kind: ``"perplexity"`` or ``"openai"``.
        settings: Source of credentials and endpoint.

    Raises:
        ValueError: If ``kind`` is unknown or its API key is not configured.
    """
    if kind == PERPLEXITY:
        return DirectHttpProvider(settings.perplexity_api_key, settings.perplexity_endpoint)
    if kind == OPENAI:
        return SdkProvider(settings.openai_api_key)
    raise ValueError(f"Unknown provider '{kind}'")
