"""
Shared request/response handling for the operations.

Every operation builds its prompt and then hands over to
:func:`run_operation`, which turns the prompt into a provider request,
performs the single provider call and applies the operation's error
policy (see :class:`~jobcraft.config.OperationSettings`).
"""

from __future__ import annotations

import logging
from typing import Optional

from ..config import DEFAULT_OPERATIONS, OperationSettings, Settings, load_settings
from ..errors import ExtractionError, OperationError, ProviderError
from ..providers import ChatMessage, ProviderClient, ProviderRequest, get_provider

logger = logging.getLogger(__name__)


def build_request(operation: OperationSettings, prompt: str) -> ProviderRequest:
    """Wrap ``prompt`` in a chat request using the operation's parameters."""
    messages = []
    if operation.system_prompt:
        messages.append(ChatMessage(role="system", content=operation.system_prompt))
    messages.append(ChatMessage(role="user", content=prompt))
    return ProviderRequest(
        model=operation.model,
        messages=tuple(messages),
        temperature=operation.temperature,
        max_tokens=operation.max_tokens,
    )


def run_operation(
    name: str,
    prompt: str,
    *,
    client: Optional[ProviderClient] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Send ``prompt`` for operation ``name`` and return the completion.

    Args:
        name: Operation key, e.g. ``"analyze_fit"``.
        prompt: Fully rendered user prompt.
        client: Provider to call.  Built from ``settings`` when omitted.
        settings: Configuration.  Loaded from the environment when both
            ``client`` and ``settings`` are omitted; with only ``client``
            given the built-in operation defaults are used.

    Returns:
        The completion text, or the operation's fallback text when the
        provider returned none.

    Raises:
        OperationError: Provider failure for operations with a failure message.
        ProviderError: Provider failure for operations without one.
        ExtractionError: Missing completion for operations without a fallback.
    """
    if client is None and settings is None:
        settings = load_settings()
    operation = settings.operation(name) if settings is not None else DEFAULT_OPERATIONS[name]
    if client is None:
        client = get_provider(operation.provider, settings)

    request = build_request(operation, prompt)
    logger.debug(
        "Running %s via %s (model=%s, prompt=%d chars)",
        name, client.__class__.__name__, operation.model, len(prompt),
    )
    try:
        content = client.complete(request)
    except ProviderError as exc:
        logger.exception("Error in %s (model=%s): %s", name, operation.model, exc)
        if operation.failure_message is None:
            raise
        raise OperationError(operation.failure_message) from exc
    except ExtractionError as exc:
        if operation.fallback_text is None:
            logger.error("Error in %s (model=%s): %s", name, operation.model, exc)
            raise
        logger.warning("%s got no completion (%s); returning fallback text", name, exc)
        return operation.fallback_text

    if not content and operation.fallback_text is not None:
        logger.warning("%s got an empty completion; returning fallback text", name)
        return operation.fallback_text
    return content
