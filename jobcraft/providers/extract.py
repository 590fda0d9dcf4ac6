"""
Pull the completion text out of a chat completions envelope.

The HTTP provider hands us decoded JSON (nested dicts) while the SDK
returns typed objects, so fields are looked up either way.
"""

from __future__ import annotations

from typing import Any

from ..errors import ExtractionError


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def extract_completion(envelope: Any) -> str:
    """Return ``choices[0].message.content`` from ``envelope`` unmodified.

    Raises:
        ExtractionError: If any part of that path is missing or the content
            is not a string.
    """
    choices = _field(envelope, "choices")
    if not choices:
        raise ExtractionError("Provider response contains no choices")
    try:
        first = choices[0]
    except (IndexError, KeyError, TypeError):
        raise ExtractionError("Provider response has malformed choices") from None
    message = _field(first, "message")
    if message is None:
        raise ExtractionError("Provider response contains no message")
    content = _field(message, "content")
    if not isinstance(content, str):
        raise ExtractionError("Provider response message has no content")
    return content
