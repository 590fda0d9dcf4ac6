"""
Configuration for jobcraft.

Credentials come from the process environment only (a ``.env`` file is
honoured through python-dotenv).  Per-operation model parameters have
built-in defaults and may be overridden from a YAML file, e.g.::

    operations:
      analyze_fit:
        model: gpt-4o
        temperature: 0.3
      generate_cover_letter:
        temperature: null   # provider default

API keys are never read from YAML and never appear in ``repr`` output.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml  # type: ignore
from dotenv import load_dotenv

from .prompts.templates import JOB_ANALYSIS_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

PERPLEXITY = "perplexity"
OPENAI = "openai"

PERPLEXITY_CHAT_URL = "https://api.perplexity.ai/chat/completions"

ANALYZE_JOB = "analyze_job"
ANALYZE_FIT = "analyze_fit"
GENERATE_RESUME = "generate_resume"
GENERATE_COVER_LETTER = "generate_cover_letter"

_OVERRIDABLE_KEYS = ("model", "temperature", "max_tokens")


@dataclass(frozen=True)
class OperationSettings:
    """Provider parameters for a single operation.

    ``temperature`` and ``max_tokens`` set to ``None`` are left out of the
    provider request so the provider default applies.  ``fallback_text`` is
    returned when the provider answers without completion text; when it is
    ``None`` that case raises instead.  ``failure_message`` replaces
    provider errors with a generic :class:`~jobcraft.errors.OperationError`;
    when it is ``None`` the provider error propagates unchanged.
    """

    name: str
    provider: str
    model: str
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    system_prompt: Optional[str] = None
    fallback_text: Optional[str] = None
    failure_message: Optional[str] = None


DEFAULT_OPERATIONS: Dict[str, OperationSettings] = {
    ANALYZE_JOB: OperationSettings(
        name=ANALYZE_JOB,
        provider=PERPLEXITY,
        model="sonar",
        temperature=0.7,
        max_tokens=1024,
        system_prompt=JOB_ANALYSIS_SYSTEM_PROMPT,
    ),
    ANALYZE_FIT: OperationSettings(
        name=ANALYZE_FIT,
        provider=OPENAI,
        model="gpt-4o-mini",
        temperature=0.7,
        fallback_text="No analysis generated",
        failure_message="Failed to analyze fit",
    ),
    GENERATE_RESUME: OperationSettings(
        name=GENERATE_RESUME,
        provider=OPENAI,
        model="gpt-3.5-turbo",
        temperature=0.7,
        fallback_text="Failed to generate resume",
        failure_message="Failed to generate resume",
    ),
    # o3-mini only accepts its default temperature
    GENERATE_COVER_LETTER: OperationSettings(
        name=GENERATE_COVER_LETTER,
        provider=OPENAI,
        model="o3-mini",
        fallback_text="Failed to generate cover letter",
        failure_message="Failed to generate cover letter",
    ),
}


@dataclass
class Settings:
    """Process-wide configuration shared by all operations."""

    perplexity_api_key: Optional[str] = field(default=None, repr=False)
    openai_api_key: Optional[str] = field(default=None, repr=False)
    perplexity_endpoint: str = PERPLEXITY_CHAT_URL
    operations: Dict[str, OperationSettings] = field(
        default_factory=lambda: dict(DEFAULT_OPERATIONS)
    )

    def operation(self, name: str) -> OperationSettings:
        try:
            return self.operations[name]
        except KeyError:
            raise ValueError(f"Unknown operation '{name}'") from None


def _load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse YAML configuration {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration {path} must be a mapping")
    logger.info("Loaded configuration from %s", path)
    return data


def _coerce(key: str, value: Any) -> Any:
    if value is None:
        return None
    if key == "temperature":
        return float(value)
    if key == "max_tokens":
        return int(value)
    return str(value)


def apply_overrides(
    operations: Dict[str, OperationSettings],
    overrides: Dict[str, Any],
) -> Dict[str, OperationSettings]:
    """Return a copy of ``operations`` with YAML overrides applied.

    Unknown operation names and keys are logged and skipped.  Only
    ``model``, ``temperature`` and ``max_tokens`` may be overridden.
    """
    merged = dict(operations)
    for name, values in overrides.items():
        if name not in merged:
            logger.warning("Ignoring overrides for unknown operation '%s'", name)
            continue
        if not isinstance(values, dict):
            logger.warning("Overrides for '%s' must be a mapping; ignoring", name)
            continue
        changes = {}
        for key, value in values.items():
            if key not in _OVERRIDABLE_KEYS:
                logger.warning("Ignoring unsupported setting '%s' for '%s'", key, name)
                continue
            if key == "model" and not value:
                logger.warning("Empty model for '%s'; keeping %s", name, merged[name].model)
                continue
            changes[key] = _coerce(key, value)
        if changes:
            merged[name] = dataclasses.replace(merged[name], **changes)
            logger.debug("Operation %s overridden with %s", name, sorted(changes))
    return merged


def load_settings(config_path: Optional[str] = None) -> Settings:
    """Build :class:`Settings` from the environment and an optional YAML file.

    Args:
        config_path: YAML file with per-operation overrides.  Falls back to
            the ``JOBCRAFT_CONFIG`` environment variable when omitted.

    Returns:
        A populated :class:`Settings` instance.  Missing API keys are left
        as ``None``; they only become an error when a provider is built.

    Raises:
        ValueError: If the YAML file cannot be parsed.
        OSError: If the YAML file cannot be read.
    """
    load_dotenv()
    operations = dict(DEFAULT_OPERATIONS)
    path = config_path or os.getenv("JOBCRAFT_CONFIG")
    if path:
        config = _load_yaml(path)
        operations = apply_overrides(operations, config.get("operations") or {})
    return Settings(
        perplexity_api_key=os.getenv("PERPLEXITY_API_KEY"),
        openai_api_key=os.getenv("OPENAI_API_KEY"),
        perplexity_endpoint=os.getenv("PERPLEXITY_API_URL") or PERPLEXITY_CHAT_URL,
        operations=operations,
    )
