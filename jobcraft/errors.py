"""
Exception types raised by jobcraft.

All errors derive from :class:`JobcraftError` so that callers (the web
front end or the CLI) can catch everything raised by this package with
a single ``except`` clause while still telling authorization problems
apart from provider failures.
"""

from __future__ import annotations


class JobcraftError(Exception):
    """Base class for all jobcraft errors."""


class Unauthorized(JobcraftError):
    """Raised when an operation is invoked without an active caller session."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class ProviderError(JobcraftError):
    """Transport or SDK level failure while talking to an LLM provider."""


class ExtractionError(JobcraftError):
    """The provider answered but the envelope carries no completion text."""


class OperationError(JobcraftError):
    """Generic failure surfaced to callers of an operation.

    The message is the fixed, operation specific text (e.g.
    ``"Failed to generate resume"``); the underlying
    :class:`ProviderError` is available as ``__cause__``.
    """
