"""
Session gate for the public operations.

The web application owns authentication.  It hands each operation the
caller's session object (whatever its session library returns) and this
module only checks that one is present.  Nothing here reads global state,
which keeps the operations testable with any truthy fake.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import Unauthorized

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalSession:
    """Session used by trusted local callers such as the operator CLI."""

    user: str = "local-operator"

    def __bool__(self) -> bool:
        return True


def require_session(session: object) -> None:
    """Fail fast when no caller session is present.

    Args:
        session: The caller session supplied by the web application.  Only
            its truthiness is inspected; ``None``, ``{}`` and other falsy
            values mean "not signed in".

    Raises:
        Unauthorized: If ``session`` is falsy.
    """
    if not session:
        logger.debug("Rejecting call without an active session")
        raise Unauthorized()
