"""Resolution error taxonomy.

INVARIANT: Every layer propagates the first ResolutionError unchanged.
Nothing below the entry point catches, wraps, or retries.
"""

from __future__ import annotations

from typing import Any


class ResolutionError(Exception):
    """Base class for every failure a lookup chain can surface."""

    code = "RESOLUTION_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class NotFound(ResolutionError):
    """The identity has no corresponding entity."""

    code = "NOT_FOUND"


class Unavailable(ResolutionError):
    """A backing collaborator could not be reached."""

    code = "UNAVAILABLE"


class InvalidIdentity(ResolutionError):
    """An identity value is malformed."""

    code = "INVALID"
