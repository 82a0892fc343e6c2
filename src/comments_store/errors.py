"""
comments_store.errors

Exceptions raised by reducers and the store.

Responsibilities:
- Signal malformed actions with the offending action type attached.
- Signal misuse of the store (e.g. dispatching from inside a reducer).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class StoreError(Exception):
    reason: str

    def __str__(self) -> str:
        return self.reason


@dataclass(eq=False)
class MalformedActionError(StoreError):
    """
    Raised when an action does not have the shape its type requires.
    Callers that want lenient handling must validate before dispatch.
    """

    action_type: str | None = None

    def __str__(self) -> str:
        if self.action_type is None:
            return self.reason
        return f"{self.action_type}: {self.reason}"


# --- Module Notes -----------------------------------------------------------
# The store never catches these; they surface to whoever called `dispatch`.
