"""
comments_store.store.actions

Action types, creators and the JSON wire decoder.

Responsibilities:
- Name the action types the store understands.
- Build well-formed actions for callers.
- Decode actions received as JSON into `Action` mappings.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import TypeAdapter, ValidationError

from comments_store.errors import MalformedActionError
from comments_store.store.state import Action, Comment

FETCH_COMMENTS = "FETCH_COMMENTS"

# Dispatched by the store itself so every slice reducer produces its default state.
INIT = "@@comments_store/INIT"

_action_adapter: TypeAdapter[Action] = TypeAdapter(Action)


def fetch_comments(data: Sequence[Comment]) -> Action:
    """
    Action announcing that a comments fetch completed with `data`.

    `data` is stored as-is; the reducer hands this exact object to the slice.
    """

    return {"type": FETCH_COMMENTS, "payload": {"data": data}}


def parse_action(raw: str | bytes) -> Action:
    """
    Decode a JSON action such as
    `{"type": "FETCH_COMMENTS", "payload": {"data": [...]}}`.

    Only the envelope is checked here (a string `type`); payload shape is
    checked by the reducer that handles the type.
    """

    try:
        return _action_adapter.validate_json(raw, strict=True)
    except ValidationError as e:
        raise MalformedActionError(reason=_describe(e)) from e


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    loc = ".".join(str(p) for p in first.get("loc", ())) or "action"
    return f"{loc}: {first.get('msg', 'invalid')}"


# --- Module Notes -----------------------------------------------------------
# Action creators stay pure; performing the fetch is the caller's concern.
