"""
comments_store.store.reducers

Slice reducers and reducer composition.

Why reducers:
- The store owns state; reducers only describe the next state for one action.
- Reducers are pure: no I/O, no logging, inputs never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from comments_store.errors import MalformedActionError
from comments_store.store.actions import FETCH_COMMENTS
from comments_store.store.state import Action, CommentsState, Reducer, RootState


def comments_reducer(
    state: CommentsState | None = None,
    action: Action | None = None,
    *,
    strict: bool = True,
) -> CommentsState:
    """
    Reducer for the `comments` slice.

    FETCH_COMMENTS replaces the slice with `action["payload"]["data"]` (the same
    object, no merge). Every other action returns `state` itself.

    A FETCH_COMMENTS action without `payload.data` raises `MalformedActionError`,
    or is treated as a no-op when `strict` is False.
    """

    if state is None:
        state = []
    if action is None:
        return state

    if action.get("type") == FETCH_COMMENTS:
        payload = action.get("payload")
        if isinstance(payload, Mapping) and "data" in payload:
            return payload["data"]
        if strict:
            raise MalformedActionError(
                reason="payload.data is required", action_type=FETCH_COMMENTS
            )
        return state

    return state


def combine_reducers(reducers: Mapping[str, Reducer]) -> Reducer:
    """
    Compose slice reducers into a reducer over the root state dict.

    Each slice reducer sees only its own slice (None when absent). If no slice
    changed identity, the previous root dict is returned.
    """

    slices = dict(reducers)

    def root_reducer(state: RootState | None, action: Action) -> RootState:
        previous = state if state is not None else {}
        next_state: dict[str, Any] = {}
        changed = set(previous) != set(slices)
        for key, reducer in slices.items():
            before = previous.get(key)
            after = reducer(before, action)
            next_state[key] = after
            changed = changed or after is not before
        return next_state if changed else previous

    return root_reducer


def bind_strict(strict: bool) -> Reducer:
    # Binds the malformed-action policy so the store sees a plain (state, action) reducer.
    def _wrapped(state: CommentsState | None, action: Action) -> CommentsState:
        return comments_reducer(state, action, strict=strict)

    return _wrapped


# --- Module Notes -----------------------------------------------------------
# Unknown action types always fall through to "return state unchanged"; new action
# types should get their own branch rather than changing that default.
