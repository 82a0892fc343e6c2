"""
comments_store.store.store

Explicit state container.

Responsibilities:
- Hold the root state and run the root reducer once per dispatched action.
- Notify subscribers after each dispatch.
- Reject malformed envelopes and re-entrant dispatch.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from comments_store.errors import MalformedActionError, StoreError
from comments_store.observability.logging import get_logger
from comments_store.store.actions import INIT
from comments_store.store.state import Action, Listener, Reducer, Unsubscribe

class Store:
    def __init__(self, reducer: Reducer, *, initial_state: Any = None) -> None:
        self._reducer = reducer
        self._state = initial_state
        self._listeners: list[Listener] = []
        self._dispatching = False
        # Bound per store so log configuration applied before construction is picked up.
        self._log = get_logger(__name__)

        self.dispatch({"type": INIT})
        self._log.info("store_initialized", slices=_slice_names(self._state))

    def get_state(self) -> Any:
        if self._dispatching:
            raise StoreError(reason="get_state() called while a reducer is running")
        return self._state

    def dispatch(self, action: Action) -> Action:
        if not isinstance(action, Mapping):
            raise MalformedActionError(reason="actions must be mappings")
        action_type = action.get("type")
        if not isinstance(action_type, str):
            raise MalformedActionError(reason="actions must have a string 'type'")
        if self._dispatching:
            raise StoreError(reason="reducers may not dispatch actions")

        self._dispatching = True
        try:
            next_state = self._reducer(self._state, action)
        except Exception:
            self._log.error("reducer_failed", action_type=action_type, exc_info=True)
            raise
        finally:
            self._dispatching = False

        changed = next_state is not self._state
        self._state = next_state
        self._log.debug("action_dispatched", action_type=action_type, changed=changed)

        # Snapshot so listeners may (un)subscribe while being notified.
        for listener in list(self._listeners):
            listener()
        return action

    def subscribe(self, listener: Listener) -> Unsubscribe:
        if not callable(listener):
            raise StoreError(reason="listener must be callable")
        self._listeners.append(listener)
        subscribed = True

        def unsubscribe() -> None:
            nonlocal subscribed
            if not subscribed:
                return
            subscribed = False
            self._listeners.remove(listener)

        return unsubscribe

    def replace_reducer(self, reducer: Reducer) -> None:
        self._reducer = reducer
        self.dispatch({"type": INIT})


def _slice_names(state: Any) -> list[str]:
    if isinstance(state, Mapping):
        return sorted(str(k) for k in state)
    return []


# --- Module Notes -----------------------------------------------------------
# Stores are passed explicitly to whoever needs them; there is no process-wide store.
