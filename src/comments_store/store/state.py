"""
comments_store.store.state

Typed shapes shared by actions, reducers and the store.

Responsibilities:
- Define the action contract (`Action`).
- Define reducer and listener call signatures.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Required, TypedDict

# Comment records are opaque to the store; it only ever replaces the whole sequence.
Comment = Any
CommentsState = Sequence[Comment]

RootState = dict[str, Any]


class Action(TypedDict, total=False):
    type: Required[str]
    # Shape depends on `type`; only FETCH_COMMENTS payloads are read.
    payload: Any


Reducer = Callable[[Any, Action], Any]
Listener = Callable[[], None]
Unsubscribe = Callable[[], None]
