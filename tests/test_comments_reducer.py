"""
tests.test_comments_reducer

Behavior of the `comments` slice reducer.

Responsibilities:
- Fetch actions replace the slice wholesale; everything else is a no-op.
- Malformed fetch actions fail fast (strict) or are ignored (lenient).
"""

from __future__ import annotations

import copy

import pytest

from comments_store.errors import MalformedActionError
from comments_store.store.actions import FETCH_COMMENTS, fetch_comments
from comments_store.store.reducers import bind_strict, comments_reducer


def test_fetch_into_empty_state() -> None:
    action = {"type": FETCH_COMMENTS, "payload": {"data": [{"id": 1, "text": "hi"}]}}
    assert comments_reducer([], action) == [{"id": 1, "text": "hi"}]


def test_unknown_action_returns_same_state_object() -> None:
    state = [{"id": 1, "text": "hi"}]
    assert comments_reducer(state, {"type": "OTHER_ACTION"}) is state


def test_fetch_replaces_instead_of_merging() -> None:
    action = {"type": FETCH_COMMENTS, "payload": {"data": [{"id": 2}, {"id": 3}]}}
    assert comments_reducer([{"id": 1}], action) == [{"id": 2}, {"id": 3}]


def test_fetch_returns_payload_data_object_itself() -> None:
    data = [{"id": 5}]
    assert comments_reducer([{"id": 1}], fetch_comments(data)) is data


def test_missing_state_defaults_to_empty_list() -> None:
    assert comments_reducer(None, fetch_comments([])) == []
    assert comments_reducer(None, {"type": "OTHER_ACTION"}) == []
    assert comments_reducer() == []


def test_repeated_fetch_is_idempotent() -> None:
    data = [{"id": 7}, {"id": 8}]
    action = fetch_comments(data)
    once = comments_reducer([{"id": 1}], action)
    assert comments_reducer(once, action) == data


@pytest.mark.parametrize("action_type", ["OTHER_ACTION", "fetch_comments", "", "@@INIT"])
def test_non_fetch_types_are_no_ops(action_type: str) -> None:
    state = [{"id": 1}]
    assert comments_reducer(state, {"type": action_type, "payload": {"data": []}}) is state


def test_missing_type_is_a_no_op() -> None:
    state = [{"id": 1}]
    assert comments_reducer(state, {}) is state  # type: ignore[typeddict-item]


def test_inputs_are_not_mutated() -> None:
    state = [{"id": 1}]
    action = fetch_comments([{"id": 2}])
    state_before = copy.deepcopy(state)
    action_before = copy.deepcopy(action)

    comments_reducer(state, action)

    assert state == state_before
    assert action == action_before


@pytest.mark.parametrize(
    "action",
    [
        {"type": FETCH_COMMENTS},
        {"type": FETCH_COMMENTS, "payload": None},
        {"type": FETCH_COMMENTS, "payload": {}},
        {"type": FETCH_COMMENTS, "payload": [1, 2]},
    ],
)
def test_malformed_fetch_raises_when_strict(action: dict) -> None:
    with pytest.raises(MalformedActionError) as excinfo:
        comments_reducer([{"id": 1}], action)
    assert excinfo.value.action_type == FETCH_COMMENTS
    assert "payload.data" in str(excinfo.value)


def test_malformed_fetch_is_ignored_when_lenient() -> None:
    state = [{"id": 1}]
    assert comments_reducer(state, {"type": FETCH_COMMENTS}, strict=False) is state
    assert bind_strict(False)(state, {"type": FETCH_COMMENTS, "payload": {}}) is state


def test_bound_strict_reducer_still_raises() -> None:
    with pytest.raises(MalformedActionError):
        bind_strict(True)([], {"type": FETCH_COMMENTS})


def test_data_is_not_required_to_be_a_list() -> None:
    data = ({"id": 1},)
    assert comments_reducer([], {"type": FETCH_COMMENTS, "payload": {"data": data}}) is data


# --- Module Notes -----------------------------------------------------------
# These tests call the reducer directly; store wiring is covered in `tests.test_store`.
