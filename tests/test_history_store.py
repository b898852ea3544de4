"""Tests for the undo/redo history store."""

import pytest

from services.history_store import HistoryStore


def test_set_content_does_not_snapshot(history):
    history.set_content("hello")

    assert history.content == "hello"
    assert history.past == []


def test_commit_pushes_snapshot(history):
    history.set_content("hello")
    view = history.commit()

    assert view.past_length == 1
    assert history.past[0].content == "hello"


def test_undo_redo_scenario(history):
    history.set_content("one")
    history.commit()
    history.set_content("two")
    view = history.commit()
    assert view.content == "two"
    assert view.past_length == 2

    view = history.undo()
    assert view.content == "one"
    assert view.past_length == 1
    assert view.future_length == 1

    view = history.redo()
    assert view.content == "two"
    assert view.past_length == 2
    assert view.future_length == 0


def test_undo_restores_content_before_latest_commit(history):
    for text in ["a", "b", "c"]:
        history.set_content(text)
        history.commit()

    history.undo()

    assert history.content == "b"


def test_undo_past_first_commit_returns_empty(history):
    history.set_content("only")
    history.commit()

    history.undo()

    assert history.content == ""
    assert not history.can_undo
    assert history.can_redo


def test_undo_then_redo_is_inverse(history):
    history.set_content("base")
    history.commit()
    history.set_content("edit")
    history.commit()
    before = history.view()

    history.undo()
    after = history.redo()

    assert after.content == before.content
    assert after.past_length == before.past_length
    assert after.future_length == before.future_length


def test_new_commit_invalidates_redo(history):
    history.set_content("one")
    history.commit()
    history.set_content("two")
    history.commit()
    history.undo()
    assert history.can_redo

    history.set_content("branch")
    history.commit()

    assert history.future == []
    assert history.redo().content == "branch"


def test_undo_keeps_uncommitted_edit_for_redo(history):
    history.set_content("one")
    history.commit()
    history.set_content("two")
    history.commit()
    history.set_content("two, edited")

    history.undo()
    history.redo()

    assert history.content == "two, edited"


def test_empty_stacks_are_noops(history):
    history.set_content("draft")

    assert history.undo().content == "draft"
    assert history.redo().content == "draft"
    assert history.past == [] and history.future == []


def test_repeated_commits_grow_past(history):
    history.set_content("same")
    history.commit()
    history.commit()

    assert len(history.past) == 2


def test_past_and_future_never_share_snapshots(history):
    for text in ["a", "b", "c"]:
        history.set_content(text)
        history.commit()
    history.undo()
    history.undo()

    past_ids = {id(s) for s in history.past}
    assert not past_ids & {id(s) for s in history.future}


def test_snapshots_are_immutable(history):
    history.set_content("frozen")
    history.commit()
    snapshot = history.past[0]
    history.set_content("changed")

    assert snapshot.content == "frozen"


def test_clear_resets_everything(history):
    history.set_content("x")
    history.commit()
    history.undo()

    view = history.clear()

    assert view.content == ""
    assert view.past_length == 0
    assert view.future_length == 0


def test_max_depth_evicts_oldest():
    history = HistoryStore(max_depth=3)
    for text in ["a", "b", "c", "d", "e"]:
        history.set_content(text)
        history.commit()

    assert [s.content for s in history.past] == ["c", "d", "e"]


def test_undo_after_eviction_falls_back_to_evicted_content():
    history = HistoryStore(max_depth=2)
    for text in ["a", "b", "c"]:
        history.set_content(text)
        history.commit()

    history.undo()
    history.undo()

    assert history.content == "a"
    assert len(history.past) + len(history.future) <= 2


def test_unbounded_when_depth_is_zero():
    history = HistoryStore(max_depth=0)
    for i in range(150):
        history.set_content(str(i))
        history.commit()

    assert len(history.past) == 150


def test_previous_content_matches_undo(history):
    history.set_content("v1")
    history.commit()
    history.set_content("v2")
    history.commit()

    expected = history.previous_content()

    assert history.undo().content == expected == "v1"


def test_negative_max_depth_is_rejected():
    with pytest.raises(ValueError):
        HistoryStore(max_depth=-1)
