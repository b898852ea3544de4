"""Tests for the streaming chat message list."""

import pytest
from pydantic import ValidationError

from models.chat import STREAMING_ID, FinalizedMessage, Role, StreamingMessage
from services.message_stream import MessageStream, NoMessageToReplaceError


def _user(content="hi", message_id="u1"):
    return FinalizedMessage(id=message_id, role=Role.USER, content=content)


def test_append_message(stream):
    messages = stream.append_message(_user())

    assert len(messages) == 1
    assert messages[0].id == "u1"


def test_append_rejects_streaming_message(stream):
    with pytest.raises(TypeError):
        stream.append_message(StreamingMessage(content="partial"))


def test_upsert_creates_then_updates_placeholder(stream):
    stream.append_message(_user())

    stream.upsert_streaming_assistant("A")
    messages = stream.upsert_streaming_assistant("AB")

    assert len(messages) == 2
    assert messages[-1].id == STREAMING_ID
    assert messages[-1].role is Role.ASSISTANT
    assert messages[-1].content == "AB"


def test_upsert_is_idempotent(stream):
    stream.append_message(_user())
    first = stream.upsert_streaming_assistant("same text")

    again = stream.upsert_streaming_assistant("same text")

    assert len(again) == len(first)
    assert again[-1].content == first[-1].content


def test_finalize_replaces_sentinel_with_unique_id(stream):
    stream.append_message(_user())
    stream.upsert_streaming_assistant("partial")

    messages = stream.replace_last_assistant_message("Final")

    assert messages[-1].content == "Final"
    assert messages[-1].id != STREAMING_ID
    assert all(m.id != STREAMING_ID for m in messages)
    assert not stream.is_streaming


def test_finalized_ids_are_unique(stream):
    ids = set()
    for _ in range(3):
        stream.upsert_streaming_assistant("x")
        ids.add(stream.replace_last_assistant_message("x")[-1].id)

    assert len(ids) == 3


def test_finalize_on_empty_list_raises(stream):
    with pytest.raises(NoMessageToReplaceError):
        stream.replace_last_assistant_message("text")


def test_finalize_rewrites_last_message_even_without_stream(stream):
    stream.append_message(_user("question"))

    messages = stream.replace_last_assistant_message("answer")

    assert len(messages) == 1
    assert messages[0].role is Role.ASSISTANT


def test_abandoned_placeholder_is_replaced_by_next_stream(stream):
    stream.upsert_streaming_assistant("abandoned")
    stream.append_message(_user("next question"))

    messages = stream.upsert_streaming_assistant("new reply")

    placeholders = [m for m in messages if isinstance(m, StreamingMessage)]
    assert len(placeholders) == 1
    assert messages[-1].content == "new reply"
    assert [m.content for m in messages] == ["next question", "new reply"]


def test_finalize_drops_abandoned_placeholder(stream):
    stream.upsert_streaming_assistant("abandoned")
    stream.append_message(_user("next question"))

    messages = stream.replace_last_assistant_message("done")

    assert all(m.id != STREAMING_ID for m in messages)
    # The trailing user message is overwritten along with the placeholder
    assert [m.content for m in messages] == ["done"]
    assert messages[0].role is Role.ASSISTANT


def test_clear_messages(stream):
    stream.append_message(_user())
    stream.upsert_streaming_assistant("x")

    assert stream.clear_messages() == []
    assert len(stream) == 0


def test_conversation_history_skips_placeholders_and_blanks(stream):
    stream.append_message(_user("hi"))
    stream.append_message(FinalizedMessage(role=Role.ASSISTANT, content="   "))
    stream.upsert_streaming_assistant("partial")

    assert stream.conversation_history() == [{"role": "user", "content": "hi"}]


def test_messages_property_is_a_copy(stream):
    stream.append_message(_user())
    stream.messages.clear()

    assert len(stream) == 1


def test_streaming_message_serializes_sentinel_id():
    data = StreamingMessage(content="abc").model_dump(mode="json")

    assert data["id"] == STREAMING_ID
    assert data["state"] == "streaming"
    assert data["role"] == "assistant"


def test_streaming_message_is_always_assistant():
    with pytest.raises(ValidationError):
        StreamingMessage(role=Role.USER, content="x")
    with pytest.raises(ValidationError):
        StreamingMessage.model_validate({"state": "streaming", "role": "user"})
