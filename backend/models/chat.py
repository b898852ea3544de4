"""Chat mode data models"""

from __future__ import annotations

import time
import uuid
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

# Reserved id the UI sees for the in-flight assistant reply
STREAMING_ID = "streaming"


def now_ms() -> int:
    """Milliseconds since the epoch"""
    return int(time.time() * 1000)


def new_message_id() -> str:
    return str(uuid.uuid4())


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class FinalizedMessage(BaseModel):
    """A permanent chat entry"""

    model_config = ConfigDict(frozen=True)

    state: Literal["final"] = "final"
    id: str = Field(default_factory=new_message_id)
    role: Role
    content: str
    timestamp: int = Field(default_factory=now_ms)


class StreamingMessage(BaseModel):
    """The in-progress assistant reply, updated until finalized"""

    model_config = ConfigDict(frozen=True)

    state: Literal["streaming"] = "streaming"
    role: Literal[Role.ASSISTANT] = Role.ASSISTANT
    content: str = ""
    timestamp: int = Field(default_factory=now_ms)

    @computed_field
    @property
    def id(self) -> str:
        return STREAMING_ID


ChatMessage = Annotated[Union[FinalizedMessage, StreamingMessage], Field(discriminator="state")]


class AppendMessageRequest(BaseModel):
    """Request to append a fully-formed message"""

    role: Role = Role.USER
    content: str
    id: str | None = None
    timestamp: int | None = None


class StreamingUpdateRequest(BaseModel):
    """Cumulative text of the in-flight reply"""

    content: str


class FinalizeRequest(BaseModel):
    """Request to finalize the last assistant message"""

    content: str
    apply_to_content: bool | None = None  # None: auto-detect site documents


class StreamRequest(BaseModel):
    """Token deltas relayed from a provider, merged into one reply"""

    chunks: list[str]
    apply_to_content: bool | None = None


class MessageListResponse(BaseModel):
    """Current message list of a session"""

    session_id: str
    messages: list[ChatMessage]
    streaming: bool = False


class StreamEvent(BaseModel):
    """SSE stream event"""

    type: str  # "content", "done", "error"
    content: str | None = None
    message: ChatMessage | None = None
    metadata: dict | None = None
    done: bool = False
    error: str | None = None
