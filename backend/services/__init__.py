"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_engine import apply_hunks, compute_hunks, count_changes, split_lines
from .diff_generator import DiffGenerator
from .editor_session import EditorSession, looks_like_site_document
from .history_store import HistoryStore
from .inline_blocks import build_inline_blocks
from .message_stream import MessageStream, NoMessageToReplaceError
from .session_registry import SessionRegistry
from .stream_relay import relay_stream

__all__ = [
    "ConfigManager",
    "apply_hunks",
    "compute_hunks",
    "count_changes",
    "split_lines",
    "DiffGenerator",
    "EditorSession",
    "looks_like_site_document",
    "HistoryStore",
    "build_inline_blocks",
    "MessageStream",
    "NoMessageToReplaceError",
    "SessionRegistry",
    "relay_stream",
]
