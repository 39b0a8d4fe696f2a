# config.py

from dataclasses import dataclass, field
from typing import Optional, Tuple

DEFAULT_GREETING = "Hello! I'm here to help. How can I assist you?"
DEFAULT_FALLBACK_REPLY = "Sorry, I couldn't process that message. Please try again."
DEFAULT_ERROR_REPLY = "Sorry, there is a connection problem. Please try again later."

@dataclass
class WidgetConfig:
    """
    Settings handed to the widget at construction.

    endpoint: responder URL. If None, the embedded responder is used.
    storage_path: JSON file backing the local store.
    session_key / messages_key: keys of the two stored entries.
    reveal_delay: seconds between two revealed characters.
    reply_fields: response fields checked in order for the reply text.
    """
    endpoint: Optional[str] = None
    storage_path: str = "./.chatwidget/storage.json"
    session_key: str = "chat_session_id"
    messages_key: str = "chat_messages"
    reveal_delay: float = 0.03
    request_timeout: float = 30.0
    greeting: str = DEFAULT_GREETING
    fallback_reply: str = DEFAULT_FALLBACK_REPLY
    error_reply: str = DEFAULT_ERROR_REPLY
    reply_fields: Tuple[str, ...] = field(default=("response", "message", "output", "text"))
