# conversation/messages.py

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ulid import ULID

USER = "user"
ASSISTANT = "assistant"

# Reveal states
NONE = "none"
PENDING = "pending"
REVEALING = "revealing"
REVEALED = "revealed"

def new_message_id() -> str:
    return str(ULID())


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Message:
    """
    Represents a single message in the conversation.
    """
    id: str
    text: str
    author: str
    created_at: datetime = field(default_factory=_now)
    reveal_state: str = NONE

    @property
    def is_user(self) -> bool:
        return self.author == USER

    @property
    def is_typing(self) -> bool:
        return self.reveal_state in (PENDING, REVEALING)

    def to_dict(self) -> dict:
        """Serialize to the stored record format."""
        return {
            "id": self.id,
            "text": self.text,
            "isUser": self.is_user,
            "timestamp": self.created_at.isoformat(),
            "isTyping": self.is_typing,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Message":
        """
        Rebuild a message from a stored record.

        A reveal cannot resume across restarts, so assistant messages stored
        mid-reveal come back fully revealed.
        """
        is_user = bool(data.get("isUser", False))
        timestamp = datetime.fromisoformat(data["timestamp"])
        return cls(
            id=str(data["id"]),
            text=str(data["text"]),
            author=USER if is_user else ASSISTANT,
            created_at=timestamp,
            reveal_state=NONE if is_user else REVEALED,
        )


class ConversationMessages:
    """
    Append-only message log.
    """
    def __init__(self, messages: Optional[List[Message]] = None):
        self.messages: List[Message] = list(messages or [])

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self):
        return iter(self.messages)

    def add_message(self, author: str, text: str, reveal_state: Optional[str] = None) -> Message:
        """Append a new message and return it."""
        if reveal_state is None:
            reveal_state = NONE if author == USER else PENDING
        if author == USER and reveal_state != NONE:
            raise ValueError("User messages are never revealed")
        message = Message(new_message_id(), text, author, reveal_state=reveal_state)
        self.messages.append(message)
        return message

    def get(self, message_id: str) -> Optional[Message]:
        for message in self.messages:
            if message.id == message_id:
                return message
        return None

    def to_records(self) -> List[Dict]:
        return [m.to_dict() for m in self.messages]

    @classmethod
    def from_records(cls, records: List[Dict]) -> "ConversationMessages":
        if not isinstance(records, list):
            raise ValueError("Stored messages must be a list")
        for record in records:
            if not isinstance(record, dict):
                raise ValueError(f"Stored message must be an object, got {type(record).__name__}")
        return cls([Message.from_dict(r) for r in records])
