# conversation/history.py

import json
import os
from typing import Dict, Optional

from ulid import ULID

from ..errors import StoreError
from .messages import ASSISTANT, REVEALED, ConversationMessages

class LocalStore:
    """
    String key/value store persisted as one JSON file, like browser local storage.
    """

    def __init__(self, path: str):
        self.path = path

    def _read_all(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StoreError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Unexpected content in {self.path}")
        return data

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except StoreError:
            data = {}
        data[key] = value
        directory = os.path.dirname(self.path)
        tmp_path = f"{self.path}.tmp"
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StoreError(f"Cannot write {self.path}: {e}") from e


class ConversationHistory:
    """
    Loads and saves the session id and the message log.

    Storage problems never reach the caller: reads fall back to defaults,
    failed writes are logged and dropped.
    """

    def __init__(self, store: LocalStore, session_key: str, messages_key: str,
                 greeting: str, logger=None):
        self.store = store
        self.session_key = session_key
        self.messages_key = messages_key
        self.greeting = greeting
        self.logger = logger

    def load_session_id(self) -> str:
        """Return the stored session id, creating and saving one if absent."""
        session_id = None
        try:
            session_id = self.store.get_item(self.session_key)
        except StoreError as e:
            if self.logger:
                self.logger.error(f"Error loading session id: {e}")
        if not session_id:
            session_id = str(ULID())
            self._write(self.session_key, session_id)
            if self.logger:
                self.logger.debug(f"Created session id {session_id}")
        return session_id

    def greeting_log(self) -> ConversationMessages:
        log = ConversationMessages()
        log.add_message(ASSISTANT, self.greeting, reveal_state=REVEALED)
        return log

    def load_messages(self) -> ConversationMessages:
        """Return the stored log, or a log holding only the greeting."""
        try:
            saved = self.store.get_item(self.messages_key)
            if saved:
                log = ConversationMessages.from_records(json.loads(saved))
                if self.logger:
                    self.logger.debug(f"Loaded {len(log)} messages")
                return log
        except (StoreError, ValueError, KeyError, TypeError) as e:
            if self.logger:
                self.logger.error(f"Error loading messages: {e}")
        return self.greeting_log()

    def save_messages(self, log: ConversationMessages) -> None:
        records = log.to_records()
        if self.logger and hasattr(self.logger, "write_json"):
            self.logger.write_json(records)
        self._write(self.messages_key, json.dumps(records, ensure_ascii=False))

    def _write(self, key: str, value: str) -> None:
        try:
            self.store.set_item(key, value)
        except StoreError as e:
            if self.logger:
                self.logger.error(f"Error saving {key}: {e}")
