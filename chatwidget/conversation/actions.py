# conversation/actions.py

from typing import Any, Callable, List, Optional, Sequence

from ..errors import ResponderError
from ..reveal import TEXT, DisplayUnit, RevealScheduler, parse, render, render_static
from .history import ConversationHistory
from .messages import (ASSISTANT, PENDING, REVEALED, REVEALING, USER,
                       ConversationMessages, Message)

def extract_reply(payload: Any, fields: Sequence[str], fallback: str) -> str:
    """
    Pull the reply text out of a responder payload.

    The first truthy field wins; a bare string payload is the reply itself.
    """
    if isinstance(payload, dict):
        for name in fields:
            value = payload.get(name)
            if value:
                return value if isinstance(value, str) else str(value)
    if isinstance(payload, str):
        return payload
    return fallback


class ConversationActions:
    """
    Owns the message log and drives one request and one reveal at a time.

    Assistant messages move none -> pending -> revealing -> revealed; user
    messages stay at none. Every change to the log is persisted right away.
    """

    def __init__(self, stream, history: ConversationHistory, scheduler: RevealScheduler,
                 config, logger, on_update: Optional[Callable[[], None]] = None):
        self.stream = stream
        self.history = history
        self.scheduler = scheduler
        self.config = config
        self.logger = logger
        self.on_update = on_update

        self.session_id: Optional[str] = None
        self.messages = ConversationMessages()
        self.active_reveal: Optional[str] = None
        self.is_pending = False
        self.input_buffer = ""

    def initialize(self) -> None:
        """Load the session id and the stored log."""
        self.session_id = self.history.load_session_id()
        self.messages = self.history.load_messages()
        self.logger.debug(f"Session {self.session_id} with {len(self.messages)} messages")

    def can_submit(self, text: str) -> bool:
        return bool(text and text.strip()) and not self.is_pending

    async def submit(self, text: str) -> bool:
        """
        Send one user turn and install the reply for revealing.

        Returns False, changing nothing, for blank input or while a request
        is already in flight.
        """
        if not self.can_submit(text):
            self.logger.debug("Submit ignored: blank input or request pending")
            return False

        self.messages.add_message(USER, text)
        self._persist()
        self.input_buffer = ""
        self.is_pending = True
        self._notify()

        try:
            self.logger.debug(f"Sending message with session {self.session_id}")
            payload = await self.stream.send(text, self.session_id)
            reply = extract_reply(payload, self.config.reply_fields, self.config.fallback_reply)
        except ResponderError as e:
            self.logger.error(f"Responder error: {e}")
            reply = self.config.error_reply
        except Exception as e:
            self.logger.error(f"Message processing error: {e}", exc_info=True)
            reply = self.config.error_reply
        finally:
            self.is_pending = False

        self._add_reply(reply)
        return True

    def _add_reply(self, text: str) -> Message:
        message = self.messages.add_message(ASSISTANT, text, reveal_state=PENDING)
        self._persist()
        self._begin_reveal(message)
        return message

    def _begin_reveal(self, message: Message) -> None:
        if self.active_reveal and self.active_reveal != message.id:
            superseded = self.messages.get(self.active_reveal)
            if superseded and superseded.reveal_state == REVEALING:
                self.logger.debug(f"Finishing superseded reveal {superseded.id}")
                superseded.reveal_state = REVEALED

        self.active_reveal = message.id
        message.reveal_state = REVEALING
        self._persist()
        self._notify()
        self.scheduler.bind(
            parse(message.text),
            on_complete=lambda: self._on_reveal_complete(message.id),
            on_tick=self._on_tick,
        )

    def _on_tick(self, cursor: int) -> None:
        self._notify()

    def _on_reveal_complete(self, message_id: str) -> None:
        message = self.messages.get(message_id)
        if message is None or message.reveal_state != REVEALING:
            return
        message.reveal_state = REVEALED
        if self.active_reveal == message_id:
            self.active_reveal = None
        self._persist()
        self._notify()

    def visible_units(self, message: Message) -> List[DisplayUnit]:
        """Units to paint for a message at this moment."""
        if message.is_user:
            return [DisplayUnit(TEXT, message.text)]
        if message.id == self.active_reveal and self.scheduler.bound:
            return render(self.scheduler.segments, self.scheduler.cursor)
        if message.reveal_state == PENDING:
            return []
        return render_static(message.text)

    def reset(self) -> None:
        """Start over with only the greeting; the session id is kept."""
        self.scheduler.unbind()
        self.active_reveal = None
        self.messages = self.history.greeting_log()
        self._persist()
        self._notify()

    async def close(self) -> None:
        self.scheduler.unbind()
        await self.stream.close()

    def _persist(self) -> None:
        self.history.save_messages(self.messages)

    def _notify(self) -> None:
        if self.on_update:
            self.on_update()
