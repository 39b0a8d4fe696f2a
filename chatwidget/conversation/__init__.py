# conversation/__init__.py

import asyncio
from typing import Optional

from ..display import RESET_COMMAND
from ..reveal import RevealScheduler
from .actions import ConversationActions, extract_reply
from .history import ConversationHistory, LocalStore
from .messages import ConversationMessages, Message

EXIT_COMMANDS = ("exit", "quit")

class Conversation:
    """
    Coordinates conversation components and runs the terminal chat loop.
    """
    def __init__(self, display, stream, config, logger, clock=None):
        self.display = display
        self.config = config
        self.logger = logger
        self._history = ConversationHistory(
            LocalStore(config.storage_path),
            session_key=config.session_key,
            messages_key=config.messages_key,
            greeting=config.greeting,
            logger=logger,
        )
        self._scheduler = RevealScheduler(clock=clock, delay=config.reveal_delay, logger=logger)
        self.actions = ConversationActions(
            stream, self._history, self._scheduler, config, logger,
            on_update=self._on_update,
        )
        self._idle: Optional[asyncio.Event] = None

    def _on_update(self) -> None:
        self.display.paint(self.actions.messages, self.actions.visible_units)
        if self._idle is not None:
            if self.actions.active_reveal is None:
                self._idle.set()
            else:
                self._idle.clear()

    async def _wait_for_reveal(self) -> None:
        if self.actions.active_reveal is not None:
            await self._idle.wait()

    async def run(self) -> None:
        self._idle = asyncio.Event()
        self._idle.set()
        self.actions.initialize()
        self._on_update()
        try:
            while True:
                user_input = await self.display.terminal.get_user_input()
                command = user_input.strip().lower()
                if command in EXIT_COMMANDS:
                    break
                if command == RESET_COMMAND:
                    self.actions.reset()
                    continue
                if not self.actions.can_submit(user_input):
                    continue

                self.actions.input_buffer = user_input
                loader = self.display.animations.create_dot_loader(
                    self.display.format_prompt(user_input.strip())
                )
                await loader.run_with_loading(self.actions.submit(self.actions.input_buffer))
                await self._wait_for_reveal()
        finally:
            await self.actions.close()

    def start(self) -> None:
        try:
            asyncio.run(self.run())
        except KeyboardInterrupt:
            print("\nExiting...")
        finally:
            self.display.terminal.reset()


__all__ = [
    'Conversation', 'ConversationActions', 'ConversationHistory', 'ConversationMessages',
    'LocalStore', 'Message', 'extract_reply',
]
