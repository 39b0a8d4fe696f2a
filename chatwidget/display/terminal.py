# display/terminal.py

import sys
import shutil
from dataclasses import dataclass

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings

RESET_COMMAND = "/reset"

@dataclass
class TerminalSize:
    """Terminal dimensions."""

    columns: int
    lines: int


class DisplayTerminal:
    """Low-level terminal operations and I/O."""

    def __init__(self):
        """Initialize terminal state and key bindings."""
        self._cursor_visible = True
        self._prompt_prefix = "> "
        kb = KeyBindings()

        @kb.add("c-r")
        def _(event):
            event.app.exit(result=RESET_COMMAND)

        self.prompt_session = PromptSession(key_bindings=kb, complete_while_typing=False)

    def get_size(self) -> TerminalSize:
        size = shutil.get_terminal_size()
        return TerminalSize(columns=size.columns, lines=size.lines)

    @property
    def width(self) -> int:
        return self.get_size().columns

    def _is_terminal(self) -> bool:
        return sys.stdout.isatty()

    def _manage_cursor(self, show: bool) -> None:
        if self._cursor_visible != show and self._is_terminal():
            self._cursor_visible = show
            sys.stdout.write("\033[?25h" if show else "\033[?25l")
            sys.stdout.flush()

    def show_cursor(self) -> None:
        self._manage_cursor(True)

    def hide_cursor(self) -> None:
        self._manage_cursor(False)

    def write(self, text: str = "", newline: bool = False) -> None:
        sys.stdout.write(text)
        if newline:
            sys.stdout.write("\n")
        sys.stdout.flush()

    def clear_screen(self) -> None:
        if self._is_terminal():
            sys.stdout.write("\033[2J\033[H")
            sys.stdout.flush()

    def reset(self) -> None:
        self.show_cursor()
        self.write("\033[0m")

    async def get_user_input(self, default_text: str = "") -> str:
        """Read one line; Ctrl-R returns the reset command."""
        self.show_cursor()
        try:
            return await self.prompt_session.prompt_async(
                FormattedText([("class:prompt", self._prompt_prefix)]),
                default=default_text,
            )
        finally:
            self.hide_cursor()
