# display/__init__.py

from .terminal import DisplayTerminal, RESET_COMMAND
from .style import DisplayStyle
from .animations import DisplayAnimations

class Display:
    """
    Coordinates terminal display components.

    DisplayTerminal (base) → DisplayStyle → DisplayAnimations
    """
    def __init__(self):
        """Initialize components in dependency order."""
        self.terminal = DisplayTerminal()
        self.style = DisplayStyle(terminal=self.terminal)
        self.animations = DisplayAnimations(terminal=self.terminal)

    def format_prompt(self, text: str) -> str:
        """Format a sent message as the loader prompt."""
        end_char = text[-1] if text.endswith(('?', '!')) else '.'
        return f"> {text.rstrip('?.!')}{end_char * 3}"

    def paint(self, messages, units_for) -> None:
        """Repaint the whole transcript; `units_for(message)` gives its visible units."""
        texts = [
            self.style.build_text(units_for(m), m.author, "> " if m.is_user else "", m.created_at)
            for m in messages
        ]
        self.terminal.hide_cursor()
        self.terminal.clear_screen()
        self.terminal.write(self.style.render(texts))


__all__ = ['Display', 'RESET_COMMAND']
