# display/style.py

from io import StringIO
from datetime import datetime
from typing import Iterable, Optional, Sequence

from rich.console import Console
from rich.style import Style
from rich.text import Text

from ..reveal import LINK, DisplayUnit

COLORS = {
    'GREEN': 'green3',
    'BLUE': 'blue1',
    'GRAY': 'gray50',
    'WHITE': 'white',
}

class DisplayStyle:
    """Turns display units into ANSI text with Rich."""

    def __init__(self, terminal):
        self.terminal = terminal
        self.styles = {
            'user': Style(color=COLORS['GRAY']),
            'assistant': Style(color=COLORS['GREEN']),
            'link': Style(color=COLORS['BLUE'], underline=True),
            'target': Style(color=COLORS['GRAY'], dim=True),
        }

    def _console(self) -> Console:
        return Console(
            force_terminal=True,
            color_system="truecolor",
            file=StringIO(),
            highlight=False,
            width=self.terminal.width,
        )

    def build_text(self, units: Sequence[DisplayUnit], author: str, prefix: str = "",
                   timestamp: Optional[datetime] = None) -> Text:
        text = Text(prefix, style=self.styles['user'])
        base = self.styles.get(author, Style())
        for unit in units:
            if unit.kind == LINK:
                link_style = self.styles['link'] + Style(link=unit.target)
                if unit.icon:
                    text.append(f"{unit.icon} ", style=link_style)
                text.append(unit.text, style=link_style)
                text.append(f" <{unit.target}>", style=self.styles['target'])
            else:
                text.append(unit.text, style=base)
        if timestamp is not None:
            text.append(f"  {timestamp.astimezone().strftime('%H:%M')}", style=self.styles['target'])
        return text

    def render(self, texts: Iterable[Text]) -> str:
        """Render Rich texts to an ANSI string, one blank line apart."""
        console = self._console()
        with console.capture() as capture:
            for text in texts:
                console.print(text)
                console.print()
        return capture.get()
