# reveal/__init__.py

from .clock import LoopClock, ManualClock
from .renderer import DisplayUnit, plain_text, render, render_static
from .scheduler import RevealScheduler
from .segments import LINK, TEXT, Segment, parse, strip_links, total_display_length

__all__ = [
    'LINK', 'TEXT', 'Segment', 'parse', 'strip_links', 'total_display_length',
    'RevealScheduler', 'LoopClock', 'ManualClock',
    'DisplayUnit', 'render', 'render_static', 'plain_text',
]
