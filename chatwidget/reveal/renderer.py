# reveal/renderer.py

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .segments import LINK, TEXT, Segment, parse, total_display_length

LINK_ICON = "🔗"

@dataclass(frozen=True)
class DisplayUnit:
    """A piece of visible output: plain text or a link affordance with its label so far."""
    kind: str
    text: str
    target: Optional[str] = None
    icon: Optional[str] = None


def render(segments: Sequence[Segment], cursor: int) -> List[DisplayUnit]:
    """
    Compute what is visible when `cursor` characters have been revealed.

    Reveal is strictly left to right. A link's affordance appears in full as
    soon as it is reached; only its label is truncated.
    """
    units = []
    for segment in segments:
        if segment.display_start > cursor:
            break
        visible = min(cursor - segment.display_start, segment.display_length)
        if segment.kind == LINK:
            units.append(DisplayUnit(LINK, segment.label[:visible], segment.link_target, LINK_ICON))
        elif visible > 0:
            units.append(DisplayUnit(TEXT, segment.source_text[:visible]))
    return units


def render_static(text: str) -> List[DisplayUnit]:
    """Render a fully revealed message; identical to the last reveal frame."""
    segments = parse(text)
    return render(segments, total_display_length(segments))


def plain_text(units: Sequence[DisplayUnit]) -> str:
    """Visible characters of the units, without icons or targets."""
    return "".join(unit.text for unit in units)
