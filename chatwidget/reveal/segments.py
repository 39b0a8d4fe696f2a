# reveal/segments.py

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Sequence, Tuple

TEXT = "text"
LINK = "link"

# [label](target); label and target are non-empty runs without their closer
LINK_PATTERN = re.compile(r'\[([^\]]+)\]\(([^)]+)\)')

@dataclass(frozen=True)
class Segment:
    """
    A contiguous piece of message text, either plain text or a markdown link.

    display_start / display_length count the characters the segment shows
    on screen; markdown syntax is never counted.
    """
    kind: str
    source_text: str
    label: str
    display_start: int
    display_length: int
    link_target: Optional[str] = None
    source_start: int = 0


def _text_segment(text: str, source_start: int, display_start: int) -> Segment:
    return Segment(
        kind=TEXT,
        source_text=text,
        label=text,
        display_start=display_start,
        display_length=len(text),
        source_start=source_start,
    )


@lru_cache(maxsize=256)
def parse(raw: str) -> Tuple[Segment, ...]:
    """
    Split raw response text into ordered text and link segments.

    Malformed link syntax is left untouched inside the surrounding text.
    """
    segments = []
    last_index = 0
    display_index = 0

    for match in LINK_PATTERN.finditer(raw):
        if match.start() > last_index:
            segment = _text_segment(raw[last_index:match.start()], last_index, display_index)
            segments.append(segment)
            display_index += segment.display_length

        label, target = match.group(1), match.group(2)
        segments.append(Segment(
            kind=LINK,
            source_text=match.group(0),
            label=label,
            display_start=display_index,
            display_length=len(label),
            link_target=target,
            source_start=match.start(),
        ))
        display_index += len(label)
        last_index = match.end()

    if last_index < len(raw):
        segments.append(_text_segment(raw[last_index:], last_index, display_index))

    return tuple(segments)


def total_display_length(segments: Sequence[Segment]) -> int:
    """Number of characters the segments reveal in total."""
    return sum(segment.display_length for segment in segments)


def strip_links(raw: str) -> str:
    """Return raw text with every markdown link replaced by its label."""
    return LINK_PATTERN.sub(lambda m: m.group(1), raw)
