from __future__ import annotations

import logging

from .model import IndexState, PositionIndex, TimeTagMap, sorted_time_tags
from .timetag import TimeTagMode, format_time_tag, match_to_ms, time_tag_regex

logger = logging.getLogger(__name__)


def timed_text_to_object(
    timed_text: str | None,
    line_start_time: int = 0,
    mode: TimeTagMode = TimeTagMode.WORD,
) -> tuple[str, TimeTagMap]:
    """
    Split text with inline time tags into plain text and a position -> ms map.

    Tag values are offsets from ``line_start_time``. A tag followed by text
    opens a START on that text; a tag followed by whitespace or the end of the
    line closes the open START with an END on the last emitted character.
    Segments are trimmed and joined with at most one space.

    "<00:00.04> Lyric <00:00.16>" with start 60000
      -> ("Lyric", {[0,start]: 60040, [4,end]: 60160})
    """
    if not timed_text:
        return "", {}

    matches = list(time_tag_regex(mode).finditer(timed_text))
    if not matches:
        return timed_text, {}

    # segments[i] is the text before matches[i]; the last one is the tail
    bounds = [0] + [m.end() for m in matches]
    segments = [timed_text[b : m.start()] for b, m in zip(bounds, matches)]
    segments.append(timed_text[matches[-1].end() :])

    parts: list[str] = []
    length = 0
    need_space = False

    def emit(segment: str) -> int:
        nonlocal length, need_space
        if length and (need_space or segment[0].isspace()):
            parts.append(" ")
            length += 1
        start = length
        body = segment.strip()
        parts.append(body)
        length += len(body)
        need_space = segment[-1].isspace()
        return start

    tags: list[tuple[PositionIndex, int]] = []
    pending_start = False
    stacked: int | None = None

    # untimed text before the first tag
    if segments[0].strip():
        emit(segments[0])

    last = len(matches) - 1
    for i, m in enumerate(matches):
        time = line_start_time + match_to_ms(m)
        following = segments[i + 1]

        if following.strip():
            offset = emit(following)
            tags.append((PositionIndex(offset, IndexState.START), time if stacked is None else stacked))
            stacked = None
            pending_start = True
        elif following or i == last:
            # whitespace gap or end of line
            if following:
                need_space = True
            if pending_start:
                tags.append((PositionIndex(length - 1, IndexState.END), time))
                pending_start = False
            else:
                logger.debug("Dropping time tag %s with nothing to close", m.group(0))
            stacked = None
        elif pending_start:
            # adjacent tag follows
            tags.append((PositionIndex(length - 1, IndexState.END), time))
            pending_start = False
        elif stacked is None:
            stacked = time

    time_tags = sorted_time_tags(tags)
    if len(time_tags) != len(tags):
        logger.debug("Dropped %d duplicated time tag position(s)", len(tags) - len(time_tags))
    return "".join(parts), time_tags


def to_timed_text(
    text: str,
    time_tags: TimeTagMap,
    line_start_time: int = 0,
    mode: TimeTagMode = TimeTagMode.WORD,
) -> str:
    """Inverse of timed_text_to_object: splice formatted tags back into text."""
    out: list[str] = []
    cursor = 0
    for index, time in sorted(time_tags.items()):
        gap = index.to_insertion_offset()
        out.append(text[cursor:gap])
        out.append(format_time_tag(time - line_start_time, mode))
        cursor = max(cursor, gap)
    out.append(text[cursor:])
    return "".join(out)
