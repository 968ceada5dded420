from __future__ import annotations

from .errors import EmbeddedLineTagError, MissingStartTimeError
from .timetag import TimeTagMode, format_time_tag, has_time_tag, match_to_ms, time_tag_regex


def split_lyric_and_time_tag(line: str | None) -> tuple[list[int], str]:
    """
    "[01:00.00][01:02.00] Lyric" -> ([60000, 62000], "Lyric")

    Only leading tags are taken, adjacent or separated by whitespace.
    A line without them is returned trimmed with no start times.
    """
    if not line or not line.strip():
        return [], ""

    regex = time_tag_regex(TimeTagMode.LINE)
    start_times: list[int] = []
    pos = len(line) - len(line.lstrip())
    while True:
        m = regex.match(line, pos)
        if m is None:
            break
        start_times.append(match_to_ms(m))
        pos = m.end()
        while pos < len(line) and line[pos].isspace():
            pos += 1
    return start_times, line[pos:].strip()


def join_lyric_and_time_tag(start_times: list[int] | tuple[int, ...], text: str) -> str:
    """
    ([60000, 66000], "When the truth is found to be lies")
      -> "[01:00.00][01:06.00] When the truth is found to be lies"
    """
    if not start_times:
        raise MissingStartTimeError("Missing one or more start times")
    if has_time_tag(text, TimeTagMode.LINE):
        raise EmbeddedLineTagError(f"Lyric should not contain line time tags: {text!r}")

    prefix = "".join(format_time_tag(t, TimeTagMode.LINE) for t in start_times)
    return f"{prefix} {text.strip()}"
