from __future__ import annotations

import enum
import re
from functools import lru_cache

from .errors import InvalidTimestampError, MalformedTokenError


class TimeTagMode(enum.Enum):
    LINE = "line"  # [mm:ss.xx]
    WORD = "word"  # <mm:ss.xx>

    @property
    def brackets(self) -> tuple[str, str]:
        return ("[", "]") if self is TimeTagMode.LINE else ("<", ">")


_PATTERNS = {
    TimeTagMode.LINE: r"\[(\d+):(\d{2})\.(\d{2,3})\]",
    TimeTagMode.WORD: r"\<(\d+):(\d{2})\.(\d{2,3})\>",
}


@lru_cache(maxsize=None)
def time_tag_regex(mode: TimeTagMode) -> re.Pattern[str]:
    return re.compile(_PATTERNS[mode])


def match_to_ms(m: re.Match[str]) -> int:
    minutes, seconds, frac = m.group(1), m.group(2), m.group(3)
    # "50" -> 500ms, "567" -> 567ms
    millis = int(frac) if len(frac) > 2 else int(frac) * 10
    return (int(minutes) * 60 + int(seconds)) * 1000 + millis


def parse_time_tag(token: str, mode: TimeTagMode) -> int:
    """
    Convert a time tag such as [01:00.00] or <01:00.000> to milliseconds.

    The first tag of the given mode wins if the string holds several.
    """
    m = time_tag_regex(mode).search(token or "")
    if m is None:
        opening, closing = mode.brackets
        raise MalformedTokenError(
            f"Invalid time tag format. Expected {opening}01:00.00{closing} but got {token!r}"
        )
    return match_to_ms(m)


def format_time_tag(ms: int, mode: TimeTagMode) -> str:
    if ms < 0:
        raise InvalidTimestampError(f"milliseconds should be >= 0, got {ms}")
    m, rem = divmod(ms, 60_000)
    s, ms2 = divmod(rem, 1_000)
    opening, closing = mode.brackets
    # always 2 decimals
    return f"{opening}{m:02d}:{s:02d}.{ms2 // 10:02d}{closing}"


def has_time_tag(text: str | None, mode: TimeTagMode) -> bool:
    if not text:
        return False
    return time_tag_regex(mode).search(text) is not None
