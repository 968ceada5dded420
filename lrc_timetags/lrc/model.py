from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Iterable


class IndexState(enum.IntEnum):
    # START sorts before END at the same offset
    START = 0
    END = 1


_INDEX_RE = re.compile(r"^\[(\d+),(start|end)\]$", re.IGNORECASE)


@dataclass(frozen=True, slots=True, order=True)
class PositionIndex:
    """
    Zero-width point in a text.

    START at k: timing begins at character k.
    END at k: timing ends right after character k.
    """

    offset: int
    state: IndexState = IndexState.START

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"offset should be >= 0, got {self.offset}")

    def to_insertion_offset(self) -> int:
        return self.offset if self.state is IndexState.START else self.offset + 1

    def __str__(self) -> str:
        return f"[{self.offset},{self.state.name.lower()}]"

    @classmethod
    def parse(cls, s: str) -> "PositionIndex":
        m = _INDEX_RE.match(s.strip())
        if not m:
            raise ValueError(f"Invalid position index: {s!r}")
        return cls(int(m.group(1)), IndexState[m.group(2).upper()])


TimeTagMap = dict[PositionIndex, int]


def sorted_time_tags(items: Iterable[tuple[PositionIndex, int]]) -> TimeTagMap:
    """Build a key-ordered map; the first value written for a key wins."""
    out: TimeTagMap = {}
    for k, v in items:
        out.setdefault(k, v)
    return dict(sorted(out.items()))


@dataclass(frozen=True, slots=True)
class LrcLyric:
    text: str
    start_times: tuple[int, ...] = ()
    time_tags: TimeTagMap = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class KarRuby:
    parent: str
    ruby: str
    time_tags: TimeTagMap = field(default_factory=dict)
    start_time: int | None = None
    end_time: int | None = None


@dataclass(frozen=True, slots=True)
class LrcDocument:
    lyrics: tuple[LrcLyric, ...]
    rubies: tuple[KarRuby, ...] = ()
    offset_ms: int = 0
    tags: dict[str, str] | None = None
