from __future__ import annotations

from dataclasses import dataclass
import logging
import re

from lrc_timetags.kar.ruby import KarRubyParser

from .lines import LrcLyricParser
from .model import KarRuby, LrcDocument, LrcLyric
from .timetag import TimeTagMode, has_time_tag

logger = logging.getLogger(__name__)

_OFFSET_RE = re.compile(r"^\[offset:([+-]?\d+)\]\s*$", re.IGNORECASE)
_TAG_RE = re.compile(r"^\[([a-zA-Z]{1,8}):(.*)\]\s*$")

_LYRIC_PARSER = LrcLyricParser()
_RUBY_PARSER = KarRubyParser()


@dataclass(frozen=True, slots=True)
class LrcParseStats:
    lines_total: int
    lyrics_total: int
    lines_with_start_times: int
    lines_with_word_tags: int
    rubies_total: int
    lines_ignored: int


def parse_lrc(text: str) -> LrcDocument:
    """
    Supported:
    - [mm:ss.xx] / [mm:ss.xxx] start times, several per line
    - <mm:ss.xx> word time tags, relative to the line's start time
    - [offset:+/-ms] (kept on the document, not applied)
    - basic tags: [ar:], [ti:], [al:], ...
    - @RubyN=parent,ruby[,start][,end]

    Lines keep their source order.
    """
    doc, _stats = parse_lrc_with_stats(text)
    return doc


def parse_lrc_with_stats(text: str) -> tuple[LrcDocument, LrcParseStats]:
    offset_ms = 0
    tags: dict[str, str] = {}
    lyrics: list[LrcLyric] = []
    rubies: list[KarRuby] = []

    total = 0
    ignored = 0

    for line in text.splitlines():
        total += 1
        if not _LYRIC_PARSER.can_decode(line):
            ignored += 1
            continue

        off = _OFFSET_RE.match(line)
        if off:
            offset_ms = int(off.group(1))
            continue

        tag = _TAG_RE.match(line)
        if tag and not has_time_tag(line, TimeTagMode.LINE):
            k = tag.group(1).strip().lower()
            v = tag.group(2).strip()
            if k and v:
                tags[k] = v
            continue

        if _RUBY_PARSER.can_decode(line):
            rubies.append(_RUBY_PARSER.decode(line))
            continue

        lyrics.append(_LYRIC_PARSER.decode(line))

    doc = LrcDocument(lyrics=tuple(lyrics), rubies=tuple(rubies), offset_ms=offset_ms, tags=tags)
    stats = LrcParseStats(
        lines_total=total,
        lyrics_total=len(doc.lyrics),
        lines_with_start_times=sum(1 for ly in doc.lyrics if ly.start_times),
        lines_with_word_tags=sum(1 for ly in doc.lyrics if ly.time_tags),
        rubies_total=len(doc.rubies),
        lines_ignored=ignored,
    )
    logger.debug("Parsed %d lines: %s", total, stats)
    return doc, stats
