from __future__ import annotations

import json
import logging

from lrc_timetags.kar.ruby import KarRubyParser

from .lines import LrcLyricParser
from .model import LrcDocument, LrcLyric
from .timetag import TimeTagMode, format_time_tag, has_time_tag

logger = logging.getLogger(__name__)

_LYRIC_PARSER = LrcLyricParser()
_RUBY_PARSER = KarRubyParser()


def lyric_to_dict(lyric: LrcLyric) -> dict:
    return {
        "start_times": list(lyric.start_times),
        "text": lyric.text,
        "time_tags": [{"index": str(k), "time_ms": v} for k, v in sorted(lyric.time_tags.items())],
    }


def export_json(doc: LrcDocument) -> str:
    return json.dumps(
        {
            "offset_ms": doc.offset_ms,
            "tags": doc.tags or {},
            "lyrics": [lyric_to_dict(ly) for ly in doc.lyrics],
            "rubies": [
                {
                    "parent": r.parent,
                    "ruby": r.ruby,
                    "start_time": r.start_time,
                    "end_time": r.end_time,
                    "time_tags": [{"index": str(k), "time_ms": v} for k, v in sorted(r.time_tags.items())],
                }
                for r in doc.rubies
            ],
        },
        ensure_ascii=False,
        indent=2,
    )


def export_lrc(doc: LrcDocument, include_tags: bool = True, include_offset: bool = True) -> str:
    out: list[str] = []
    if include_tags and doc.tags:
        for k in sorted(doc.tags.keys()):
            out.append(f"[{k}:{doc.tags[k]}]")
    if include_offset and doc.offset_ms:
        out.append(f"[offset:{doc.offset_ms}]")

    for i, lyric in enumerate(doc.lyrics):
        if not lyric.start_times:
            # untimed line, word tags (if any) were never interpreted
            logger.debug("Writing untimed line %d as plain text", i)
            out.append(lyric.text)
            continue
        if has_time_tag(lyric.text, TimeTagMode.LINE):
            # hand-edited line with inline line tags, keep it as written
            logger.debug("Writing line %d with inline line tags as-is", i)
            starts = "".join(format_time_tag(t, TimeTagMode.LINE) for t in lyric.start_times)
            out.append(f"{starts} {lyric.text}")
            continue
        out.append(_LYRIC_PARSER.encode(lyric, i))

    for i, ruby in enumerate(doc.rubies):
        out.append(_RUBY_PARSER.encode(ruby, i))
    return "\n".join(out) + ("\n" if out else "")


def _fmt_srt_time(ms: int) -> str:
    # HH:MM:SS,mmm
    h, rem = divmod(ms, 3_600_000)
    m, rem = divmod(rem, 60_000)
    s, ms2 = divmod(rem, 1_000)
    return f"{h:02d}:{m:02d}:{s:02d},{ms2:03d}"


def export_srt(doc: LrcDocument, last_line_duration_ms: int = 2000) -> str:
    """
    One cue per start time, ordered by time; offset applied, clamped at 0.
    End time is next start time, last line ends at +last_line_duration_ms.
    """
    ev = sorted(
        (max(t + doc.offset_ms, 0), ly.text)
        for ly in doc.lyrics
        for t in ly.start_times
    )
    if not ev:
        return ""
    out: list[str] = []
    for i, (start, text) in enumerate(ev, start=1):
        if i < len(ev):
            end = max(ev[i][0], start + 1)
        else:
            end = start + last_line_duration_ms
        out.append(str(i))
        out.append(f"{_fmt_srt_time(start)} --> {_fmt_srt_time(end)}")
        out.append(text or "")
        out.append("")
    return "\n".join(out)
