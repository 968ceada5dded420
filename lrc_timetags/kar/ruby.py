from __future__ import annotations

import logging
import re

from lrc_timetags.lrc.errors import LrcParseError
from lrc_timetags.lrc.lines import SingleLineParser
from lrc_timetags.lrc.model import KarRuby
from lrc_timetags.lrc.timed_text import timed_text_to_object, to_timed_text
from lrc_timetags.lrc.timetag import TimeTagMode, format_time_tag, has_time_tag, parse_time_tag

logger = logging.getLogger(__name__)

_RUBY_RE = re.compile(r"^@Ruby(\d+)=(.*)$")


def _optional_time(field: str) -> int | None:
    field = field.strip()
    if not field:
        return None
    if not has_time_tag(field, TimeTagMode.LINE):
        logger.debug("Ignoring unreadable ruby time field %r", field)
        return None
    return parse_time_tag(field, TimeTagMode.LINE)


class KarRubyParser(SingleLineParser[KarRuby]):
    """
    @Ruby1=帰,か[00:00.50]え,[00:53.19],[01:24.77]
           parent, ruby (with time tags), start, end
    """

    def can_decode(self, text: str | None) -> bool:
        return bool(text) and _RUBY_RE.match(text.strip()) is not None

    def decode(self, text: str | None) -> KarRuby:
        m = _RUBY_RE.match((text or "").strip())
        if m is None:
            raise LrcParseError(f"Not a ruby line: {text!r}")

        fields = m.group(2).split(",")
        parent = fields[0]
        ruby, time_tags = timed_text_to_object(
            fields[1] if len(fields) > 1 else "", 0, TimeTagMode.LINE
        )
        start_time = _optional_time(fields[2]) if len(fields) > 2 else None
        end_time = _optional_time(fields[3]) if len(fields) > 3 else None

        return KarRuby(
            parent=parent,
            ruby=ruby,
            time_tags=time_tags,
            start_time=start_time,
            end_time=end_time,
        )

    def encode(self, component: KarRuby, index: int = 0) -> str:
        fields = [
            component.parent,
            to_timed_text(component.ruby, component.time_tags, 0, TimeTagMode.LINE),
        ]
        if component.start_time is not None or component.end_time is not None:
            start = component.start_time
            fields.append(format_time_tag(start, TimeTagMode.LINE) if start is not None else "")
        if component.end_time is not None:
            fields.append(format_time_tag(component.end_time, TimeTagMode.LINE))
        return f"@Ruby{index + 1}=" + ",".join(fields)
