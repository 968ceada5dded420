"""Time-tagged lyric codec for LRC/KAR lines."""

from lrc_timetags.lrc.errors import (
    EmbeddedLineTagError,
    InvalidTimestampError,
    LrcParseError,
    MalformedTokenError,
    MissingStartTimeError,
    TimeTagError,
)
from lrc_timetags.lrc.lines import LrcLyricParser
from lrc_timetags.lrc.model import IndexState, KarRuby, LrcDocument, LrcLyric, PositionIndex
from lrc_timetags.lrc.timetag import TimeTagMode, format_time_tag, parse_time_tag

__version__ = "0.1.0"
