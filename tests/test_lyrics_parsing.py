from lrc_timetags.lrc.model import LrcLyric
from lrc_timetags.lrc.parse import parse_lrc, parse_lrc_with_stats
from tests.helper import parse_time_tags

SONG = (
    "[ti:Song]\n"
    "[ar:Someone]\n"
    "[offset:-1500]\n"
    "\n"
    "[00:17.00] <00:00.00>帰<00:01.00>り\n"
    "[00:20.00][00:40.00] chorus\n"
    "plain text\n"
    "@Ruby1=帰,かえ\n"
)


def test_parse_document():
    doc = parse_lrc(SONG)
    assert doc.tags == {"ti": "Song", "ar": "Someone"}
    assert doc.offset_ms == -1500
    assert doc.lyrics == (
        LrcLyric(text="帰り", start_times=(17000,), time_tags=parse_time_tags(["[0,start]:17000", "[1,start]:18000"])),
        LrcLyric(text="chorus", start_times=(20000, 40000)),
        LrcLyric(text="plain text"),
    )
    assert [(r.parent, r.ruby) for r in doc.rubies] == [("帰", "かえ")]


def test_parse_stats():
    _doc, stats = parse_lrc_with_stats(SONG)
    assert stats.lines_total == 8
    assert stats.lines_ignored == 1
    assert stats.lyrics_total == 3
    assert stats.lines_with_start_times == 2
    assert stats.lines_with_word_tags == 1
    assert stats.rubies_total == 1


def test_parse_keeps_line_order():
    doc = parse_lrc("[00:05.00]b\n[00:01.00]a\n")
    assert [ly.text for ly in doc.lyrics] == ["b", "a"]


def test_parse_malformed_line_is_plain_text():
    doc = parse_lrc("[00:17:97]帰 <00:01.00>\n")
    assert doc.lyrics == (LrcLyric(text="[00:17:97]帰 <00:01.00>"),)


def test_parse_positive_offset():
    doc = parse_lrc("[offset:+250]\n[00:01.00]x\n")
    assert doc.offset_ms == 250
    assert doc.lyrics == (LrcLyric(text="x", start_times=(1000,)),)
