import pytest

from lrc_timetags.kar.ruby import KarRubyParser
from lrc_timetags.lrc.errors import LrcParseError
from lrc_timetags.lrc.model import KarRuby
from tests.helper import parse_time_tags


@pytest.fixture
def parser():
    return KarRubyParser()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("@Ruby1=帰,かえ", True),
        ("", False),
        (None, False),
        ("[00:17.97]帰[00:18.37]り", False),
        ("karaoke", False),
    ],
)
def test_can_decode(parser, text, expected):
    assert parser.can_decode(text) is expected


@pytest.mark.parametrize(
    "line, ruby, tags, start_time, end_time",
    [
        ("@Ruby1=帰,かえ,[00:53.19],[01:24.77]", "かえ", [], 53190, 84770),
        ("@Ruby1=帰,かえ,[01:24.77]", "かえ", [], 84770, None),
        ("@Ruby1=帰,かえ,,[01:24.77]", "かえ", [], None, 84770),
        ("@Ruby1=帰,かえ", "かえ", [], None, None),
        ("@Ruby1=帰,か[00:00.50]え", "かえ", ["[1,start]:500"], None, None),
        ("@Ruby2=帰,かえ,[00:53:19]", "かえ", [], None, None),  # unreadable time is dropped
    ],
)
def test_decode(parser, line, ruby, tags, start_time, end_time):
    assert parser.decode(line) == KarRuby(
        parent="帰",
        ruby=ruby,
        time_tags=parse_time_tags(tags),
        start_time=start_time,
        end_time=end_time,
    )


def test_decode_not_a_ruby_line(parser):
    with pytest.raises(LrcParseError):
        parser.decode("karaoke")


@pytest.mark.parametrize(
    "tags, start_time, end_time, expected",
    [
        ([], 53190, 84770, "@Ruby1=帰,かえ,[00:53.19],[01:24.77]"),
        ([], 84770, None, "@Ruby1=帰,かえ,[01:24.77]"),
        ([], None, 84770, "@Ruby1=帰,かえ,,[01:24.77]"),
        ([], None, None, "@Ruby1=帰,かえ"),
        (["[1,start]:500"], None, None, "@Ruby1=帰,か[00:00.50]え"),
    ],
)
def test_encode(parser, tags, start_time, end_time, expected):
    ruby = KarRuby(
        parent="帰",
        ruby="かえ",
        time_tags=parse_time_tags(tags),
        start_time=start_time,
        end_time=end_time,
    )
    assert parser.encode(ruby) == expected


def test_encode_uses_index(parser):
    assert parser.encode(KarRuby(parent="道", ruby="みち"), index=2) == "@Ruby3=道,みち"
