import pytest

from lrc_timetags.lrc.errors import EmbeddedLineTagError, MissingStartTimeError
from lrc_timetags.lrc.start_time import join_lyric_and_time_tag, split_lyric_and_time_tag


@pytest.mark.parametrize(
    "line, expected_times, expected_text",
    [
        ("[1:00.00] ", [60000], ""),
        ("[1:00.00][1:02.00] Lyric", [60000, 62000], "Lyric"),
        ("[1:00.00] [1:02.00] Lyric", [60000, 62000], "Lyric"),
        ("[1:00.00][1:00.00] Lyric", [60000, 60000], "Lyric"),  # duplicates kept
        ("[1:00.00]Lyric", [60000], "Lyric"),
        ("[1:00.00]   Lyric", [60000], "Lyric"),
        ("[1:00.00] <00:00.04> Lyric <00:00.16>", [60000], "<00:00.04> Lyric <00:00.16>"),
        ("[1:00.00] <00:00.04> Lyric  ", [60000], "<00:00.04> Lyric"),
        ("  [1:00.00] Lyric", [60000], "Lyric"),
    ],
)
def test_split_with_start_times(line, expected_times, expected_text):
    assert split_lyric_and_time_tag(line) == (expected_times, expected_text)


@pytest.mark.parametrize(
    "line, expected_text",
    [
        ("Lyric", "Lyric"),
        ("   Lyric", "Lyric"),
        ("<00:00.04> Lyric <00:00.16>", "<00:00.04> Lyric <00:00.16>"),
        ("Lyric [00:01.00]", "Lyric [00:01.00]"),  # only leading tags count
        ("[00:17:97] Lyric", "[00:17:97] Lyric"),
    ],
)
def test_split_without_start_times(line, expected_text):
    assert split_lyric_and_time_tag(line) == ([], expected_text)


@pytest.mark.parametrize("line", ["", "   ", None])
def test_split_blank(line):
    assert split_lyric_and_time_tag(line) == ([], "")


@pytest.mark.parametrize(
    "times, text, expected",
    [
        ([60000], "Lyric", "[01:00.00] Lyric"),
        ([60000, 62000], "Lyric", "[01:00.00][01:02.00] Lyric"),
        ([60000], "<00:00.04> Lyric <00:00.16>", "[01:00.00] <00:00.04> Lyric <00:00.16>"),
        ([60000], "  Lyric", "[01:00.00] Lyric"),
    ],
)
def test_join(times, text, expected):
    assert join_lyric_and_time_tag(times, text) == expected


def test_join_without_start_times_raises():
    with pytest.raises(MissingStartTimeError):
        join_lyric_and_time_tag([], "Lyric")


def test_join_with_embedded_line_tag_raises():
    with pytest.raises(EmbeddedLineTagError):
        join_lyric_and_time_tag([1000], "[00:00.00] Lyric")


@pytest.mark.parametrize(
    "times, text",
    [
        ([0], "Lyric"),
        ([60000, 62000, 62000], "<00:00.04> Lyric"),
        ([6_000_000], ""),
    ],
)
def test_split_after_join_gives_back_start_times(times, text):
    assert split_lyric_and_time_tag(join_lyric_and_time_tag(times, text)) == (times, text)
