from __future__ import annotations

from lrc_timetags.lrc.model import PositionIndex, TimeTagMap


def parse_time_tags(items: list[str]) -> TimeTagMap:
    """["[0,start]:17970", "[3,end]:19220"] -> {PositionIndex: ms}"""
    out: TimeTagMap = {}
    for item in items:
        index, _, ms = item.rpartition(":")
        out[PositionIndex.parse(index)] = int(ms)
    return out
