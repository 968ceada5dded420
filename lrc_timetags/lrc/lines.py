from __future__ import annotations

import logging
from typing import Generic, TypeVar

from .model import LrcLyric
from .start_time import join_lyric_and_time_tag, split_lyric_and_time_tag
from .timed_text import timed_text_to_object, to_timed_text

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SingleLineParser(Generic[T]):
    def can_decode(self, text: str | None) -> bool:
        raise NotImplementedError

    def decode(self, text: str | None) -> T:
        raise NotImplementedError

    def encode(self, component: T, index: int = 0) -> str:
        raise NotImplementedError


class LrcLyricParser(SingleLineParser[LrcLyric]):
    def can_decode(self, text: str | None) -> bool:
        return bool(text and text.strip())

    def decode(self, text: str | None) -> LrcLyric:
        start_times, raw_lyric = split_lyric_and_time_tag(text)

        # Word tags are relative to the line start. With no start time, or with
        # several (a repeated chorus), there is no single anchor to resolve them
        # against, so the line is kept as-is.
        if len(start_times) != 1:
            if len(start_times) > 1:
                logger.debug("Ignoring word time tags on line with %d start times", len(start_times))
            return LrcLyric(text=raw_lyric, start_times=tuple(start_times), time_tags={})

        lyric, time_tags = timed_text_to_object(raw_lyric, start_times[0])
        return LrcLyric(text=lyric, start_times=tuple(start_times), time_tags=time_tags)

    def encode(self, component: LrcLyric, index: int = 0) -> str:
        line_start = component.start_times[0] if len(component.start_times) == 1 else 0
        lyric = to_timed_text(component.text, component.time_tags, line_start)
        return join_lyric_and_time_tag(component.start_times, lyric)
