"""Strict SubRip (SRT) subtitle parsing, rendering and round-tripping."""

from srtsub.core.subtitle import Subtitle, SubtitleEntry
from srtsub.core.subtitle import shift_subtitles as shift
from srtsub.core.timestamp import Timestamp
from srtsub.errors import (
    GrammarError,
    InterchangeFormatError,
    MissingComponentError,
    NumericConversionError,
    SubtitleError,
    TimestampRangeError,
)
from srtsub.formats.interchange import deserialize, serialize
from srtsub.formats.srt import parse_srt as parse
from srtsub.formats.srt import render_srt

__all__ = [
    "GrammarError",
    "InterchangeFormatError",
    "MissingComponentError",
    "NumericConversionError",
    "Subtitle",
    "SubtitleEntry",
    "SubtitleError",
    "Timestamp",
    "TimestampRangeError",
    "deserialize",
    "parse",
    "render_srt",
    "serialize",
    "shift",
]
