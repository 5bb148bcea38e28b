"""Core domain models."""

from srtsub.core.subtitle import Subtitle, SubtitleEntry, shift_subtitles
from srtsub.core.timestamp import Timestamp

__all__ = [
    "Subtitle",
    "SubtitleEntry",
    "Timestamp",
    "shift_subtitles",
]
