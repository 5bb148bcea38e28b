"""Subtitle format handlers."""

from srtsub.formats.interchange import deserialize, serialize
from srtsub.formats.srt import parse_srt, render_srt

__all__ = [
    "deserialize",
    "parse_srt",
    "render_srt",
    "serialize",
]
