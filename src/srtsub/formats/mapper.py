"""Map SRT grammar fragments onto subtitle domain models."""

from __future__ import annotations

from srtsub.core.subtitle import Subtitle, SubtitleEntry
from srtsub.core.timestamp import Timestamp
from srtsub.errors import MissingComponentError, NumericConversionError
from srtsub.grammar.fragments import Fragment, FragmentKind

# Widest value an index or timestamp field may hold (unsigned 32-bit).
MAX_INDEX = 2**32 - 1


def map_file(fragment: Fragment) -> Subtitle:
    """Build a Subtitle from a ``subtitle_file`` fragment.

    Raises:
        MissingComponentError: If a block lacks an expected part
        NumericConversionError: If an index or field is too large
        ValueError: If the fragment is not a subtitle_file
    """
    _expect(fragment, FragmentKind.SUBTITLE_FILE)
    entries = []
    for child in fragment:
        match child.kind:
            case FragmentKind.SUBTITLE_BLOCK:
                entries.append(map_block(child))
            case _:
                raise ValueError(f"Unexpected {child.kind} fragment in subtitle_file")
    return Subtitle(entries=entries)


def map_block(fragment: Fragment) -> SubtitleEntry:
    """Build a SubtitleEntry from a ``subtitle_block`` fragment."""
    _expect(fragment, FragmentKind.SUBTITLE_BLOCK)
    index: int | None = None
    timecode: tuple[Timestamp, Timestamp] | None = None
    text: str | None = None

    for child in fragment:
        match child.kind:
            case FragmentKind.INDEX:
                index = _to_uint(child, "index")
            case FragmentKind.TIMECODE:
                timecode = map_timecode(child)
            case FragmentKind.TEXT_CONTENT:
                text = map_text(child)
            case _:
                raise ValueError(f"Unexpected {child.kind} fragment in subtitle_block")

    if index is None:
        raise MissingComponentError("index")
    if timecode is None:
        raise MissingComponentError("timecode")
    if text is None:
        raise MissingComponentError("text content")

    start, end = timecode
    return SubtitleEntry(index=index, start=start, end=end, text=text)


def map_timecode(fragment: Fragment) -> tuple[Timestamp, Timestamp]:
    """Return the (start, end) pair of a ``timecode`` fragment."""
    _expect(fragment, FragmentKind.TIMECODE)
    stamps = fragment.find_all(FragmentKind.TIMESTAMP)
    if not stamps:
        raise MissingComponentError("start timestamp")
    if len(stamps) < 2:
        raise MissingComponentError("end timestamp")
    return map_timestamp(stamps[0]), map_timestamp(stamps[1])


def map_timestamp(fragment: Fragment) -> Timestamp:
    """Build a Timestamp from a ``timestamp`` fragment."""
    _expect(fragment, FragmentKind.TIMESTAMP)
    fields: dict[str, int] = {}
    for kind in (
        FragmentKind.HOURS,
        FragmentKind.MINUTES,
        FragmentKind.SECONDS,
        FragmentKind.MILLISECONDS,
    ):
        part = fragment.find(kind)
        if part is None:
            raise MissingComponentError(str(kind))
        fields[str(kind)] = _to_uint(part, str(kind))
    return Timestamp(**fields)


def map_text(fragment: Fragment) -> str:
    """Join the ``text_line`` fragments of a ``text_content`` with newlines."""
    _expect(fragment, FragmentKind.TEXT_CONTENT)
    lines = fragment.find_all(FragmentKind.TEXT_LINE)
    if not lines:
        raise MissingComponentError("text line")
    return "\n".join(line.text for line in lines)


def _to_uint(fragment: Fragment, field: str) -> int:
    try:
        value = int(fragment.text)
    except ValueError as e:
        # Digit strings past the interpreter's int conversion limit.
        raise NumericConversionError(field, fragment.text[:32]) from e
    if value > MAX_INDEX:
        raise NumericConversionError(field, fragment.text)
    return value


def _expect(fragment: Fragment, kind: FragmentKind) -> None:
    if fragment.kind is not kind:
        raise ValueError(f"Expected {kind} fragment, got {fragment.kind}")
