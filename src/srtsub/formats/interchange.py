"""JSON interchange format for lossless persistence of subtitles."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from srtsub.core.subtitle import Subtitle, SubtitleEntry
from srtsub.core.timestamp import Timestamp
from srtsub.errors import InterchangeFormatError
from srtsub.formats.mapper import MAX_INDEX
from srtsub.utils.config import get_settings
from srtsub.utils.logging import get_logger

logger = get_logger(__name__)

UInt = Annotated[int, Field(ge=0, le=MAX_INDEX)]


class TimestampSchema(BaseModel):
    """Serialized timestamp fields."""

    model_config = ConfigDict(strict=True, extra="forbid")

    hours: UInt
    minutes: UInt
    seconds: UInt
    milliseconds: UInt

    @classmethod
    def from_timestamp(cls, timestamp: Timestamp) -> TimestampSchema:
        return cls(
            hours=timestamp.hours,
            minutes=timestamp.minutes,
            seconds=timestamp.seconds,
            milliseconds=timestamp.milliseconds,
        )

    def to_timestamp(self) -> Timestamp:
        return Timestamp(
            hours=self.hours,
            minutes=self.minutes,
            seconds=self.seconds,
            milliseconds=self.milliseconds,
        )


class SubtitleSchema(BaseModel):
    """Serialized subtitle entry."""

    model_config = ConfigDict(strict=True, extra="forbid")

    index: UInt
    start: TimestampSchema
    end: TimestampSchema
    text: str


class SubtitleFileSchema(BaseModel):
    """Serialized subtitle collection."""

    model_config = ConfigDict(strict=True, extra="forbid")

    subtitles: list[SubtitleSchema]


def serialize(subtitle: Subtitle, *, indent: int | None = None) -> str:
    """Serialize a Subtitle to pretty-printed interchange JSON.

    Args:
        subtitle: Subtitle to serialize
        indent: JSON indent width; defaults to the ``interchange_indent`` setting

    Returns:
        JSON text with ``subtitles`` in collection order

    Raises:
        InterchangeFormatError: If a value cannot be represented
    """
    if indent is None:
        indent = get_settings().interchange_indent

    try:
        document = SubtitleFileSchema(
            subtitles=[
                SubtitleSchema(
                    index=entry.index,
                    start=TimestampSchema.from_timestamp(entry.start),
                    end=TimestampSchema.from_timestamp(entry.end),
                    text=entry.text,
                )
                for entry in subtitle
            ]
        )
    except ValidationError as e:
        raise InterchangeFormatError(
            "Subtitle cannot be represented in interchange format", detail=str(e)
        ) from e

    return document.model_dump_json(indent=indent)


def deserialize(content: str) -> Subtitle:
    """Rebuild a Subtitle from interchange JSON.

    Args:
        content: JSON text produced by ``serialize``

    Returns:
        Subtitle with entries in document order

    Raises:
        InterchangeFormatError: If the JSON is malformed or has the wrong shape
    """
    try:
        document = SubtitleFileSchema.model_validate_json(content)
    except ValidationError as e:
        raise InterchangeFormatError(
            f"Invalid interchange document: {e.error_count()} error(s)",
            detail=str(e),
        ) from e

    subtitle = Subtitle(
        entries=[
            SubtitleEntry(
                index=item.index,
                start=item.start.to_timestamp(),
                end=item.end.to_timestamp(),
                text=item.text,
            )
            for item in document.subtitles
        ]
    )
    logger.debug("interchange_loaded", entries=len(subtitle))
    return subtitle
