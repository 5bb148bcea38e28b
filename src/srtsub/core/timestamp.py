"""Timestamp value type and millisecond codec."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering

from srtsub.errors import TimestampRangeError

MS_PER_HOUR = 3_600_000
MS_PER_MINUTE = 60_000
MS_PER_SECOND = 1_000


@total_ordering
@dataclass(frozen=True)
class Timestamp:
    """A point in time within a subtitle track.

    Minutes, seconds and milliseconds are normally 0-59/0-59/0-999, but the
    grammar only enforces digit width, so parsed values such as 75 minutes are
    representable. Use ``validate_ranges`` to reject them.

    Ordering is by absolute milliseconds, then by field, so it agrees with
    equality even for non-canonical values.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def __post_init__(self) -> None:
        for name in ("hours", "minutes", "seconds", "milliseconds"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    @classmethod
    def from_milliseconds(cls, ms: int) -> Timestamp:
        """Decompose an absolute millisecond count into timestamp fields.

        Args:
            ms: Non-negative millisecond count

        Returns:
            Timestamp with minutes/seconds/milliseconds in canonical range and
            hours unbounded

        Raises:
            ValueError: If ms is negative
        """
        if ms < 0:
            raise ValueError(f"Millisecond count must be non-negative, got {ms}")
        hours, rest = divmod(ms, MS_PER_HOUR)
        minutes, rest = divmod(rest, MS_PER_MINUTE)
        seconds, milliseconds = divmod(rest, MS_PER_SECOND)
        return cls(
            hours=hours, minutes=minutes, seconds=seconds, milliseconds=milliseconds
        )

    @classmethod
    def parse(cls, text: str, *, strict: bool = False) -> Timestamp:
        """Parse ``HH:MM:SS,mmm`` text using the SRT grammar's timestamp rule.

        Raises:
            GrammarError: If text is not exactly one timestamp
            TimestampRangeError: If strict and minutes/seconds exceed 59
        """
        # Imported here: the grammar mapper depends on this module.
        from srtsub.formats.mapper import map_timestamp
        from srtsub.grammar import SRT_GRAMMAR

        timestamp = map_timestamp(SRT_GRAMMAR.parse("timestamp", text))
        if strict:
            timestamp.validate_ranges()
        return timestamp

    def to_milliseconds(self) -> int:
        """Return the absolute millisecond count."""
        return (
            self.hours * MS_PER_HOUR
            + self.minutes * MS_PER_MINUTE
            + self.seconds * MS_PER_SECOND
            + self.milliseconds
        )

    def shifted(self, offset_ms: int) -> Timestamp:
        """Return this timestamp moved by offset_ms, floored at zero."""
        if offset_ms == 0:
            return self
        return Timestamp.from_milliseconds(max(0, self.to_milliseconds() + offset_ms))

    def validate_ranges(self) -> None:
        """Reject minutes, seconds or milliseconds outside their clock range.

        Raises:
            TimestampRangeError: If any field is out of range
        """
        if self.minutes > 59:
            raise TimestampRangeError(
                f"Minutes must be 0-59, got {self.minutes}", detail=self.render()
            )
        if self.seconds > 59:
            raise TimestampRangeError(
                f"Seconds must be 0-59, got {self.seconds}", detail=self.render()
            )
        if self.milliseconds > 999:
            raise TimestampRangeError(
                f"Milliseconds must be 0-999, got {self.milliseconds}",
                detail=self.render(),
            )

    def render(self) -> str:
        """Render as zero-padded ``HH:MM:SS,mmm``."""
        return (
            f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d},"
            f"{self.milliseconds:03d}"
        )

    def __str__(self) -> str:
        return self.render()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def _sort_key(self) -> tuple[int, int, int, int, int]:
        # Fields break ties between equal times such as 01:00:00 and 00:60:00.
        return (
            self.to_milliseconds(),
            self.hours,
            self.minutes,
            self.seconds,
            self.milliseconds,
        )
