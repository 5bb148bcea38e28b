"""Subtitle domain models."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, replace

from srtsub.core.timestamp import Timestamp
from srtsub.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SubtitleEntry:
    """Single subtitle entry with timing and text.

    No ordering is enforced between start and end; the index is kept as
    found and need not be unique or sequential.
    """

    index: int
    start: Timestamp
    end: Timestamp
    text: str

    def __post_init__(self):
        """Validate field types."""
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError(f"Index must be an int, got {type(self.index).__name__}")
        if self.index < 0:
            raise ValueError(f"Index must be non-negative, got {self.index}")
        if not isinstance(self.start, Timestamp) or not isinstance(
            self.end, Timestamp
        ):
            raise TypeError("Start and end must be Timestamp instances")

    @property
    def duration_ms(self) -> int:
        """Milliseconds between start and end; negative if end precedes start."""
        return self.end.to_milliseconds() - self.start.to_milliseconds()

    def shifted(self, offset_ms: int) -> SubtitleEntry:
        """Return a copy with both timestamps moved, floored at zero."""
        return replace(
            self, start=self.start.shifted(offset_ms), end=self.end.shifted(offset_ms)
        )


@dataclass
class Subtitle:
    """Ordered collection of subtitle entries, in file order."""

    entries: list[SubtitleEntry] = field(default_factory=list)

    def __len__(self) -> int:
        """Return number of entries."""
        return len(self.entries)

    def __iter__(self) -> Iterator[SubtitleEntry]:
        """Iterate over entries."""
        return iter(self.entries)

    def __getitem__(self, index: int) -> SubtitleEntry:
        """Get entry by position (0-based)."""
        return self.entries[index]

    def span(self) -> tuple[Timestamp, Timestamp] | None:
        """Return (earliest start, latest end), or None when empty."""
        if not self.entries:
            return None
        return (
            min(entry.start for entry in self.entries),
            max(entry.end for entry in self.entries),
        )

    def shift(self, offset_ms: int) -> Subtitle:
        """Return a new collection with every timestamp moved by offset_ms.

        Results below zero are clamped to 00:00:00,000 rather than raising.
        Clamping loses information, so shifting by ``a`` then ``b`` only equals
        shifting by ``a + b`` when the first shift clamped nothing.

        Args:
            offset_ms: Signed offset in milliseconds

        Returns:
            Shifted copy; this collection is left unchanged
        """
        clamped = sum(
            1
            for entry in self.entries
            for stamp in (entry.start, entry.end)
            if stamp.to_milliseconds() + offset_ms < 0
        )
        if clamped:
            logger.warning(
                "timestamps_clamped", offset_ms=offset_ms, count=clamped
            )
        return Subtitle(entries=[entry.shifted(offset_ms) for entry in self.entries])


def shift_subtitles(subtitle: Subtitle, offset_ms: int) -> Subtitle:
    """Shift all entries of subtitle by offset_ms. See ``Subtitle.shift``."""
    return subtitle.shift(offset_ms)
