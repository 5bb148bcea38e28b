"""Parse tree nodes produced by the grammar engine."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum


class FragmentKind(StrEnum):
    """Kinds of fragment, one per non-silent grammar rule."""

    SUBTITLE_FILE = "subtitle_file"
    SUBTITLE_BLOCK = "subtitle_block"
    INDEX = "index"
    TIMECODE = "timecode"
    TIMESTAMP = "timestamp"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    TEXT_CONTENT = "text_content"
    TEXT_LINE = "text_line"


@dataclass(frozen=True)
class Fragment:
    """A matched span of input for one grammar rule.

    Attributes:
        kind: Rule that produced the fragment
        start: Offset of the first matched character
        end: Offset one past the last matched character
        text: The matched input slice
        children: Fragments of the non-silent rules matched inside this one
    """

    kind: FragmentKind
    start: int
    end: int
    text: str
    children: tuple[Fragment, ...] = ()

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self.children)

    def find(self, kind: FragmentKind) -> Fragment | None:
        """Return the first direct child of the given kind, or None."""
        for child in self.children:
            if child.kind is kind:
                return child
        return None

    def find_all(self, kind: FragmentKind) -> list[Fragment]:
        """Return all direct children of the given kind, in document order."""
        return [child for child in self.children if child.kind is kind]
