"""Error hierarchy for SRT parsing and serialization."""

from __future__ import annotations


class SubtitleError(Exception):
    """Base subtitle error with a machine-readable code and structured detail."""

    code = "subtitle_error"

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        self.message = message
        self.detail = detail
        super().__init__(message)


class GrammarError(SubtitleError):
    """Raised when input text does not match the SRT grammar."""

    code = "grammar_error"

    def __init__(
        self,
        *,
        rule: str,
        expected: tuple[str, ...],
        position: int,
        line: int,
        column: int,
        detail: str | None = None,
    ) -> None:
        self.rule = rule
        self.expected = expected
        self.position = position
        self.line = line
        self.column = column
        wanted = " or ".join(expected) if expected else rule
        super().__init__(
            f"Expected {wanted} at line {line}, column {column}",
            detail=detail,
        )


class MissingComponentError(SubtitleError):
    """Raised when a parsed fragment lacks an expected sub-fragment."""

    code = "missing_component"

    def __init__(self, component: str) -> None:
        self.component = component
        super().__init__(f"Missing expected component in subtitle block: {component}")


class NumericConversionError(SubtitleError):
    """Raised when a digit string does not fit the target integer width."""

    code = "numeric_conversion"

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Failed to convert {field}: {value!r} is out of range")


class TimestampRangeError(SubtitleError):
    """Raised under the strict policy when minutes or seconds exceed 59."""

    code = "timestamp_range"


class InterchangeFormatError(SubtitleError):
    """Raised when interchange (JSON) text is malformed or unrepresentable."""

    code = "interchange_format"
