"""SRT format parser and renderer."""

from srtsub.core.subtitle import Subtitle
from srtsub.errors import GrammarError
from srtsub.formats.mapper import map_file
from srtsub.grammar import SRT_GRAMMAR
from srtsub.utils.config import get_settings
from srtsub.utils.logging import get_logger

logger = get_logger(__name__)


def parse_srt(content: str, *, strict: bool | None = None) -> Subtitle:
    """Parse SRT format string into Subtitle object.

    The whole input must match the grammar: every block is index, timecode
    and one or more non-blank text lines, terminated by a blank line. There
    is no partial result on failure.

    Args:
        content: Decoded SRT text
        strict: Reject minutes/seconds above 59; defaults to the
            ``strict_time_ranges`` setting

    Returns:
        Subtitle object containing parsed entries in file order

    Raises:
        GrammarError: If content does not match the SRT grammar
        NumericConversionError: If an index is too large to represent
        TimestampRangeError: If strict and a timestamp field is out of range
    """
    if strict is None:
        strict = get_settings().strict_time_ranges

    try:
        tree = SRT_GRAMMAR.parse("subtitle_file", content)
    except GrammarError as e:
        logger.debug(
            "srt_grammar_failed",
            rule=e.rule,
            expected=e.expected,
            line=e.line,
            column=e.column,
        )
        raise

    subtitle = map_file(tree)
    if strict:
        for entry in subtitle:
            entry.start.validate_ranges()
            entry.end.validate_ranges()

    logger.debug("srt_parsed", entries=len(subtitle), strict=strict)
    return subtitle


def render_srt(subtitle: Subtitle) -> str:
    """Render Subtitle object to canonical SRT text.

    Each entry becomes ``index``, ``start --> end`` and its text, followed by
    a blank line, so the output always ends with two newlines (or is empty).

    Args:
        subtitle: Subtitle object to render

    Returns:
        SRT format string
    """
    return "".join(
        f"{entry.index}\n{entry.start} --> {entry.end}\n{entry.text}\n\n"
        for entry in subtitle
    )
