"""Unit tests for SRT parser and renderer."""

import pytest

from srtsub.core.subtitle import Subtitle, SubtitleEntry
from srtsub.core.timestamp import Timestamp
from srtsub.errors import GrammarError, NumericConversionError, TimestampRangeError
from srtsub.formats.srt import parse_srt, render_srt


class TestParseSRT:
    """Test cases for SRT parsing."""

    def test_parse_valid_single_entry(self):
        """Test parsing a valid single entry SRT."""
        content = (
            "26\n00:02:13,383 --> 00:02:14,883\n"
            "Carol moved her stuff out today.\n\n"
        )

        result = parse_srt(content)

        assert len(result) == 1
        assert result[0].index == 26
        assert result[0].start == Timestamp(0, 2, 13, 383)
        assert result[0].end == Timestamp(0, 2, 14, 883)
        assert result[0].text == "Carol moved her stuff out today."

    def test_parse_valid_multiple_entries(self, sample_srt_content):
        """Test parsing multiple entries."""
        result = parse_srt(sample_srt_content)

        assert len(result) == 3
        assert result[0].text == "Hello, this is a test."
        assert result[1].text == "This is the second subtitle."

    def test_parse_dialogue_lines(self):
        """Hyphenated dialogue lines are kept verbatim, joined by a newline."""
        content = (
            "1\n00:00:01,000 --> 00:00:03,000\n"
            "- Let me get you some coffee.\n- Thanks.\n\n"
        )

        result = parse_srt(content)

        assert result[0].text == "- Let me get you some coffee.\n- Thanks."

    def test_parse_tight_timecode(self):
        """The arrow needs no surrounding spaces."""
        spaced = parse_srt("1\n01:02:03,004 --> 04:05:06,007\nText\n\n")
        tight = parse_srt("1\n01:02:03,004-->04:05:06,007\nText\n\n")

        assert tight == spaced
        assert tight[0].start == Timestamp(1, 2, 3, 4)
        assert tight[0].end == Timestamp(4, 5, 6, 7)

    def test_parse_empty_content(self):
        """An empty file has no entries."""
        assert len(parse_srt("")) == 0
        assert len(parse_srt("   \n\n  ")) == 0

    def test_parse_keeps_end_before_start(self):
        """Timing is not validated beyond structure."""
        result = parse_srt("1\n00:00:05,000 --> 00:00:03,000\nText\n\n")

        assert result[0].start > result[0].end

    def test_parse_keeps_non_sequential_indices(self):
        """Indices are neither re-numbered nor checked."""
        content = (
            "1\n00:00:01,000 --> 00:00:02,000\nFirst\n\n"
            "1\n00:00:03,000 --> 00:00:04,000\nAgain\n\n"
            "9\n00:00:00,500 --> 00:00:06,000\nOverlap\n\n"
        )

        assert [entry.index for entry in parse_srt(content)] == [1, 1, 9]

    def test_parse_missing_trailing_blank_line_raises_error(self):
        """A block must end with a blank line."""
        content = "1\n00:00:01,000 --> 00:00:03,000\nHello, world!\n"

        with pytest.raises(GrammarError):
            parse_srt(content)

    def test_parse_missing_text_raises_error(self):
        """Blocks need at least one non-blank text line."""
        content = "1\n00:00:01,000 --> 00:00:03,000\n\n"

        with pytest.raises(GrammarError) as exc_info:
            parse_srt(content)

        assert exc_info.value.expected == ("text_line",)
        assert exc_info.value.line == 3

    def test_parse_invalid_index_raises_error(self):
        """Non-digit indices are grammar errors."""
        content = "abc\n00:00:01,000 --> 00:00:03,000\nText\n\n"

        with pytest.raises(GrammarError, match="line 1, column 1"):
            parse_srt(content)

    def test_parse_error_location_with_carriage_return_line_endings(self):
        """Lines separated by lone CR are counted when locating errors."""
        content = "1\r00:00:01,000 --> 00:00:02,000\rText\r"

        with pytest.raises(GrammarError) as exc_info:
            parse_srt(content)

        assert (exc_info.value.line, exc_info.value.column) == (4, 1)

    def test_parse_period_timestamp_raises_error(self):
        """A period in a timestamp is a grammar error."""
        content = "1\n00:00:00.000 --> 00:00:01,000\nText\n\n"

        with pytest.raises(GrammarError) as exc_info:
            parse_srt(content)

        assert exc_info.value.rule == "timestamp"
        assert (exc_info.value.line, exc_info.value.column) == (2, 9)

    def test_parse_error_in_later_block_aborts_whole_file(self):
        """No partial result is returned."""
        content = (
            "1\n00:00:01,000 --> 00:00:02,000\nGood\n\n"
            "2\n00:00:03,000 -> 00:00:04,000\nBad\n\n"
        )

        with pytest.raises(GrammarError) as exc_info:
            parse_srt(content)

        assert exc_info.value.line == 6

    def test_parse_huge_index_raises_numeric_error(self):
        """Digit-valid but oversized indices are numeric errors."""
        content = "99999999999\n00:00:01,000 --> 00:00:02,000\nText\n\n"

        with pytest.raises(NumericConversionError, match="index"):
            parse_srt(content)

    def test_parse_accepts_out_of_range_minutes_by_default(self):
        """Default policy is structural only."""
        result = parse_srt("1\n00:61:00,000 --> 00:62:00,000\nText\n\n")

        assert result[0].start.minutes == 61

    def test_parse_strict_rejects_out_of_range_seconds(self):
        """Strict policy rejects seconds above 59."""
        content = "1\n00:00:01,000 --> 00:00:60,000\nText\n\n"

        with pytest.raises(TimestampRangeError, match="Seconds"):
            parse_srt(content, strict=True)

    def test_parse_strict_from_settings(self, monkeypatch):
        """The strict policy can come from configuration."""
        monkeypatch.setenv("SRTSUB_STRICT_TIME_RANGES", "true")
        content = "1\n00:60:00,000 --> 00:61:00,000\nText\n\n"

        with pytest.raises(TimestampRangeError):
            parse_srt(content)

        assert parse_srt(content, strict=False)[0].start.minutes == 60


class TestRenderSRT:
    """Test cases for SRT rendering."""

    def test_render_single_entry(self):
        """Test rendering a single entry."""
        subtitle = Subtitle(
            entries=[
                SubtitleEntry(
                    index=1,
                    start=Timestamp(seconds=1),
                    end=Timestamp(seconds=3),
                    text="Hello, world!",
                )
            ]
        )

        assert render_srt(subtitle) == (
            "1\n00:00:01,000 --> 00:00:03,000\nHello, world!\n\n"
        )

    def test_render_multiple_entries(self):
        """Entries are separated by exactly one blank line."""
        subtitle = Subtitle(
            entries=[
                SubtitleEntry(1, Timestamp(seconds=1), Timestamp(seconds=2), "A\nB"),
                SubtitleEntry(2, Timestamp(1, 30, 45, 123), Timestamp(2, 0, 0, 7), "C"),
            ]
        )

        assert render_srt(subtitle) == (
            "1\n00:00:01,000 --> 00:00:02,000\nA\nB\n\n"
            "2\n01:30:45,123 --> 02:00:00,007\nC\n\n"
        )

    def test_render_empty(self):
        """An empty collection renders to empty text."""
        assert render_srt(Subtitle()) == ""

    def test_render_normalizes_spacing(self):
        """Tight arrows and CRLF come back in canonical form."""
        content = "5\r\n00:00:01,000-->00:00:02,000\r\nText\r\n\r\n"

        assert render_srt(parse_srt(content)) == (
            "5\n00:00:01,000 --> 00:00:02,000\nText\n\n"
        )
