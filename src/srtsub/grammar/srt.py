"""Rule table for the SubRip (SRT) subtitle format."""

from srtsub.grammar.fragments import FragmentKind
from srtsub.grammar.peg import (
    End,
    Grammar,
    Literal,
    Pattern,
    Ref,
    Rule,
    Sequence,
    ZeroOrMore,
)

BYTE_ORDER_MARK = "\ufeff"

SRT_RULES: dict[str, Rule] = {
    # Silent helpers
    "newline": Rule(Pattern(r"\r\n|\n|\r")),
    "inline_ws": Rule(Pattern(r"[ \t]*")),
    "arrow": Rule(Literal("-->")),
    "bom": Rule(Pattern(BYTE_ORDER_MARK + "?")),
    "trailing_ws": Rule(Pattern(r"\s*")),
    # Timestamps
    "index": Rule(Pattern(r"[0-9]+"), FragmentKind.INDEX),
    "hours": Rule(Pattern(r"[0-9]{2}"), FragmentKind.HOURS),
    "minutes": Rule(Pattern(r"[0-9]{2}"), FragmentKind.MINUTES),
    "seconds": Rule(Pattern(r"[0-9]{2}"), FragmentKind.SECONDS),
    "milliseconds": Rule(Pattern(r"[0-9]{3}"), FragmentKind.MILLISECONDS),
    "timestamp": Rule(
        Sequence(
            Ref("hours"),
            Literal(":"),
            Ref("minutes"),
            Literal(":"),
            Ref("seconds"),
            Literal(","),
            Ref("milliseconds"),
        ),
        FragmentKind.TIMESTAMP,
    ),
    "timecode": Rule(
        Sequence(
            Ref("timestamp"),
            Ref("inline_ws"),
            Ref("arrow"),
            Ref("inline_ws"),
            Ref("timestamp"),
        ),
        FragmentKind.TIMECODE,
    ),
    # Text
    "text_line": Rule(Pattern(r"[^\r\n]+"), FragmentKind.TEXT_LINE),
    "text_content": Rule(
        Sequence(
            Ref("text_line"),
            ZeroOrMore(Sequence(Ref("newline"), Ref("text_line"))),
        ),
        FragmentKind.TEXT_CONTENT,
    ),
    # Structure
    "subtitle_block": Rule(
        Sequence(
            Ref("index"),
            Ref("newline"),
            Ref("timecode"),
            Ref("newline"),
            Ref("text_content"),
            Ref("newline"),
            Ref("newline"),
        ),
        FragmentKind.SUBTITLE_BLOCK,
    ),
    "subtitle_file": Rule(
        Sequence(
            Ref("bom"),
            ZeroOrMore(Ref("subtitle_block")),
            Ref("trailing_ws"),
            End(),
        ),
        FragmentKind.SUBTITLE_FILE,
    ),
}

SRT_GRAMMAR = Grammar(SRT_RULES)
