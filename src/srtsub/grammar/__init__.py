"""Grammar engine for the SRT format."""

from srtsub.grammar.fragments import Fragment, FragmentKind
from srtsub.grammar.peg import Grammar, Rule
from srtsub.grammar.srt import SRT_GRAMMAR, SRT_RULES

__all__ = [
    "SRT_GRAMMAR",
    "SRT_RULES",
    "Fragment",
    "FragmentKind",
    "Grammar",
    "Rule",
]
