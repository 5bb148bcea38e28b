"""A small parsing expression grammar (PEG) engine.

Rules are plain data: a ``Grammar`` maps rule names to ``Rule`` objects whose
expressions are composed from the node types below. Matching is backtracking
recursive descent with no memoization; repetition is iterative so long inputs
do not grow the call stack.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from srtsub.errors import GrammarError
from srtsub.grammar.fragments import Fragment, FragmentKind

END_OF_INPUT = "EOI"

_Match = tuple[int, list[Fragment]]

# Same line breaks as the SRT newline rule.
_LINE_BREAK = re.compile(r"\r\n|\n|\r")


@dataclass
class _State:
    """Per-call matching state; never shared between parse calls."""

    grammar: Grammar
    text: str
    rule_stack: list[str] = field(default_factory=list)
    farthest: int = -1
    failures: list[tuple[str, str]] = field(default_factory=list)

    def fail(self, pos: int, label: str | None) -> None:
        rule = self.rule_stack[-1] if self.rule_stack else END_OF_INPUT
        entry = (rule, label or rule)
        if pos > self.farthest:
            self.farthest = pos
            self.failures = [entry]
        elif pos == self.farthest and entry not in self.failures:
            self.failures.append(entry)

    def error(self) -> GrammarError:
        pos = max(self.farthest, 0)
        failures = self.failures or [(END_OF_INPUT, END_OF_INPUT)]
        line, line_start = 1, 0
        for brk in _LINE_BREAK.finditer(self.text, 0, pos):
            line, line_start = line + 1, brk.end()
        column = pos - line_start + 1
        expected = tuple(dict.fromkeys(label for _, label in failures))
        snippet = self.text[pos : pos + 20]
        return GrammarError(
            rule=failures[0][0],
            expected=expected,
            position=pos,
            line=line,
            column=column,
            detail=f"found {snippet!r}" if snippet else "found end of input",
        )


class Expression(ABC):
    """A parsing expression."""

    @abstractmethod
    def match(self, state: _State, pos: int) -> _Match | None:
        """Try to match at pos; return (new_pos, fragments) or None."""

    def references(self) -> Iterator[str]:
        """Yield the rule names this expression refers to."""
        yield from ()


@dataclass(frozen=True)
class Literal(Expression):
    """Exact string."""

    value: str

    def match(self, state: _State, pos: int) -> _Match | None:
        if state.text.startswith(self.value, pos):
            return pos + len(self.value), []
        state.fail(pos, f'"{self.value}"')
        return None


@dataclass(frozen=True)
class Pattern(Expression):
    """Regular expression anchored at the current offset.

    A zero-width match counts as success. Failures are reported under
    ``label`` or, when no label is given, the enclosing rule's name.
    """

    regex: str
    label: str | None = None
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", re.compile(self.regex))

    def match(self, state: _State, pos: int) -> _Match | None:
        found = self._compiled.match(state.text, pos)
        if found is None:
            state.fail(pos, self.label)
            return None
        return found.end(), []


@dataclass(frozen=True)
class Sequence(Expression):
    """All items in order."""

    items: tuple[Expression, ...]

    def __init__(self, *items: Expression) -> None:
        object.__setattr__(self, "items", items)

    def match(self, state: _State, pos: int) -> _Match | None:
        fragments: list[Fragment] = []
        for item in self.items:
            result = item.match(state, pos)
            if result is None:
                return None
            pos, found = result
            fragments.extend(found)
        return pos, fragments

    def references(self) -> Iterator[str]:
        for item in self.items:
            yield from item.references()


@dataclass(frozen=True)
class ZeroOrMore(Expression):
    """Greedy repetition; always succeeds."""

    item: Expression

    def match(self, state: _State, pos: int) -> _Match | None:
        fragments: list[Fragment] = []
        while True:
            result = self.item.match(state, pos)
            # Stop on failure or on a zero-width match that would loop forever.
            if result is None or result[0] == pos:
                return pos, fragments
            pos, found = result
            fragments.extend(found)

    def references(self) -> Iterator[str]:
        yield from self.item.references()


@dataclass(frozen=True)
class End(Expression):
    """End of input."""

    def match(self, state: _State, pos: int) -> _Match | None:
        if pos == len(state.text):
            return pos, []
        state.fail(pos, END_OF_INPUT)
        return None


@dataclass(frozen=True)
class Ref(Expression):
    """Reference to a named rule."""

    name: str

    def match(self, state: _State, pos: int) -> _Match | None:
        rule = state.grammar.rules[self.name]
        state.rule_stack.append(self.name)
        try:
            result = rule.expression.match(state, pos)
        finally:
            state.rule_stack.pop()
        if result is None:
            return None
        end, children = result
        if rule.kind is None:
            return end, children
        fragment = Fragment(
            kind=rule.kind,
            start=pos,
            end=end,
            text=state.text[pos:end],
            children=tuple(children),
        )
        return end, [fragment]

    def references(self) -> Iterator[str]:
        yield self.name


@dataclass(frozen=True)
class Rule:
    """A named grammar rule.

    Attributes:
        expression: What the rule matches
        kind: Fragment kind to produce, or None for a silent rule whose
            children are spliced into the parent
    """

    expression: Expression
    kind: FragmentKind | None = None

    @property
    def silent(self) -> bool:
        return self.kind is None


class Grammar:
    """An immutable set of named rules."""

    def __init__(self, rules: Mapping[str, Rule]) -> None:
        self.rules: Mapping[str, Rule] = dict(rules)
        for name, rule in self.rules.items():
            for ref in rule.expression.references():
                if ref not in self.rules:
                    raise ValueError(f"Rule {name!r} references unknown rule {ref!r}")

    def __contains__(self, name: object) -> bool:
        return name in self.rules

    def match(self, rule: str, text: str, pos: int = 0) -> Fragment:
        """Match rule against a prefix of text starting at pos.

        Raises:
            KeyError: If the rule is unknown
            ValueError: If the rule is silent and so yields no fragment
            GrammarError: If the rule does not match
        """
        return self._run(Ref(self._checked(rule)), text, pos)

    def parse(self, rule: str, text: str) -> Fragment:
        """Match rule against the whole of text.

        Raises:
            KeyError: If the rule is unknown
            ValueError: If the rule is silent and so yields no fragment
            GrammarError: If the rule does not match or input remains
        """
        return self._run(Sequence(Ref(self._checked(rule)), End()), text, 0)

    def _checked(self, rule: str) -> str:
        if rule not in self.rules:
            raise KeyError(f"Unknown grammar rule: {rule!r}")
        if self.rules[rule].silent:
            raise ValueError(f"Rule {rule!r} is silent and produces no fragment")
        return rule

    def _run(self, expression: Expression, text: str, pos: int) -> Fragment:
        state = _State(grammar=self, text=text)
        result = expression.match(state, pos)
        if result is None:
            raise state.error()
        return result[1][0]
