"""
Pattern builder - accumulates regex fragments into an anchored expression.

The builder is protocol-agnostic: it knows nothing about separators or
parameter markers. Compilers read the domain pattern and drive it.

Capture groups are positional. Parameter names are kept as slots next
to the expression, so two patterns differing only in parameter names
compile to the same expression source.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Pattern, Tuple

from ..config import DEFAULT_CONSTRAINT
from .segments import SegmentKind


# Deep wildcards may cross separators, never the query or fragment marker
DEEP_WILDCARD_PATTERN = r"[^?#]+?"


@dataclass(frozen=True, eq=False)
class CompiledPattern:
    """
    Immutable matching expression plus named-capture slots.

    Two compiled patterns are equal iff their expression sources are
    identical.
    """
    regex: Pattern[str]
    slots: Tuple[Tuple[str, int], ...] = ()
    segments: Tuple[SegmentKind, ...] = field(default=())

    @property
    def source(self) -> str:
        return self.regex.pattern

    @property
    def param_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.slots)

    def match(self, text: str) -> Optional[Dict[str, str]]:
        """
        Match *text* against the whole expression.

        Returns the captured parameters (empty dict when the pattern has
        none), or None when *text* does not match. When an ancestor and a
        descendant reuse a parameter name, the descendant's value wins.
        """
        m = self.regex.fullmatch(text)
        if m is None:
            return None
        return {name: m.group(index) for name, index in self.slots}

    def test(self, text: str) -> bool:
        return self.regex.fullmatch(text) is not None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CompiledPattern):
            return self.source == other.source
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.source)

    def __repr__(self) -> str:
        return f"CompiledPattern({self.source!r})"


class PatternBuilder:
    """
    Chainable accumulator of regex fragments.

    Usage::

        compiled = (
            PatternBuilder()
            .exact("/users/")
            .param("id", r"\\d+")
            .build()
        )
        compiled.match("/users/42")  # {"id": "42"}
    """

    __slots__ = ("default_constraint", "_fragments", "_slots", "_groups", "_segments", "_tail")

    def __init__(self, default_constraint: str = DEFAULT_CONSTRAINT):
        self.default_constraint = default_constraint
        self._fragments: List[str] = []
        self._slots: List[Tuple[str, int]] = []
        self._groups = 0
        self._segments: List[SegmentKind] = []
        # Raw text of the trailing exact() fragment, "" otherwise
        self._tail = ""

    def exact(self, text: str) -> "PatternBuilder":
        """Append *text* matched character-for-character."""
        if text:
            self._fragments.append(re.escape(text))
            self._tail = text
        return self

    def param(self, name: str, constraint: Optional[str] = None) -> "PatternBuilder":
        """Append a capture for *name* restricted by *constraint*."""
        constraint = constraint or self.default_constraint
        self._slots.append((name, self._groups + 1))
        self._fragments.append(f"({constraint})")
        self._groups += 1 + re.compile(constraint).groups
        self._tail = ""
        return self

    def wildcard(self, constraint: Optional[str] = None) -> "PatternBuilder":
        """Append an unnamed single-segment match."""
        constraint = constraint or self.default_constraint
        self._fragments.append(f"(?:{constraint})")
        self._groups += re.compile(constraint).groups
        self._tail = ""
        return self

    def deep_wildcard(self) -> "PatternBuilder":
        """Append an unnamed, non-greedy match spanning several segments."""
        self._fragments.append(DEEP_WILDCARD_PATTERN)
        self._tail = ""
        return self

    def segment(self, kind: SegmentKind) -> "PatternBuilder":
        """
        Record that a pattern segment of *kind* was emitted.

        Does not change the expression; the recorded kinds feed
        specificity ranking.
        """
        self._segments.append(kind)
        return self

    def concat(self, other: "PatternBuilder") -> "PatternBuilder":
        """Append every fragment, capture slot and segment of *other*."""
        offset = self._groups
        self._fragments.extend(other._fragments)
        self._slots.extend((name, index + offset) for name, index in other._slots)
        self._groups += other._groups
        self._segments.extend(other._segments)
        if other._fragments:
            self._tail = other._tail
        return self

    def copy(self) -> "PatternBuilder":
        return PatternBuilder(self.default_constraint).concat(self)

    def ends_with(self, text: str) -> bool:
        """True if the expression currently ends with the literal *text*."""
        return bool(text) and self._tail.endswith(text)

    def build(self) -> CompiledPattern:
        """Join fragments and anchor them to the whole input."""
        regex = re.compile("^" + "".join(self._fragments) + "$")
        return CompiledPattern(
            regex=regex,
            slots=tuple(self._slots),
            segments=tuple(self._segments),
        )

    def __len__(self) -> int:
        return len(self._fragments)

    def __repr__(self) -> str:
        return f"PatternBuilder({''.join(self._fragments)!r})"
