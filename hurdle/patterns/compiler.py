"""
Pattern compilers - turn domain pattern strings into compiled patterns.

A compiler is any callable ``(pattern, builder) -> CompiledPattern``.
Two strategies ship with the package:

- PathPatternCompiler: URL paths (``users/:id``, ``files/**``), rooted
  at a leading ``/``
- EventPatternCompiler: colon-delimited event names (``chat:*``)

The builder handed to a compiler may already hold an ancestor's prefix;
the compiler appends the pattern's own segments after it.
"""

from typing import Any, List

from ..config import HTTP_SYNTAX, WS_SYNTAX, PatternSyntax
from .builder import CompiledPattern, PatternBuilder
from .segments import Segment, SegmentKind, split_pattern


class PatternCompiler:
    """Base segment compiler driven by a PatternSyntax."""

    def __init__(self, syntax: PatternSyntax):
        self.syntax = syntax

    def __call__(self, pattern: Any, builder: PatternBuilder) -> CompiledPattern:
        segments = split_pattern(pattern, self.syntax)
        self._emit_prefix(pattern, builder)
        self._emit_segments(segments, builder)
        return builder.build()

    def _emit_prefix(self, pattern: str, builder: PatternBuilder) -> None:
        """Hook for separators emitted before the first segment."""

    def _emit_segments(self, segments: List[Segment], builder: PatternBuilder) -> None:
        separator = self.syntax.separator
        after_deep = False

        for index, segment in enumerate(segments):
            if index > 0 and not after_deep:
                builder.exact(separator)

            kind = segment.kind
            if kind is SegmentKind.LITERAL:
                builder.exact(segment.value)
            elif kind is SegmentKind.PARAM:
                builder.param(segment.value, self.syntax.default_constraint)
            elif kind is SegmentKind.WILDCARD:
                builder.wildcard(self.syntax.default_constraint)
            else:
                builder.deep_wildcard()
                after_deep = True
            builder.segment(kind)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(separator={self.syntax.separator!r})"


class PathPatternCompiler(PatternCompiler):
    """
    Compiles path patterns.

    Every compiled path starts with the root separator whether or not the
    pattern does, so ``users/:id`` and ``/users/:id`` are the same route.
    When the inherited prefix already ends with the separator (a parent
    registered as ``/``) it is not repeated.
    """

    def __init__(self, syntax: PatternSyntax = HTTP_SYNTAX):
        super().__init__(syntax)

    def _emit_prefix(self, pattern: str, builder: PatternBuilder) -> None:
        separator = self.syntax.separator
        if self.syntax.root_anchor and not builder.ends_with(separator):
            builder.exact(separator)


class EventPatternCompiler(PatternCompiler):
    """
    Compiles colon-delimited event patterns.

    A pattern starting with the separator keeps it, which is how a nested
    event route attaches to its parent: ``:message`` under ``chat``
    matches ``chat:message``. Without the leading separator the child's
    text is appended to the parent's directly.
    """

    def __init__(self, syntax: PatternSyntax = WS_SYNTAX):
        super().__init__(syntax)

    def _emit_prefix(self, pattern: str, builder: PatternBuilder) -> None:
        separator = self.syntax.separator
        if self.syntax.leading_separator and pattern.startswith(separator):
            builder.exact(separator)


compile_http_pattern = PathPatternCompiler()

compile_ws_pattern = EventPatternCompiler()
