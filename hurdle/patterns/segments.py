"""
Segment classification for route patterns.

A pattern string is split on its syntax separator and every segment is
classified exactly once, at compile time. Matching never looks at the
pattern string again.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List

from ..config import PatternSyntax
from ..faults import PatternInvalidFault


class SegmentKind(str, Enum):
    """Kind of pattern segment, most specific first."""
    LITERAL = "literal"
    PARAM = "param"
    WILDCARD = "wildcard"
    DEEP_WILDCARD = "deep_wildcard"


@dataclass(frozen=True)
class Segment:
    """
    A classified pattern segment.

    ``value`` holds the literal text for LITERAL segments and the
    parameter name for PARAM segments.
    """
    kind: SegmentKind
    value: str = ""


def classify_segment(text: str, syntax: PatternSyntax) -> Segment:
    """Classify one non-empty segment of a pattern."""
    if syntax.deep_wildcard is not None and text == syntax.deep_wildcard:
        return Segment(SegmentKind.DEEP_WILDCARD)
    if text == syntax.wildcard:
        return Segment(SegmentKind.WILDCARD)
    prefix = syntax.param_prefix
    if prefix is not None and text.startswith(prefix) and len(text) > len(prefix):
        return Segment(SegmentKind.PARAM, text[len(prefix):])
    return Segment(SegmentKind.LITERAL, text)


def split_pattern(pattern: Any, syntax: PatternSyntax) -> List[Segment]:
    """
    Split *pattern* into classified segments.

    Empty segments produced by leading, trailing or repeated separators
    are dropped. A deep wildcard is only legal as the final segment.

    Raises:
        PatternInvalidFault: pattern is not a string, or has a deep
            wildcard before its last segment
    """
    if not isinstance(pattern, str):
        raise PatternInvalidFault(pattern, f"expected a string, got {type(pattern).__name__}")

    segments = [
        classify_segment(part, syntax)
        for part in pattern.split(syntax.separator)
        if part
    ]

    for segment in segments[:-1]:
        if segment.kind is SegmentKind.DEEP_WILDCARD:
            raise PatternInvalidFault(
                pattern,
                f"deep wildcard '{syntax.deep_wildcard}' must be the last segment",
            )

    return segments
