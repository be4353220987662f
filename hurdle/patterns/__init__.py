"""
Hurdle patterns - route pattern builder, compilers and specificity.

This package provides:
- PatternBuilder: chainable, protocol-agnostic regex fragment accumulator
- Path and event pattern compilers driven by a PatternSyntax
- Segment classification (literal / param / wildcard / deep wildcard)
- Specificity scoring and most-specific route selection
"""

from .segments import SegmentKind, Segment, classify_segment, split_pattern
from .builder import PatternBuilder, CompiledPattern, DEEP_WILDCARD_PATTERN
from .compiler import (
    PatternCompiler,
    PathPatternCompiler,
    EventPatternCompiler,
    compile_http_pattern,
    compile_ws_pattern,
)
from .specificity import (
    KIND_BONUS,
    calculate_specificity,
    specificity_key,
    select_most_specific,
    select_most_specific_route,
    select_most_specific_ws_route,
)

__all__ = [
    # Segments
    "SegmentKind",
    "Segment",
    "classify_segment",
    "split_pattern",
    # Builder
    "PatternBuilder",
    "CompiledPattern",
    "DEEP_WILDCARD_PATTERN",
    # Compilers
    "PatternCompiler",
    "PathPatternCompiler",
    "EventPatternCompiler",
    "compile_http_pattern",
    "compile_ws_pattern",
    # Specificity
    "KIND_BONUS",
    "calculate_specificity",
    "specificity_key",
    "select_most_specific",
    "select_most_specific_route",
    "select_most_specific_ws_route",
]
