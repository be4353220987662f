"""
Specificity scoring for route selection.

Formula:
--------
- Base: segment_count * 10000 (longer patterns outrank shorter ones)
- Position weight: (segment_count - index) * 1000 per segment
- Kind bonus per segment:
    literal       +400
    param         +300
    wildcard      +200
    deep wildcard +100

Selection does not compare raw scores. It ranks candidates by segment
count, then by their kind profile read from the first segment onward, so
a literal outranks any mix of lower kinds after it and an earlier literal
beats an earlier param. The score agrees with this order whenever counts
differ; among same-length patterns it is only a summary for reporting.
Candidates equal on both keys keep registration order: the earliest
registered route wins.
"""

import logging
from typing import Sequence, Tuple

from .segments import SegmentKind

logger = logging.getLogger("hurdle.patterns.specificity")


SEGMENT_WEIGHT = 10000
POSITION_WEIGHT = 1000

KIND_BONUS = {
    SegmentKind.LITERAL: 400,
    SegmentKind.PARAM: 300,
    SegmentKind.WILDCARD: 200,
    SegmentKind.DEEP_WILDCARD: 100,
}


def calculate_specificity(segments: Sequence[SegmentKind]) -> int:
    """Calculate the specificity score of a sequence of segment kinds."""
    count = len(segments)
    score = count * SEGMENT_WEIGHT
    for index, kind in enumerate(segments):
        score += (count - index) * POSITION_WEIGHT + KIND_BONUS[kind]
    return score


def specificity_key(segments: Sequence[SegmentKind]) -> Tuple[int, Tuple[int, ...]]:
    """Sort key: segment count first, then per-position kind bonus left to right."""
    return len(segments), tuple(KIND_BONUS[kind] for kind in segments)


def select_most_specific(matches):
    """
    Pick the most specific of several matched routes.

    *matches* is a sequence of RouteMatch objects in registration order.
    ``max`` keeps the first of equal candidates, so true ties resolve to
    the earliest registered route.
    """
    ranked = [(specificity_key(match.compiled.segments), match) for match in matches]
    best_key, best = max(ranked, key=lambda item: item[0])

    if logger.isEnabledFor(logging.DEBUG):
        tied = [match for key, match in ranked if key == best_key]
        if len(tied) > 1:
            logger.debug(
                "Specificity tie between %d routes, keeping first registered %r",
                len(tied),
                best.pattern,
            )

    return best


# Path and event routers share one selection policy
select_most_specific_route = select_most_specific
select_most_specific_ws_route = select_most_specific
