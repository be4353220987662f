"""Duplicate route detection over a flattened route table."""

import logging
from typing import Dict, Optional, Sequence, Tuple

from ..faults import RouteConflictFault
from .route import CompiledRouteEntry

logger = logging.getLogger("hurdle.routing.validate")


def assert_unique_routes(entries: Sequence[CompiledRouteEntry]) -> None:
    """
    Fail if two entries share a (method, expression source) discriminator.

    Entries handling no method are keyed once with method None, and that
    key claims the expression for every method: a handler-less entry
    conflicts with any other entry compiling to the same source. Only
    identical expression sources collide; overlapping or equivalent
    expressions are left to specificity ranking.

    Raises:
        RouteConflictFault: on the first collision found
    """
    seen: Dict[Tuple[Optional[str], str], CompiledRouteEntry] = {}
    by_source: Dict[str, CompiledRouteEntry] = {}

    for entry in entries:
        source = entry.compiled.source
        for method in entry.methods or (None,):
            previous = seen.get((method, source)) or seen.get((None, source))
            if previous is None and method is None:
                previous = by_source.get(source)
            if previous is not None:
                _conflict(entry, previous, method, source)
            seen[(method, source)] = entry
        by_source.setdefault(source, entry)


def _conflict(
    entry: CompiledRouteEntry,
    previous: CompiledRouteEntry,
    method: Optional[str],
    source: str,
) -> None:
    fault = RouteConflictFault(
        pattern=entry.route.pattern,
        method=method,
        source=source,
        conflicting_pattern=previous.route.pattern,
    )
    logger.error("%s", fault)
    raise fault
