"""
Route flattening - compile a nested route tree into a flat table.

Routes are walked depth-first, parent before children, siblings in
declaration order. Each route compiles its own pattern on top of a copy
of its parent's builder, so a child's expression always starts with the
full expression of its ancestor chain.
"""

import logging
from typing import Any, Callable, Iterable, List, Sequence, Set

from ..faults import RouteTreeInvalidFault
from ..patterns import CompiledPattern, PatternBuilder
from .route import CompiledRouteEntry, children_of, handled_methods

logger = logging.getLogger("hurdle.routing.flatten")

PatternCompileFn = Callable[[Any, PatternBuilder], CompiledPattern]


def flatten_routes(
    routes: Iterable[Any],
    compiler: PatternCompileFn,
    methods: Sequence[str] = (),
    include_unhandled: bool = True,
) -> List[CompiledRouteEntry]:
    """
    Compile every route of every tree in *routes*.

    Args:
        routes: Root route nodes
        compiler: Pattern compiler ``(pattern, builder) -> CompiledPattern``
        methods: Method names whose handlers are looked up on each route
        include_unhandled: Keep routes exposing no handler for *methods*

    Returns:
        Entries in pre-order

    Raises:
        RouteTreeInvalidFault: a route node appears twice (shared or cyclic)
        PatternInvalidFault: a pattern cannot be compiled
    """
    entries: List[CompiledRouteEntry] = []
    seen: Set[int] = set()

    for route in routes:
        _walk(route, PatternBuilder(), compiler, tuple(methods), include_unhandled, entries, seen)

    return entries


def _walk(
    route: Any,
    parent: PatternBuilder,
    compiler: PatternCompileFn,
    methods: Sequence[str],
    include_unhandled: bool,
    entries: List[CompiledRouteEntry],
    seen: Set[int],
) -> None:
    if id(route) in seen:
        raise RouteTreeInvalidFault(route, "route node is registered more than once (shared or cyclic)")
    seen.add(id(route))

    builder = parent.copy()
    compiled = compiler(getattr(route, "pattern", None), builder)
    route_methods = handled_methods(route, methods)

    if route_methods or include_unhandled:
        entries.append(CompiledRouteEntry(route, compiled, route_methods))
    else:
        logger.debug("Skipping %r: no handler for any of %s", route, ", ".join(methods))

    for child in children_of(route):
        _walk(child, builder, compiler, methods, include_unhandled, entries, seen)
