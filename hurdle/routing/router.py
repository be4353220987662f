"""
Router - compiled route table with most-specific match selection.

The table is compiled and validated once, in the constructor. A router
that raised during construction does not exist; a constructed router is
never mutated, so resolve() may be called from any number of threads.

Resolution is a linear scan: every entry whose expression matches the
input (and, when a method is given, whose route handles it) is a
candidate, and the selector picks one of several candidates.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ..config import HTTP_METHODS, WS_METHODS
from ..patterns import compile_http_pattern, compile_ws_pattern, calculate_specificity, select_most_specific
from .flatten import PatternCompileFn, flatten_routes
from .route import CompiledRouteEntry, RouteMatch
from .validate import assert_unique_routes

logger = logging.getLogger("hurdle.routing.router")

SelectFn = Callable[[List[RouteMatch]], RouteMatch]


class Router:
    """
    Generic route-matching engine.

    Args:
        methods: Method names handlers are looked up by. An empty
            sequence makes the router method-agnostic.
        compiler: Pattern compiler ``(pattern, builder) -> CompiledPattern``
        selector: Picks one RouteMatch out of several candidates
        *routes: Root route nodes

    Usage::

        router = Router(
            (),
            compile_ws_pattern,
            select_most_specific,
            Route("chat:*"),
            Route("chat:message"),
        )
        router.resolve("chat:message").pattern  # "chat:message"

    Raises:
        RouteConflictFault: two routes share a (method, expression) key
        PatternInvalidFault: a pattern cannot be compiled
        RouteTreeInvalidFault: a route node is shared or cyclic
    """

    # Keep routes exposing no handler in the table of a method-aware router
    include_unhandled = False

    __slots__ = ("methods", "compiler", "selector", "_entries")

    def __init__(
        self,
        methods: Sequence[str],
        compiler: PatternCompileFn,
        selector: SelectFn,
        *routes: Any,
    ):
        self.methods: Tuple[str, ...] = tuple(methods)
        self.compiler = compiler
        self.selector = selector

        entries = flatten_routes(
            routes,
            compiler,
            self.methods,
            include_unhandled=self.include_unhandled or not self.methods,
        )
        assert_unique_routes(entries)
        self._entries: Tuple[CompiledRouteEntry, ...] = tuple(entries)

        logger.debug(
            "%s compiled %d route entries from %d root routes",
            self.__class__.__name__,
            len(self._entries),
            len(routes),
        )

    @property
    def entries(self) -> Tuple[CompiledRouteEntry, ...]:
        """The compiled table, in registration (pre-order) order."""
        return self._entries

    @property
    def method_aware(self) -> bool:
        return bool(self.methods)

    def resolve(self, path: str, method: Optional[str] = None) -> Optional[RouteMatch]:
        """
        Resolve *path* (and optionally *method*) to a single route.

        Returns None when nothing matches. A method-agnostic router
        ignores *method* when filtering but still binds it to the result
        for handler lookup.
        """
        filter_method = method if (method is not None and self.method_aware) else None
        matches: List[RouteMatch] = []

        for entry in self._entries:
            if filter_method is not None and filter_method not in entry.methods:
                continue
            params = entry.compiled.match(path)
            if params is None:
                continue
            matches.append(RouteMatch(entry.route, params, entry.compiled, method))

        if not matches:
            return None
        if len(matches) == 1:
            return matches[0]
        return self.selector(matches)

    def get_routes(self) -> List[Dict[str, Any]]:
        """Describe every compiled entry."""
        return [
            {
                "pattern": entry.route.pattern,
                "source": entry.compiled.source,
                "methods": list(entry.methods),
                "params": list(entry.compiled.param_names),
                "specificity": calculate_specificity(entry.compiled.segments),
            }
            for entry in self._entries
        ]

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(entries={len(self._entries)})"


class HTTPRouter(Router):
    """
    Router for URL paths and HTTP verbs.

    Only routes exposing at least one HTTP verb handler are compiled into
    the table; grouping routes still lend their pattern to their children.
    """

    __slots__ = ()

    def __init__(
        self,
        *routes: Any,
        compiler: PatternCompileFn = compile_http_pattern,
        selector: SelectFn = select_most_specific,
    ):
        super().__init__(HTTP_METHODS, compiler, selector, *routes)


class WSRouter(Router):
    """
    Router for colon-delimited WebSocket event names.

    Event routes are often declared with a pattern only, so every route is
    compiled into the table. Passing a lifecycle method to resolve()
    restricts candidates to routes handling it.
    """

    include_unhandled = True

    __slots__ = ()

    def __init__(
        self,
        *routes: Any,
        compiler: PatternCompileFn = compile_ws_pattern,
        selector: SelectFn = select_most_specific,
    ):
        super().__init__(WS_METHODS, compiler, selector, *routes)


def create_http_router(*routes: Any) -> HTTPRouter:
    """Build an HTTPRouter with the default path compiler and selector."""
    return HTTPRouter(*routes)


def create_ws_router(*routes: Any) -> WSRouter:
    """Build a WSRouter with the default event compiler and selector."""
    return WSRouter(*routes)
