"""
Hurdle - route matching engine for URL paths and event names.

Register nested route trees once, then resolve request paths (or event
names) to the single most specific matching route:

    from hurdle import Route, create_http_router

    router = create_http_router(
        Route("users", get=list_users, children=[
            Route(":id", get=show_user),
            Route("admin", get=admin_panel),
        ]),
    )

    match = router.resolve("/users/42", "get")
    match.get_handler()  # show_user
    match.params         # {"id": "42"}
"""

from .config import (
    PatternSyntax,
    HTTP_SYNTAX,
    WS_SYNTAX,
    HTTP_METHODS,
    WS_METHODS,
    DEFAULT_CONSTRAINT,
)
from .faults import (
    Fault,
    FaultDomain,
    Severity,
    ConfigInvalidFault,
    RoutingFault,
    RouteConflictFault,
    RouteTreeInvalidFault,
    PatternInvalidFault,
)
from .patterns import (
    SegmentKind,
    PatternBuilder,
    CompiledPattern,
    PatternCompiler,
    PathPatternCompiler,
    EventPatternCompiler,
    compile_http_pattern,
    compile_ws_pattern,
    calculate_specificity,
    select_most_specific,
    select_most_specific_route,
    select_most_specific_ws_route,
)
from .routing import (
    Route,
    RouteMatch,
    CompiledRouteEntry,
    Router,
    HTTPRouter,
    WSRouter,
    create_http_router,
    create_ws_router,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "PatternSyntax",
    "HTTP_SYNTAX",
    "WS_SYNTAX",
    "HTTP_METHODS",
    "WS_METHODS",
    "DEFAULT_CONSTRAINT",
    # Faults
    "Fault",
    "FaultDomain",
    "Severity",
    "ConfigInvalidFault",
    "RoutingFault",
    "RouteConflictFault",
    "RouteTreeInvalidFault",
    "PatternInvalidFault",
    # Patterns
    "SegmentKind",
    "PatternBuilder",
    "CompiledPattern",
    "PatternCompiler",
    "PathPatternCompiler",
    "EventPatternCompiler",
    "compile_http_pattern",
    "compile_ws_pattern",
    "calculate_specificity",
    "select_most_specific",
    "select_most_specific_route",
    "select_most_specific_ws_route",
    # Routing
    "Route",
    "RouteMatch",
    "CompiledRouteEntry",
    "Router",
    "HTTPRouter",
    "WSRouter",
    "create_http_router",
    "create_ws_router",
]
