"""
Routing - nested route trees compiled into an immutable match table.

Routes are flattened and validated when a router is constructed; every
resolve() afterwards is a read-only scan of the compiled table.
"""

from .route import Route, RouteMatch, CompiledRouteEntry, handler_for, handled_methods
from .flatten import flatten_routes
from .validate import assert_unique_routes
from .router import Router, HTTPRouter, WSRouter, create_http_router, create_ws_router

__all__ = [
    "Route",
    "RouteMatch",
    "CompiledRouteEntry",
    "handler_for",
    "handled_methods",
    "flatten_routes",
    "assert_unique_routes",
    "Router",
    "HTTPRouter",
    "WSRouter",
    "create_http_router",
    "create_ws_router",
]
