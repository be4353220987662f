"""
Tests for WSRouter - event name resolution.
"""

import pytest

from hurdle import (
    WS_METHODS,
    Route,
    RouteConflictFault,
    WSRouter,
    create_ws_router,
)


class TestWSRouter:

    def test_matches_exact_event(self):
        router = WSRouter(Route("chat:message"))

        matched = router.resolve("chat:message")
        assert matched is not None
        assert matched.pattern == "chat:message"

    def test_returns_none_for_unmatched_event(self):
        router = WSRouter(Route("chat:message"))

        assert router.resolve("chat:typing") is None

    def test_wildcard_event(self):
        router = WSRouter(Route("chat:*"))

        assert router.resolve("chat:message").pattern == "chat:*"
        assert router.resolve("chat:typing").pattern == "chat:*"
        assert router.resolve("user:online") is None

    def test_nested_event_routes(self):
        router = WSRouter(Route("chat", children=[Route(":message")]))

        assert router.resolve("chat").pattern == "chat"
        assert router.resolve("chat:message").pattern == ":message"

    def test_nested_child_without_colon_concatenates(self):
        router = WSRouter(Route("chat", children=[Route("room")]))

        assert router.resolve("chatroom").pattern == "room"
        assert router.resolve("chat:room") is None

    def test_prefers_exact_over_wildcard(self):
        router = WSRouter(
            Route("chat:*"),
            Route("chat:message"),
        )

        assert router.resolve("chat:message").pattern == "chat:message"
        assert router.resolve("chat:typing").pattern == "chat:*"

    def test_prefers_most_literal_segments(self):
        router = WSRouter(
            Route("*:*:*"),
            Route("chat:*:*"),
            Route("chat:room:*"),
            Route("chat:room:message"),
        )

        assert router.resolve("chat:room:message").pattern == "chat:room:message"
        assert router.resolve("chat:room:typing").pattern == "chat:room:*"
        assert router.resolve("chat:lobby:typing").pattern == "chat:*:*"
        assert router.resolve("user:lobby:typing").pattern == "*:*:*"

    def test_wildcard_spans_event_separator(self):
        router = WSRouter(Route("chat:*"))

        assert router.resolve("chat:room:message").pattern == "chat:*"
        assert router.resolve("chat") is None

    def test_missing_middle_segment(self):
        router = WSRouter(Route("chat:room:*:message"))

        assert router.resolve("chat:room:message") is None

    def test_colon_segments_are_not_params(self):
        router = WSRouter(Route("chat:message"))

        assert router.resolve("chat:message").params == {}

    def test_routes_without_handlers_are_resolvable(self):
        router = WSRouter(Route("ping"))

        matched = router.resolve("ping")
        assert matched is not None
        assert matched.get_handler() is None

    def test_lifecycle_handlers(self, returns):
        router = WSRouter(
            Route("chat:*", connect=returns("joined"), disconnect=returns("left")),
            Route("chat:message", message=returns("message")),
        )

        assert router.resolve("chat:message", "message").get_handler()() == "message"
        assert router.resolve("chat:message", "connect").get_handler()() == "joined"
        assert router.resolve("chat:typing", "message") is None
        assert router.resolve("chat:typing", "disconnect").get_handler()() == "left"

    def test_without_method_considers_every_route(self, returns):
        router = WSRouter(
            Route("chat:*", connect=returns("joined")),
            Route("chat:message"),
        )

        assert router.resolve("chat:message").pattern == "chat:message"

    def test_duplicate_events(self):
        with pytest.raises(RouteConflictFault):
            WSRouter(Route("chat:message"), Route("chat:message"))

    def test_duplicate_nested_events(self):
        with pytest.raises(RouteConflictFault):
            WSRouter(
                Route("chat:message"),
                Route("chat", children=[Route(":message")]),
            )

    def test_pattern_only_event_conflicts_with_handled_event(self, returns):
        with pytest.raises(RouteConflictFault) as exc_info:
            WSRouter(
                Route("chat:*"),
                Route("chat:*", message=returns("message")),
            )

        assert exc_info.value.method == "message"
        assert exc_info.value.source == "^chat:(?:[^/?#]+)$"

    def test_handled_event_conflicts_with_later_pattern_only_event(self, returns):
        with pytest.raises(RouteConflictFault) as exc_info:
            WSRouter(
                Route("chat", children=[Route(":message", connect=returns("joined"))]),
                Route("chat:message"),
            )

        assert exc_info.value.method is None
        assert exc_info.value.conflicting_pattern == ":message"

    def test_same_event_different_lifecycle_methods(self, returns):
        router = WSRouter(
            Route("chat:message", connect=returns("connect")),
            Route("chat:message", message=returns("message")),
        )

        assert router.resolve("chat:message", "connect").get_handler()() == "connect"
        assert router.resolve("chat:message", "message").get_handler()() == "message"

    def test_double_star_is_literal(self):
        router = WSRouter(Route("chat:**"))

        assert router.resolve("chat:**") is not None
        assert router.resolve("chat:room") is None


class TestCreateWsRouter:

    def test_builds_ws_router(self):
        router = create_ws_router(Route("chat:message"))

        assert isinstance(router, WSRouter)
        assert router.methods == WS_METHODS
        assert router.resolve("chat:message").pattern == "chat:message"
