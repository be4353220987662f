"""Route nodes, compiled table entries and match results."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, NamedTuple, Optional, Sequence, Tuple

from ..patterns import CompiledPattern


class Route:
    """
    Declarative route node.

    Any object with a ``pattern`` attribute, optional ``children`` and
    method-named callables can be registered; this class saves writing
    one for every route::

        Route("users", get=list_users, children=[
            Route(":id", get=show_user, delete=remove_user),
        ])
    """

    def __init__(self, pattern: Any, children: Sequence[Any] = (), **handlers: Callable[..., Any]):
        self.pattern = pattern
        self.children = list(children)
        for method, handler in handlers.items():
            setattr(self, method, handler)

    def __repr__(self) -> str:
        return f"Route({self.pattern!r})"


def handler_for(route: Any, method: Optional[str]) -> Optional[Callable[..., Any]]:
    """Return *route*'s handler for *method*, or None."""
    if not method:
        return None
    handler = getattr(route, method, None)
    return handler if callable(handler) else None


def handled_methods(route: Any, methods: Sequence[str]) -> Tuple[str, ...]:
    """Subset of *methods* that *route* exposes a handler for, in order."""
    return tuple(method for method in methods if handler_for(route, method) is not None)


def children_of(route: Any) -> Sequence[Any]:
    return getattr(route, "children", None) or ()


class CompiledRouteEntry(NamedTuple):
    """A route paired with its compiled pattern (ancestor prefix included)."""
    route: Any
    compiled: CompiledPattern
    methods: Tuple[str, ...]


@dataclass(frozen=True)
class RouteMatch:
    """Result of a successful resolve() call."""
    route: Any
    params: Dict[str, str]
    compiled: CompiledPattern
    method: Optional[str] = None

    # params is a dict; hash only the immutable fields eq also compares
    def __hash__(self) -> int:
        return hash((self.compiled, self.method))

    @property
    def pattern(self) -> Any:
        """The winning route's own pattern."""
        return self.route.pattern

    def get_handler(self, method: Optional[str] = None) -> Optional[Callable[..., Any]]:
        """Handler for *method*, defaulting to the method resolved with."""
        return handler_for(self.route, method or self.method)

    def get_params(self) -> Dict[str, str]:
        return dict(self.params)
