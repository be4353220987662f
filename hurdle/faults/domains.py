"""
Hurdle faults - domain-specific fault types.

Provides concrete fault classes for each domain:
- CONFIG faults
- ROUTING faults
"""

from typing import Any, Optional

from .core import Fault, FaultDomain, Severity


# ============================================================================
# CONFIG Faults
# ============================================================================

class ConfigFault(Fault):
    """Base class for configuration faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.FATAL,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.CONFIG,
            severity=severity,
            retryable=False,
            public=False,
            metadata=metadata,
        )


class ConfigInvalidFault(ConfigFault):
    """Configuration value is invalid."""

    def __init__(self, key: str, reason: str, **kwargs):
        super().__init__(
            code="CONFIG_INVALID",
            message=f"Invalid configuration for '{key}': {reason}",
            metadata={"key": key, "reason": reason, **kwargs.get("metadata", {})},
        )


# ============================================================================
# ROUTING Faults
# ============================================================================

class RoutingFault(Fault):
    """Base class for routing faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.ERROR,
        public: bool = False,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.ROUTING,
            severity=severity,
            retryable=False,
            public=public,
            metadata=metadata,
        )


class RouteConflictFault(RoutingFault):
    """Two routes compile to the same (method, expression) discriminator."""

    def __init__(
        self,
        pattern: Any,
        method: Optional[str],
        source: str,
        conflicting_pattern: Any = None,
        **kwargs,
    ):
        target = f"{method} {pattern}" if method else f"{pattern}"
        if conflicting_pattern is not None and conflicting_pattern != pattern:
            target = f"{target} (conflicts with {conflicting_pattern})"
        super().__init__(
            code="ROUTE_CONFLICT",
            message=f"Duplicate route detected: [ {target} ] compiles to {source}",
            severity=Severity.FATAL,
            metadata={
                "pattern": pattern,
                "method": method,
                "source": source,
                "conflicting_pattern": conflicting_pattern,
                **kwargs.get("metadata", {}),
            },
        )
        self.pattern = pattern
        self.method = method
        self.source = source
        self.conflicting_pattern = conflicting_pattern


class RouteTreeInvalidFault(RoutingFault):
    """A route node is registered twice or is its own ancestor."""

    def __init__(self, route: Any, reason: str, **kwargs):
        pattern = getattr(route, "pattern", None)
        super().__init__(
            code="ROUTE_TREE_INVALID",
            message=f"Invalid route tree at {route!r}: {reason}",
            severity=Severity.FATAL,
            metadata={"pattern": pattern, "reason": reason, **kwargs.get("metadata", {})},
        )
        self.route = route
        self.reason = reason


class PatternInvalidFault(RoutingFault):
    """Route pattern is invalid."""

    def __init__(self, pattern: Any, reason: str, **kwargs):
        super().__init__(
            code="PATTERN_INVALID",
            message=f"Invalid route pattern '{pattern}': {reason}",
            severity=Severity.FATAL,
            metadata={"pattern": pattern, "reason": reason, **kwargs.get("metadata", {})},
        )
        self.pattern = pattern
        self.reason = reason
