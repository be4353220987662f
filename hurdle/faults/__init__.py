"""
Hurdle faults - structured error types.

Faults are typed exceptions carrying a stable code, a domain, a severity
and metadata. Every failure the router can detect is raised as a fault
while the router is being built; resolving never raises.

Core exports:
- Fault: Base fault class
- FaultDomain: Domain taxonomy
- Severity: Severity levels
- RouteConflictFault, RouteTreeInvalidFault, PatternInvalidFault: routing faults
- ConfigInvalidFault: pattern syntax configuration faults
"""

from .core import (
    Fault,
    FaultDomain,
    Severity,
    DOMAIN_DEFAULTS,
)
from .domains import (
    ConfigFault,
    ConfigInvalidFault,
    RoutingFault,
    RouteConflictFault,
    RouteTreeInvalidFault,
    PatternInvalidFault,
)

__all__ = [
    # Core types
    "Fault",
    "FaultDomain",
    "Severity",
    "DOMAIN_DEFAULTS",
    # Domain faults
    "ConfigFault",
    "ConfigInvalidFault",
    "RoutingFault",
    "RouteConflictFault",
    "RouteTreeInvalidFault",
    "PatternInvalidFault",
]
