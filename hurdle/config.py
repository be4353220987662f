"""
Config system - typed pattern syntax configuration.

A PatternSyntax describes how a compiler reads a domain pattern string:
the segment separator, the parameter marker and the wildcard tokens.
Two presets ship with the package, one for URL paths and one for
colon-delimited event names.
"""

import re
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from .faults import ConfigInvalidFault


# Excludes the path separator, query marker and fragment marker
DEFAULT_CONSTRAINT = r"[^/?#]+"

HTTP_METHODS: Tuple[str, ...] = ("get", "post", "put", "delete", "patch", "head", "options")

WS_METHODS: Tuple[str, ...] = ("connect", "message", "disconnect")


@dataclass(frozen=True)
class PatternSyntax:
    """
    Tokens recognised by a pattern compiler.

    Attributes:
        separator: Segment separator ("/" for paths, ":" for events)
        param_prefix: Marker of a named parameter segment, None disables params
        wildcard: Token for a single-segment wildcard
        deep_wildcard: Token for a multi-segment wildcard, None disables it
        default_constraint: Sub-expression captured by params and wildcards
        root_anchor: Always emit a leading separator (path style)
        leading_separator: Keep a separator the pattern itself starts with
    """
    separator: str = "/"
    param_prefix: Optional[str] = ":"
    wildcard: str = "*"
    deep_wildcard: Optional[str] = "**"
    default_constraint: str = DEFAULT_CONSTRAINT
    root_anchor: bool = True
    leading_separator: bool = False

    def __post_init__(self):
        if not self.separator:
            raise ConfigInvalidFault("separator", "must be a non-empty string")
        if not self.wildcard:
            raise ConfigInvalidFault("wildcard", "must be a non-empty string")
        if self.separator in self.wildcard:
            raise ConfigInvalidFault("wildcard", f"must not contain the separator {self.separator!r}")
        if self.param_prefix is not None:
            if not self.param_prefix:
                raise ConfigInvalidFault("param_prefix", "must be a non-empty string or None")
            if self.param_prefix == self.separator:
                raise ConfigInvalidFault("param_prefix", "must differ from the separator")
        if self.deep_wildcard is not None:
            if self.deep_wildcard == self.wildcard:
                raise ConfigInvalidFault("deep_wildcard", "must differ from the wildcard token")
            if self.separator in self.deep_wildcard:
                raise ConfigInvalidFault("deep_wildcard", f"must not contain the separator {self.separator!r}")
        try:
            re.compile(self.default_constraint)
        except re.error as exc:
            raise ConfigInvalidFault("default_constraint", str(exc)) from exc

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PatternSyntax":
        """
        Build a syntax from a plain mapping (e.g. a parsed config file).

        Unknown keys are rejected so typos surface at startup.
        """
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                raise ConfigInvalidFault(key, "unknown pattern syntax option")
        return cls(**dict(data))

    def merge(self, **overrides: Any) -> "PatternSyntax":
        """Return a copy with *overrides* applied (validated again)."""
        return replace(self, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


HTTP_SYNTAX = PatternSyntax()

WS_SYNTAX = PatternSyntax(
    separator=":",
    param_prefix=None,
    deep_wildcard=None,
    root_anchor=False,
    leading_separator=True,
)
