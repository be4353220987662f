"""
Tests for PatternSyntax configuration.
"""

import pytest

from hurdle.config import DEFAULT_CONSTRAINT, HTTP_SYNTAX, WS_SYNTAX, PatternSyntax
from hurdle.faults import ConfigInvalidFault


class TestPresets:

    def test_http_syntax(self):
        assert HTTP_SYNTAX.separator == "/"
        assert HTTP_SYNTAX.param_prefix == ":"
        assert HTTP_SYNTAX.deep_wildcard == "**"
        assert HTTP_SYNTAX.default_constraint == DEFAULT_CONSTRAINT
        assert HTTP_SYNTAX.root_anchor is True

    def test_ws_syntax(self):
        assert WS_SYNTAX.separator == ":"
        assert WS_SYNTAX.param_prefix is None
        assert WS_SYNTAX.deep_wildcard is None
        assert WS_SYNTAX.root_anchor is False
        assert WS_SYNTAX.leading_separator is True

    def test_frozen(self):
        with pytest.raises(AttributeError):
            HTTP_SYNTAX.separator = "."


class TestValidation:

    @pytest.mark.parametrize(
        "overrides, key",
        [
            ({"separator": ""}, "separator"),
            ({"wildcard": ""}, "wildcard"),
            ({"wildcard": "/"}, "wildcard"),
            ({"param_prefix": ""}, "param_prefix"),
            ({"param_prefix": "/"}, "param_prefix"),
            ({"deep_wildcard": "*"}, "deep_wildcard"),
            ({"deep_wildcard": "/**"}, "deep_wildcard"),
            ({"default_constraint": "("}, "default_constraint"),
        ],
    )
    def test_invalid_values(self, overrides, key):
        with pytest.raises(ConfigInvalidFault) as exc_info:
            PatternSyntax(**overrides)

        assert exc_info.value.metadata["key"] == key


class TestFromDict:

    def test_from_dict(self):
        syntax = PatternSyntax.from_dict({"separator": ".", "param_prefix": "$"})

        assert syntax.separator == "."
        assert syntax.param_prefix == "$"
        assert syntax.wildcard == "*"

    def test_unknown_key_rejected(self):
        with pytest.raises(ConfigInvalidFault, match="seperator"):
            PatternSyntax.from_dict({"seperator": "."})

    def test_to_dict_roundtrip(self):
        assert PatternSyntax.from_dict(WS_SYNTAX.to_dict()) == WS_SYNTAX


class TestMerge:

    def test_merge_overrides(self):
        syntax = HTTP_SYNTAX.merge(default_constraint=r"\d+")

        assert syntax.default_constraint == r"\d+"
        assert syntax.separator == "/"
        assert HTTP_SYNTAX.default_constraint == DEFAULT_CONSTRAINT

    def test_merge_validates(self):
        with pytest.raises(ConfigInvalidFault):
            HTTP_SYNTAX.merge(separator="")
