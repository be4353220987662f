"""
Shared test fixtures for the hurdle test suite.
"""

import pytest

from hurdle import PatternBuilder


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def builder():
    """Fresh, empty pattern builder."""
    return PatternBuilder()


@pytest.fixture
def returns():
    """Factory for handlers returning a fixed value."""

    def make(value):
        def handler(*args, **kwargs):
            return value
        return handler

    return make


@pytest.fixture
def exact_compiler():
    """Compiler matching the pattern text verbatim after the inherited prefix."""

    def compile_exact(pattern, builder):
        return builder.exact(pattern).build()

    return compile_exact
