"""Shared Hypothesis strategies for validator testing.

This module provides reusable Hypothesis strategies for generating
values that satisfy or violate the built-in validators.
"""

from __future__ import annotations

import hypothesis.strategies as st

# =============================================================================
# Value Constants
# =============================================================================

WHITESPACE = [" ", "\t", "\n", "  ", " \t "]

SLUG_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789-"

COLORS = ["red", "green", "blue", "cyan", "magenta", "yellow"]

# =============================================================================
# String Strategies
# =============================================================================


def non_empty_string_strategy() -> st.SearchStrategy[str]:
    """Generate strings of at least one character."""
    return st.text(min_size=1, max_size=50)


def whitespace_string_strategy() -> st.SearchStrategy[str]:
    """Generate whitespace-only strings."""
    return st.sampled_from(WHITESPACE)


def slug_strategy() -> st.SearchStrategy[str]:
    """Generate lowercase slugs matching ``[a-z0-9-]+``."""
    return st.text(alphabet=SLUG_ALPHABET, min_size=1, max_size=30)


def non_slug_strategy() -> st.SearchStrategy[str]:
    """Generate strings containing at least one character outside the slug alphabet."""
    bad_char = st.sampled_from("ABCXYZ_!@ .")
    return st.tuples(slug_strategy(), bad_char, slug_strategy()).map("".join)


# =============================================================================
# Length / Range Strategies
# =============================================================================


@st.composite
def length_bounds_strategy(draw: st.DrawFn) -> tuple[int, int]:
    """Generate consistent (min_length, max_length) pairs."""
    low = draw(st.integers(min_value=0, max_value=20))
    high = draw(st.integers(min_value=low, max_value=low + 20))
    return low, high


@st.composite
def range_bounds_strategy(draw: st.DrawFn) -> tuple[int, int]:
    """Generate consistent (minimum, maximum) pairs."""
    low = draw(st.integers(min_value=-1000, max_value=1000))
    high = draw(st.integers(min_value=low, max_value=low + 1000))
    return low, high


def sized_value_strategy(max_size: int = 50) -> st.SearchStrategy[object]:
    """Generate strings, lists and tuples of bounded size."""
    return st.one_of(
        st.text(max_size=max_size),
        st.lists(st.integers(), max_size=max_size),
        st.lists(st.booleans(), max_size=max_size).map(tuple),
    )


# =============================================================================
# Mixed Input Strategies
# =============================================================================


def optional_string_strategy() -> st.SearchStrategy[str | None]:
    """Generate strings (possibly empty) or None."""
    return st.one_of(st.none(), st.text(max_size=30))


def non_string_strategy() -> st.SearchStrategy[object]:
    """Generate values that are neither strings nor None."""
    return st.one_of(
        st.integers(),
        st.floats(allow_nan=False),
        st.booleans(),
        st.lists(st.integers(), max_size=3),
        st.dictionaries(st.text(max_size=3), st.integers(), max_size=3),
    )
