"""Property-based tests using Hypothesis for address categories.

This module verifies the lookup and serialization invariants over
generated category tokens.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ryandata_geocode_types import (
    AddressCategory,
    InvalidSerializationRequest,
    join_url_values,
    parse_address_categories,
)
from tests.strategies import (
    category_token_list_strategy,
    known_category_strategy,
    known_literal_strategy,
    unrecognized_literal_strategy,
)

# =============================================================================
# Lookup Properties
# =============================================================================


class TestLookupProperties:
    """Property tests for AddressCategory.from_literal."""

    @given(known_category_strategy())
    def test_round_trip_through_literal(self, category: AddressCategory) -> None:
        """Looking up a category's own literal returns the same member."""
        assert AddressCategory.from_literal(category.to_canonical_literal()) is category

    @given(known_literal_strategy())
    def test_known_literals_resolve_to_known_members(self, literal: str) -> None:
        category = AddressCategory.from_literal(literal)

        assert category is not AddressCategory.UNKNOWN
        assert str(category) == literal

    @given(unrecognized_literal_strategy())
    def test_unrecognized_literals_fall_back(self, token: str) -> None:
        """Lookup never raises; anything unknown becomes the sentinel."""
        assert AddressCategory.from_literal(token) is AddressCategory.UNKNOWN

    @given(st.text())
    def test_lookup_is_total(self, token: str) -> None:
        category = AddressCategory.from_literal(token)

        assert isinstance(category, AddressCategory)
        if category is not AddressCategory.UNKNOWN:
            assert category.value == token


# =============================================================================
# Serialization Properties
# =============================================================================


class TestSerializationProperties:
    """Property tests for wire values."""

    @given(known_category_strategy())
    def test_url_value_equals_canonical_literal(self, category: AddressCategory) -> None:
        assert category.to_url_value() == category.to_canonical_literal()

    @given(unrecognized_literal_strategy())
    def test_unrecognized_tokens_never_reach_the_wire(self, token: str) -> None:
        with pytest.raises(InvalidSerializationRequest):
            AddressCategory.from_literal(token).to_url_value()

    @given(st.lists(known_category_strategy(), max_size=10))
    def test_join_matches_literal_join(self, categories: list[AddressCategory]) -> None:
        joined = join_url_values("|", categories)

        assert joined == "|".join(c.value for c in categories)

    @given(
        st.lists(known_category_strategy(), max_size=5),
        st.lists(known_category_strategy(), max_size=5),
    )
    def test_join_rejects_unknown_anywhere(
        self, before: list[AddressCategory], after: list[AddressCategory]
    ) -> None:
        with pytest.raises(InvalidSerializationRequest):
            join_url_values("|", [*before, AddressCategory.UNKNOWN, *after])


# =============================================================================
# Field Validation Properties
# =============================================================================


class TestFieldProperties:
    """Property tests for the Pydantic category list."""

    @given(category_token_list_strategy())
    def test_parse_preserves_length_and_order(self, tokens: list[str]) -> None:
        categories = parse_address_categories(tokens)

        assert len(categories) == len(tokens)
        for token, category in zip(tokens, categories):
            assert category is AddressCategory.from_literal(token)
