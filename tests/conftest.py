"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite. Select a profile with the HYPOTHESIS_PROFILE
environment variable (defaults to "dev").
"""

from __future__ import annotations

import os

import pytest
from hypothesis import Verbosity, settings

from ryandata_geocode_types import AddressCategory

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def component_types() -> list[str]:
    """Category tokens of a typical street-level address component."""
    return ["street_address", "political", "brand_new_category"]


@pytest.fixture
def known_categories() -> tuple[AddressCategory, ...]:
    return AddressCategory.known()
