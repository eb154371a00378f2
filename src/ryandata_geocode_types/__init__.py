"""ryandata-geocode-types: Address category codes for geocoding API clients.

This package provides the closed set of address and place categories used
to tag geocoding results, with:
- Forgiving lookup (unrecognized server tokens become ``UNKNOWN``)
- Strict wire serialization (``UNKNOWN`` is never sent back)
- Pydantic field types for client request/response models
- Helpers for joining several values into one request parameter

Quick Start:
    >>> from ryandata_geocode_types import AddressCategory
    >>> AddressCategory.from_literal("street_address")
    <AddressCategory.STREET_ADDRESS: 'street_address'>
    >>> str(AddressCategory.LOCALITY)
    'locality'

    # Join categories for a request parameter
    >>> from ryandata_geocode_types import join_url_values
    >>> join_url_values("|", [AddressCategory.ROUTE, AddressCategory.LOCALITY])
    'route|locality'
"""

from __future__ import annotations

from ryandata_geocode_types.models import (
    ADDRESS_CATEGORY_LITERALS,
    ADMINISTRATIVE_AREA_LEVELS,
    PACKAGE_NAME,
    SUBLOCALITY_LEVELS,
    AddressCategory,
    AddressCategoryField,
    AddressCategoryList,
    InvalidSerializationRequest,
    RyanDataGeocodeError,
    parse_address_categories,
)
from ryandata_geocode_types.protocols import UrlValueProtocol
from ryandata_geocode_types.urls import join_url_values, to_url_value

__version__ = "0.1.0"
__package_name__ = "ryandata-geocode-types"

__all__ = [
    # Version
    "__version__",
    # Categories
    "AddressCategory",
    "ADDRESS_CATEGORY_LITERALS",
    "ADMINISTRATIVE_AREA_LEVELS",
    "SUBLOCALITY_LEVELS",
    # Errors
    "PACKAGE_NAME",
    "RyanDataGeocodeError",
    "InvalidSerializationRequest",
    # Pydantic field types
    "AddressCategoryField",
    "AddressCategoryList",
    "parse_address_categories",
    # Protocols
    "UrlValueProtocol",
    # URL helpers
    "join_url_values",
    "to_url_value",
]
