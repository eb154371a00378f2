"""Address category models package.

This package contains the category enumeration, its error classes and the
Pydantic field types built on top of it.
"""

from __future__ import annotations

from ryandata_geocode_types.models.enums import (
    ADDRESS_CATEGORY_LITERALS,
    ADMINISTRATIVE_AREA_LEVELS,
    SUBLOCALITY_LEVELS,
    AddressCategory,
)
from ryandata_geocode_types.models.errors import (
    PACKAGE_NAME,
    InvalidSerializationRequest,
    RyanDataGeocodeError,
)
from ryandata_geocode_types.models.fields import (
    AddressCategoryField,
    AddressCategoryList,
    parse_address_categories,
)

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "RyanDataGeocodeError",
    "InvalidSerializationRequest",
    # Enums and constants
    "AddressCategory",
    "ADDRESS_CATEGORY_LITERALS",
    "ADMINISTRATIVE_AREA_LEVELS",
    "SUBLOCALITY_LEVELS",
    # Pydantic field types
    "AddressCategoryField",
    "AddressCategoryList",
    "parse_address_categories",
]
