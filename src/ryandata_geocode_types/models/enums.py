"""Address category enumeration and derived constants.

Categories tag geocoded address components and places. Known members map to
the lowercase literals documented by the geocoding API; any other token
received from the server maps to ``AddressCategory.UNKNOWN``.
"""

from __future__ import annotations

import logging
from enum import Enum

from ryandata_geocode_types.models.errors import InvalidSerializationRequest

logger = logging.getLogger(__name__)


class AddressCategory(str, Enum):
    """Enumeration of address component and place categories.

    Lookup is forgiving: ``AddressCategory("not_a_category")`` returns
    ``UNKNOWN`` instead of raising, so newer server vocabularies degrade
    gracefully. Serialization is strict: ``UNKNOWN.to_url_value()`` raises.
    """

    STREET_ADDRESS = "street_address"
    ROUTE = "route"
    INTERSECTION = "intersection"
    POLITICAL = "political"
    COUNTRY = "country"
    # Civil entities below the country level; not every nation has all five
    ADMINISTRATIVE_AREA_LEVEL_1 = "administrative_area_level_1"
    ADMINISTRATIVE_AREA_LEVEL_2 = "administrative_area_level_2"
    ADMINISTRATIVE_AREA_LEVEL_3 = "administrative_area_level_3"
    ADMINISTRATIVE_AREA_LEVEL_4 = "administrative_area_level_4"
    ADMINISTRATIVE_AREA_LEVEL_5 = "administrative_area_level_5"
    COLLOQUIAL_AREA = "colloquial_area"
    LOCALITY = "locality"
    WARD = "ward"  # Japanese locality
    # Larger level numbers indicate a smaller area
    SUBLOCALITY = "sublocality"
    SUBLOCALITY_LEVEL_1 = "sublocality_level_1"
    SUBLOCALITY_LEVEL_2 = "sublocality_level_2"
    SUBLOCALITY_LEVEL_3 = "sublocality_level_3"
    SUBLOCALITY_LEVEL_4 = "sublocality_level_4"
    SUBLOCALITY_LEVEL_5 = "sublocality_level_5"
    NEIGHBORHOOD = "neighborhood"
    PREMISE = "premise"
    SUBPREMISE = "subpremise"
    POSTAL_CODE = "postal_code"
    POSTAL_CODE_PREFIX = "postal_code_prefix"
    NATURAL_FEATURE = "natural_feature"
    AIRPORT = "airport"
    UNIVERSITY = "university"
    PARK = "park"
    POINT_OF_INTEREST = "point_of_interest"
    ESTABLISHMENT = "establishment"
    BUS_STATION = "bus_station"
    TRAIN_STATION = "train_station"
    SUBWAY_STATION = "subway_station"
    TRANSIT_STATION = "transit_station"
    LIGHT_RAIL_STATION = "light_rail_station"
    CHURCH = "church"
    FINANCE = "finance"
    POST_OFFICE = "post_office"
    PLACE_OF_WORSHIP = "place_of_worship"
    POSTAL_TOWN = "postal_town"
    # Place categories seen in responses but not documented as return types
    SYNAGOGUE = "synagogue"
    FOOD = "food"
    GROCERY_OR_SUPERMARKET = "grocery_or_supermarket"
    STORE = "store"
    LAWYER = "lawyer"
    HEALTH = "health"
    INSURANCE_AGENCY = "insurance_agency"
    GAS_STATION = "gas_station"
    CAR_DEALER = "car_dealer"
    CAR_REPAIR = "car_repair"
    MEAL_TAKEAWAY = "meal_takeaway"
    FURNITURE_STORE = "furniture_store"
    HOME_GOODS_STORE = "home_goods_store"
    SHOPPING_MALL = "shopping_mall"
    GYM = "gym"
    ACCOUNTING = "accounting"
    MOVING_COMPANY = "moving_company"
    LODGING = "lodging"
    STORAGE = "storage"
    # Server value this client version does not know yet
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value: object) -> AddressCategory | None:
        if isinstance(value, str):
            logger.warning(
                "Unrecognized address category %r, falling back to %s",
                value[:50],
                cls.UNKNOWN.value,
            )
            return cls.UNKNOWN
        return None

    @classmethod
    def from_literal(cls, value: str) -> AddressCategory:
        """Look up a category by its wire literal.

        Args:
            value: Category token, typically taken from a server response.

        Returns:
            The matching category, or ``UNKNOWN`` if the token is not recognized.
        """
        return cls(value)

    @classmethod
    def known(cls) -> tuple[AddressCategory, ...]:
        """All categories except ``UNKNOWN``, in definition order."""
        return tuple(member for member in cls if member is not cls.UNKNOWN)

    @property
    def is_url_serializable(self) -> bool:
        """Whether this category may be sent to the server."""
        return self is not AddressCategory.UNKNOWN

    def to_canonical_literal(self) -> str:
        """Return the lowercase literal for this category."""
        return self.value

    def to_url_value(self) -> str:
        """Return the value to embed in an outbound request parameter.

        Raises:
            InvalidSerializationRequest: If called on ``UNKNOWN``.
        """
        if not self.is_url_serializable:
            raise InvalidSerializationRequest.for_category(self)
        return self.value


# Literals the client can both read and send
ADDRESS_CATEGORY_LITERALS: frozenset[str] = frozenset(c.value for c in AddressCategory.known())

ADMINISTRATIVE_AREA_LEVELS: tuple[AddressCategory, ...] = (
    AddressCategory.ADMINISTRATIVE_AREA_LEVEL_1,
    AddressCategory.ADMINISTRATIVE_AREA_LEVEL_2,
    AddressCategory.ADMINISTRATIVE_AREA_LEVEL_3,
    AddressCategory.ADMINISTRATIVE_AREA_LEVEL_4,
    AddressCategory.ADMINISTRATIVE_AREA_LEVEL_5,
)

SUBLOCALITY_LEVELS: tuple[AddressCategory, ...] = (
    AddressCategory.SUBLOCALITY_LEVEL_1,
    AddressCategory.SUBLOCALITY_LEVEL_2,
    AddressCategory.SUBLOCALITY_LEVEL_3,
    AddressCategory.SUBLOCALITY_LEVEL_4,
    AddressCategory.SUBLOCALITY_LEVEL_5,
)
