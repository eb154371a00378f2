"""Pydantic field types for address categories.

Use these annotations on models owned by the surrounding client so that
category tokens are read forgivingly and written strictly:

    >>> from pydantic import BaseModel
    >>> class Component(BaseModel):
    ...     long_name: str
    ...     types: AddressCategoryList
    >>> Component.model_validate({"long_name": "Austin", "types": ["locality", "new_kind"]}).types
    [<AddressCategory.LOCALITY: 'locality'>, <AddressCategory.UNKNOWN: 'unknown'>]
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer, TypeAdapter

from ryandata_geocode_types.models.enums import AddressCategory
from ryandata_geocode_types.models.errors import RyanDataGeocodeError


def _coerce_category(value: Any) -> AddressCategory:
    if isinstance(value, AddressCategory):
        return value
    if isinstance(value, str):
        return AddressCategory.from_literal(value)
    raise RyanDataGeocodeError.create(
        "address_category_type",
        "Address category must be a string, got {input_type}",
        {"input_type": type(value).__name__},
    )


def _serialize_category(value: AddressCategory) -> str:
    return value.to_url_value()


AddressCategoryField = Annotated[
    AddressCategory,
    BeforeValidator(_coerce_category),
    PlainSerializer(_serialize_category, return_type=str, when_used="json"),
]

# Ordered category tokens of one address component or result
AddressCategoryList = list[AddressCategoryField]

_category_list_adapter: TypeAdapter[list[AddressCategory]] = TypeAdapter(AddressCategoryList)


def parse_address_categories(tokens: Iterable[Any]) -> list[AddressCategory]:
    """Validate a sequence of category tokens.

    Args:
        tokens: Category strings (or members) in server order.

    Returns:
        Categories in the same order, with unrecognized tokens as ``UNKNOWN``.

    Raises:
        pydantic.ValidationError: If a token is not a string.
    """
    return _category_list_adapter.validate_python(list(tokens))
