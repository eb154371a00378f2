"""Geocode type error classes.

These classes provide package-specific error handling for category lookup
and wire serialization.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic_core import PydanticCustomError

if TYPE_CHECKING:
    from ryandata_geocode_types.models.enums import AddressCategory

# Package identifier for error context
PACKAGE_NAME = "ryandata_geocode_types"


class RyanDataGeocodeError(PydanticCustomError):
    """Base exception for ryandata_geocode_types.

    Inherits from PydanticCustomError so that, when raised inside a Pydantic
    validator, it surfaces as a regular ValidationError line item.
    """

    @classmethod
    def create(
        cls,
        error_type: str,
        message_template: str,
        context: dict[str, Any] | None = None,
    ) -> RyanDataGeocodeError:
        """Build an error with the package identifier merged into its context.

        Args:
            error_type: Type/category of the error.
            message_template: Error message (can include {placeholders}).
            context: Additional context dict.

        Returns:
            Error instance of the calling class.
        """
        ctx = {"package": PACKAGE_NAME, **(context or {})}
        return cls(error_type, message_template, ctx)


class InvalidSerializationRequest(RyanDataGeocodeError):
    """Raised when a value that must never reach the server is serialized.

    This signals a programming error: a request was being built from
    ``AddressCategory.UNKNOWN``. It is not meant to be caught and retried.
    """

    @classmethod
    def for_category(cls, category: AddressCategory) -> InvalidSerializationRequest:
        """Build the error for a non-serializable category."""
        return cls(
            "invalid_serialization_request",
            "Shouldn't use AddressCategory.{category} in a request.",
            {"package": PACKAGE_NAME, "category": category.name},
        )
