"""Helpers for turning URL values into request parameter strings."""

from __future__ import annotations

from collections.abc import Iterable

from ryandata_geocode_types.protocols import UrlValueProtocol


def to_url_value(value: UrlValueProtocol | str) -> str:
    """Return the wire form of a single value.

    Plain strings are passed through unchanged. String subclasses that
    implement ``to_url_value`` (such as ``AddressCategory``) use it.
    """
    if isinstance(value, UrlValueProtocol):
        return value.to_url_value()
    return value


def join_url_values(separator: str, values: Iterable[UrlValueProtocol | str]) -> str:
    """Join the wire form of several values into one parameter.

    Args:
        separator: Delimiter placed between values, e.g. ``"|"``.
        values: Strings or objects implementing ``to_url_value``.

    Returns:
        Joined string; empty if ``values`` is empty.

    Raises:
        InvalidSerializationRequest: If any value may not be sent, such as
            ``AddressCategory.UNKNOWN``.
    """
    return separator.join([to_url_value(value) for value in values])
