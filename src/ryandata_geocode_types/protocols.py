from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class UrlValueProtocol(Protocol):
    """Protocol for values that can be embedded in a request URL.

    Implementations return the exact token the server expects and raise
    if the value must never be sent.
    """

    def to_url_value(self) -> str:
        """Return the wire representation of this value.

        Returns:
            String suitable for a request parameter, before URL encoding.
        """
        ...
