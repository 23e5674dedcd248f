from __future__ import annotations

from typing import Any


class AddressBookError(Exception):
    """Base error for address-book-mcp."""


class UpstreamError(AddressBookError):
    """Raised when the address lookup API fails."""

    def __init__(self, message: str, *, status_code: int | None = None, payload: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class ValidationError(AddressBookError):
    """Raised when input validation fails."""


class SelectionError(AddressBookError):
    """Raised when the selected address cannot be resolved."""
