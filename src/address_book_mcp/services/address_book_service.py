from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from address_book_mcp.core.errors import AddressBookError, SelectionError
from address_book_mcp.core.models import AddOutcome, Address, RawAddressLookupRecord
from address_book_mcp.core.normalizer import normalize_all
from address_book_mcp.core.store import AddressBookStore
from address_book_mcp.core.text import validate_person, validate_search

log = logging.getLogger(__name__)

NO_SELECTION_MESSAGE = "No address selected, try to select an address or find one if you haven't"
NOT_FOUND_MESSAGE = "Selected address not found"


class LookupProvider(Protocol):
    def search(self, *, postcode: str, house_number: str) -> list[RawAddressLookupRecord]: ...


@dataclass(frozen=True)
class SearchResult:
    candidates: list[Address]
    message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "candidates": [c.to_dict() for c in self.candidates],
            "message": self.message,
        }


@dataclass(frozen=True)
class AddPersonResult:
    outcome: AddOutcome | None
    address: Address | None
    addresses: list[Address] = field(default_factory=list)
    message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "outcome": self.outcome.value if self.outcome else None,
            "address": self.address.to_dict() if self.address else None,
            "addresses": [a.to_dict() for a in self.addresses],
            "message": self.message,
        }


class AddressBookSession:
    """
    Search, select and save flow on top of one AddressBookStore.

    Keeps the latest candidate list and a single current-error slot. Any
    AddressBookError stops the action, lands in `error` and leaves the
    address book untouched.
    """

    def __init__(self, *, lookup: LookupProvider, store: AddressBookStore) -> None:
        self._lookup = lookup
        self._store = store
        self.candidates: list[Address] = []
        self.error: str | None = None

    @property
    def store(self) -> AddressBookStore:
        return self._store

    def find_addresses(self, *, postcode: str, house_number: str) -> SearchResult:
        try:
            postcode, house_number = validate_search(postcode, house_number)
        except AddressBookError as e:
            # earlier results stay visible when the input is rejected
            return SearchResult(candidates=list(self.candidates), message=self._fail(e))

        self.error = None
        self.candidates = []

        try:
            records = self._lookup.search(postcode=postcode, house_number=house_number)
        except AddressBookError as e:
            return SearchResult(candidates=[], message=self._fail(e))

        self.candidates = normalize_all(records, house_number)
        log.info("Found %d candidate(s) for %s/%s", len(self.candidates), postcode, house_number)
        return SearchResult(candidates=list(self.candidates))

    def add_person(self, *, selected_address_id: str | None, first_name: str, last_name: str) -> AddPersonResult:
        try:
            first_name, last_name = validate_person(first_name, last_name)
            selected = self._select(selected_address_id)
        except AddressBookError as e:
            return AddPersonResult(
                outcome=None,
                address=None,
                addresses=self._store.list_addresses(),
                message=self._fail(e),
            )

        composed = selected.with_person(first_name, last_name)
        state, outcome = self._store.add_with_outcome(composed)
        self.error = None

        message = None
        if outcome is AddOutcome.REJECTED_DUPLICATE:
            message = f"{first_name} {last_name} is already in the address book"
            log.info("Duplicate rejected: %s %s", first_name, last_name)

        return AddPersonResult(
            outcome=outcome,
            address=composed,
            addresses=list(state.addresses),
            message=message,
        )

    def clear(self) -> SearchResult:
        self.candidates = []
        self.error = None
        return SearchResult(candidates=[])

    def _select(self, selected_address_id: str | None) -> Address:
        if not selected_address_id or not self.candidates:
            raise SelectionError(NO_SELECTION_MESSAGE)
        for candidate in self.candidates:
            if candidate.id == selected_address_id:
                return candidate
        raise SelectionError(NOT_FOUND_MESSAGE)

    def _fail(self, e: AddressBookError) -> str:
        self.error = str(e)
        log.info("%s: %s", type(e).__name__, self.error)
        return self.error
