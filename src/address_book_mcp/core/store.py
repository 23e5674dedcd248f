from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from address_book_mcp.core.models import AddOutcome, Address, AddressBookState

log = logging.getLogger(__name__)


# -----------------------
# Reducers (pure)
# -----------------------
def is_duplicate(a: Address, b: Address) -> bool:
    """One entry per person: only the names count, compared exactly."""
    return a.first_name == b.first_name and a.last_name == b.last_name


def add_address_with_outcome(
    state: AddressBookState, candidate: Address
) -> tuple[AddressBookState, AddOutcome]:
    if any(is_duplicate(existing, candidate) for existing in state.addresses):
        # first write wins
        return state, AddOutcome.REJECTED_DUPLICATE
    return AddressBookState(addresses=(*state.addresses, candidate)), AddOutcome.ADDED


def add_address(state: AddressBookState, candidate: Address) -> AddressBookState:
    new_state, _ = add_address_with_outcome(state, candidate)
    return new_state


def remove_address(state: AddressBookState, address_id: str) -> AddressBookState:
    kept = tuple(a for a in state.addresses if a.id != address_id)
    if len(kept) == len(state.addresses):
        return state
    return AddressBookState(addresses=kept)


def replace_addresses(state: AddressBookState, addresses: Iterable[Address]) -> AddressBookState:
    # bulk load trusts its input: no duplicate filtering
    return AddressBookState(addresses=tuple(addresses))


# -----------------------
# Store
# -----------------------
class AddressBookStore:
    """
    Owns one AddressBookState for the lifetime of the process.

    Every mutation reads the current state, runs the matching reducer and
    commits the result under a lock, so concurrent adds of the same person
    cannot both append.
    """

    def __init__(self, initial: AddressBookState | None = None) -> None:
        self._state = initial if initial is not None else AddressBookState()
        self._lock = threading.Lock()

    @property
    def state(self) -> AddressBookState:
        return self._state

    def add_with_outcome(self, candidate: Address) -> tuple[AddressBookState, AddOutcome]:
        with self._lock:
            self._state, outcome = add_address_with_outcome(self._state, candidate)
            state = self._state
        log.debug("add id=%s outcome=%s size=%d", candidate.id, outcome.value, len(state.addresses))
        return state, outcome

    def add(self, candidate: Address) -> AddressBookState:
        state, _ = self.add_with_outcome(candidate)
        return state

    def remove(self, address_id: str) -> AddressBookState:
        with self._lock:
            self._state = remove_address(self._state, address_id)
            state = self._state
        log.debug("remove id=%s size=%d", address_id, len(state.addresses))
        return state

    def replace_all(self, addresses: Iterable[Address]) -> AddressBookState:
        with self._lock:
            self._state = replace_addresses(self._state, addresses)
            state = self._state
        log.debug("replace_all size=%d", len(state.addresses))
        return state

    def list_addresses(self) -> list[Address]:
        return list(self._state.addresses)
