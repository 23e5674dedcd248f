from __future__ import annotations

from collections.abc import Iterable

from address_book_mcp.core.models import Address, RawAddressLookupRecord


def normalize(raw: RawAddressLookupRecord, house_number: str) -> Address:
    """
    Turn a raw lookup record into a canonical Address.

    The lookup is parameterized by house number but answers with street
    level data, so the house number comes from the caller. Person names stay
    empty until the user attaches them. Records are expected to be complete;
    the lookup provider drops incomplete ones before they get here.
    """
    return Address(
        id=raw.id,
        first_name="",
        last_name="",
        house_number=house_number,
        street=raw.street,
        city=raw.city,
        postcode=raw.postcode,
    )


def normalize_all(records: Iterable[RawAddressLookupRecord], house_number: str) -> list[Address]:
    return [normalize(r, house_number) for r in records]
