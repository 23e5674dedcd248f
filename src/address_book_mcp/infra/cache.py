from __future__ import annotations

from cachetools import TTLCache

from address_book_mcp.core.models import RawAddressLookupRecord

LookupKey = tuple[str, str]


class LookupCache:
    """Lookup results per (postcode, streetnumber) pair, expired after a TTL."""

    def __init__(self, *, maxsize: int, ttl_seconds: int) -> None:
        self._cache: TTLCache[LookupKey, tuple[RawAddressLookupRecord, ...]] = TTLCache(
            maxsize=maxsize, ttl=ttl_seconds
        )

    def get(self, postcode: str, house_number: str) -> list[RawAddressLookupRecord] | None:
        records = self._cache.get((postcode, house_number))
        return list(records) if records is not None else None

    def set(self, postcode: str, house_number: str, records: list[RawAddressLookupRecord]) -> None:
        # empty results are not worth keeping; the next search asks again
        if records:
            self._cache[(postcode, house_number)] = tuple(records)

    def __len__(self) -> int:
        return len(self._cache)
