from __future__ import annotations

import logging
from typing import Any

from address_book_mcp.core.errors import UpstreamError
from address_book_mcp.core.models import RawAddressLookupRecord
from address_book_mcp.infra.cache import LookupCache
from address_book_mcp.infra.http import HttpClient

log = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("id", "street", "city", "postcode")


class AddressLookupProvider:
    """
    Client for the getAddresses endpoint.

    - request: ?postcode=<digits>&streetnumber=<digits>
    - success: {"status": "ok", "details": [{id, street, city, postcode, ...}]}
    - failure: non-2xx with {"status": "error", "errormessage": "..."}
    """

    def __init__(self, *, http: HttpClient, base_url: str, path: str, cache: LookupCache | None = None) -> None:
        self._http = http
        self._url = base_url.rstrip("/") + "/" + path.lstrip("/")
        self._cache = cache

    def search(self, *, postcode: str, house_number: str) -> list[RawAddressLookupRecord]:
        if self._cache is not None:
            cached = self._cache.get(postcode, house_number)
            if cached is not None:
                log.debug("Cache hit for %s/%s", postcode, house_number)
                return cached

        params = {"postcode": postcode, "streetnumber": house_number}
        try:
            payload = self._http.get_json(self._url, params=params)
        except UpstreamError as e:
            message = _error_message(e.payload)
            if message is None:
                message = "Unexpected error" if e.status_code is not None else str(e)
            log.error("Address lookup failed (%s): %s", e.status_code, message)
            raise UpstreamError(message, status_code=e.status_code, payload=e.payload) from e

        if not isinstance(payload, dict) or payload.get("status") == "error":
            message = _error_message(payload) or "Unexpected error"
            log.error("Address lookup error payload: %s", message)
            raise UpstreamError(message, payload=payload)

        records = self.parse_details(payload.get("details"))

        if self._cache is not None:
            self._cache.set(postcode, house_number, records)

        return records

    @staticmethod
    def parse_details(details: Any) -> list[RawAddressLookupRecord]:
        if not isinstance(details, list):
            return []

        records: list[RawAddressLookupRecord] = []
        for item in details:
            if not isinstance(item, dict):
                log.warning("Skipping non-object lookup record: %r", item)
                continue
            missing = [k for k in _REQUIRED_FIELDS if item.get(k) in (None, "")]
            if missing:
                log.warning("Skipping lookup record %r, missing %s", item.get("id"), ", ".join(missing))
                continue
            records.append(RawAddressLookupRecord.from_payload(item))
        return records


def _error_message(payload: Any) -> str | None:
    if isinstance(payload, dict):
        msg = payload.get("errormessage")
        if isinstance(msg, str) and msg.strip():
            return msg.strip()
    return None
