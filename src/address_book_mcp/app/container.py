from __future__ import annotations

from dataclasses import dataclass

from address_book_mcp.app.settings import Settings, get_settings
from address_book_mcp.core.store import AddressBookStore
from address_book_mcp.infra.cache import LookupCache
from address_book_mcp.infra.http import HttpClient
from address_book_mcp.infra.providers.lookup import AddressLookupProvider
from address_book_mcp.services.address_book_service import AddressBookSession


@dataclass(frozen=True)
class Container:
    settings: Settings
    cache: LookupCache
    http: HttpClient
    lookup: AddressLookupProvider
    store: AddressBookStore
    session: AddressBookSession


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or get_settings()

    cache = LookupCache(maxsize=settings.cache_maxsize, ttl_seconds=settings.cache_ttl_seconds)
    http = HttpClient(timeout_seconds=settings.http_timeout_seconds, user_agent=settings.http_user_agent)

    lookup = AddressLookupProvider(
        http=http,
        base_url=settings.lookup_base_url,
        path=settings.lookup_path,
        cache=cache,
    )

    # one address book per container
    store = AddressBookStore()
    session = AddressBookSession(lookup=lookup, store=store)

    return Container(
        settings=settings,
        cache=cache,
        http=http,
        lookup=lookup,
        store=store,
        session=session,
    )
