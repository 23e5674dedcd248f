from __future__ import annotations

from typing import Any

from fastmcp import FastMCP
from pydantic import BaseModel, ConfigDict, Field

from address_book_mcp.app.container import Container
from address_book_mcp.core.models import Address


class AddressPayload(BaseModel):
    """Address as exchanged with clients (camelCase keys)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    house_number: str = Field("", alias="houseNumber")
    street: str = ""
    city: str = ""
    postcode: str = ""

    def to_address(self) -> Address:
        return Address.from_dict(self.model_dump(by_alias=True))


def list_book(container: Container) -> dict[str, Any]:
    return container.store.state.to_dict()


def remove_from_book(container: Container, address_id: str) -> dict[str, Any]:
    return container.store.remove(address_id).to_dict()


def replace_book(container: Container, addresses: list[AddressPayload]) -> dict[str, Any]:
    return container.store.replace_all(a.to_address() for a in addresses).to_dict()


def register_address_book_tools(mcp: FastMCP, container: Container) -> None:
    session = container.session

    @mcp.tool(
        name="find_addresses",
        description=(
            "Look up addresses by postcode and house number. "
            "Both must be digits and the postcode needs at least 4 digits. "
            "Replaces the current candidate list; pick one by id with add_person_to_address_book."
        ),
    )
    def find_addresses(postcode: str, house_number: str) -> dict[str, Any]:
        return session.find_addresses(postcode=postcode, house_number=house_number).to_dict()

    @mcp.tool(
        name="add_person_to_address_book",
        description=(
            "Attach a first and last name to one of the current candidates (by id) and save it. "
            "The book keeps one entry per person: a second entry with the same first and last name is ignored."
        ),
    )
    def add_person_to_address_book(
        selected_address_id: str,
        first_name: str,
        last_name: str,
    ) -> dict[str, Any]:
        return session.add_person(
            selected_address_id=selected_address_id,
            first_name=first_name,
            last_name=last_name,
        ).to_dict()

    @mcp.tool(name="remove_address", description="Remove every saved entry with the given address id.")
    def remove_address(address_id: str) -> dict[str, Any]:
        return remove_from_book(container, address_id)

    @mcp.tool(name="list_address_book", description="Return the saved addresses in order.")
    def list_address_book() -> dict[str, Any]:
        return list_book(container)

    @mcp.tool(
        name="replace_address_book",
        description="Replace the whole address book with the given list, kept as is (no duplicate filtering).",
    )
    def replace_address_book(addresses: list[AddressPayload]) -> dict[str, Any]:
        return replace_book(container, addresses)

    @mcp.tool(
        name="clear_all_fields",
        description="Clear the current search results and any error message. The address book is kept.",
    )
    def clear_all_fields() -> dict[str, Any]:
        return session.clear().to_dict()
