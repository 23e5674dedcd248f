from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class RawAddressLookupRecord:
    """One entry of the lookup API's `details` list (street level, no house number)."""

    id: str
    street: str
    city: str
    postcode: str

    @classmethod
    def from_payload(cls, item: dict[str, Any]) -> RawAddressLookupRecord:
        return cls(
            id=str(item["id"]),
            street=str(item["street"]),
            city=str(item["city"]),
            postcode=str(item["postcode"]),
        )


@dataclass(frozen=True)
class Address:
    id: str
    first_name: str
    last_name: str
    house_number: str
    street: str
    city: str
    postcode: str

    def with_person(self, first_name: str, last_name: str) -> Address:
        return replace(self, first_name=first_name, last_name=last_name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "houseNumber": self.house_number,
            "street": self.street,
            "city": self.city,
            "postcode": self.postcode,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Address:
        return cls(
            id=str(data["id"]),
            first_name=str(data.get("firstName") or ""),
            last_name=str(data.get("lastName") or ""),
            house_number=str(data.get("houseNumber") or ""),
            street=str(data.get("street") or ""),
            city=str(data.get("city") or ""),
            postcode=str(data.get("postcode") or ""),
        )


@dataclass(frozen=True)
class AddressBookState:
    addresses: tuple[Address, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {"addresses": [a.to_dict() for a in self.addresses]}


class AddOutcome(str, Enum):
    ADDED = "added"
    REJECTED_DUPLICATE = "rejected_duplicate"
