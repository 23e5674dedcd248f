from __future__ import annotations

import pytest

from address_book_mcp.core.models import Address


def make_address(
    id: str,
    first_name: str = "",
    last_name: str = "",
    *,
    house_number: str = "123",
    street: str = "George St",
    city: str = "Sydney",
    postcode: str = "2000",
) -> Address:
    return Address(
        id=id,
        first_name=first_name,
        last_name=last_name,
        house_number=house_number,
        street=street,
        city=city,
        postcode=postcode,
    )


@pytest.fixture
def john() -> Address:
    return make_address("1", "John", "Doe")


@pytest.fixture
def jane() -> Address:
    return make_address("2", "Jane", "Smith", house_number="456", street="King St", city="Melbourne", postcode="3000")
