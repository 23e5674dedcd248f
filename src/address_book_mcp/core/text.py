from __future__ import annotations

import re

from address_book_mcp.core.errors import ValidationError

_DIGITS = re.compile(r"^[0-9]+$")

MIN_POSTCODE_LENGTH = 4


def clean(value: str | None) -> str:
    return (value or "").strip()


def validate_search(postcode: str, house_number: str) -> tuple[str, str]:
    """
    Check the lookup parameters before anything is sent upstream.

    Both values must be non-empty digit strings and the postcode needs at
    least four digits. Returns the stripped values.
    """
    postcode = clean(postcode)
    house_number = clean(house_number)

    if not postcode or not house_number:
        raise ValidationError("Postcode and house number fields mandatory!")

    if not _DIGITS.match(postcode) or not _DIGITS.match(house_number):
        raise ValidationError("Postcode and house number must be all digits!")

    if len(postcode) < MIN_POSTCODE_LENGTH:
        raise ValidationError(f"Postcode must be at least {MIN_POSTCODE_LENGTH} digits")

    return postcode, house_number


def validate_person(first_name: str | None, last_name: str | None) -> tuple[str, str]:
    # names are stored exactly as typed; duplicate detection compares them verbatim
    first_name = first_name or ""
    last_name = last_name or ""
    if not first_name.strip() or not last_name.strip():
        raise ValidationError("First name and last name fields mandatory!")
    return first_name, last_name
