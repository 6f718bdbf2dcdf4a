"""Helpers for the addresses and phone numbers owned by customers and merchants."""

from typing import Iterable, Optional

from authentication.models import Address, PhoneNumber

ADDRESS_FIELDS = ("street", "city", "state", "country", "postal_code")


def replace_contacts(
    owner,
    addresses: Optional[Iterable[dict]] = None,
    phone_numbers: Optional[Iterable[str]] = None,
) -> None:
    """
    Replace the owner's addresses and/or phone numbers.

    ``None`` leaves that collection untouched; an empty list clears it.
    ``owner`` is a Customer or a Merchant.
    """
    owner_field = owner.subject_type

    if addresses is not None:
        Address.objects.filter(**{owner_field: owner}).delete()
        Address.objects.bulk_create(
            Address(**{owner_field: owner}, **{k: v for k, v in address.items() if k in ADDRESS_FIELDS})
            for address in addresses
        )

    if phone_numbers is not None:
        PhoneNumber.objects.filter(**{owner_field: owner}).delete()
        PhoneNumber.objects.bulk_create(PhoneNumber(**{owner_field: owner}, number=number) for number in phone_numbers)
