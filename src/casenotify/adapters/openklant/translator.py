"""Map both customer API versions onto ``CommonPartyData``.

The translators are pure: they receive already validated schemas and return
domain values, so the v1 and v2 adapters can be compared field by field in
tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from casenotify.domain.errors import MissingContactMethodError
from casenotify.domain.model import CommonPartyData, DistributionChannel

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .schema import (
        DigitaalAdresSchema,
        KlantSchema,
        KlantSubjectIdentificatie,
        PartijSchema,
    )


class AddressKind(StrEnum):
    EMAIL = "email"
    PHONE = "phone"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class AddressDescriptions:
    """Generic descriptions used by a municipality to label digital addresses."""

    email: str
    phone: str

    def classify(self, address: DigitaalAdresSchema) -> AddressKind:
        kind = address.soort_digitaal_adres.strip().lower()
        if kind == self.email.strip().lower():
            return AddressKind.EMAIL
        if self.phone.strip().lower() in kind:
            return AddressKind.PHONE
        return AddressKind.OTHER


def _gender(subject: KlantSubjectIdentificatie | None) -> str:
    return subject.geslachtsaanduiding if subject is not None else ""


def party_from_v1(schema: KlantSchema) -> CommonPartyData:
    return CommonPartyData(
        uri=schema.url,
        name=schema.voornaam,
        surname_prefix=schema.voorvoegsel_achternaam,
        surname=schema.achternaam,
        distribution_channel=DistributionChannel.parse(schema.aanmaakkanaal),
        email_address=schema.emailadres,
        telephone_number=schema.telefoonnummer,
        gender=_gender(schema.subject_identificatie),
    )


def select_digital_address(
    addresses: Sequence[DigitaalAdresSchema],
    *,
    descriptions: AddressDescriptions,
    preferred_uuid: str | None,
    case_identifier: str | None,
) -> tuple[DigitaalAdresSchema, AddressKind]:
    """Pick the address to notify.

    Order: an address referring to the case, then the preferred address, then
    the first e-mail address, then the first phone number. Addresses of any
    other kind are never selected.
    """

    usable = [
        (address, kind)
        for address in addresses
        if (kind := descriptions.classify(address)) is not AddressKind.OTHER and address.adres
    ]
    if not usable:
        raise MissingContactMethodError("Party has no e-mail address or phone number")

    if case_identifier:
        for address, kind in usable:
            if address.referentie and address.referentie == case_identifier:
                return address, kind
    if preferred_uuid:
        for address, kind in usable:
            if address.uuid == preferred_uuid:
                return address, kind
    for wanted in (AddressKind.EMAIL, AddressKind.PHONE):
        for address, kind in usable:
            if kind is wanted:
                return address, kind
    raise MissingContactMethodError("Party has no e-mail address or phone number")


def party_from_v2(
    schema: PartijSchema,
    addresses: Sequence[DigitaalAdresSchema],
    *,
    descriptions: AddressDescriptions,
    case_identifier: str | None = None,
) -> CommonPartyData:
    preferred = schema.voorkeurs_digitaal_adres
    address, kind = select_digital_address(
        addresses,
        descriptions=descriptions,
        preferred_uuid=preferred.uuid if preferred is not None else None,
        case_identifier=case_identifier,
    )
    identification = schema.partij_identificatie
    contact_name = identification.contactnaam if identification is not None else None
    is_email = kind is AddressKind.EMAIL
    return CommonPartyData(
        uri=schema.url,
        name=contact_name.voornaam if contact_name else "",
        surname_prefix=contact_name.voorvoegsel_achternaam if contact_name else "",
        surname=contact_name.achternaam if contact_name else "",
        distribution_channel=DistributionChannel.EMAIL if is_email else DistributionChannel.SMS,
        email_address=address.adres if is_email else "",
        telephone_number="" if is_email else address.adres,
        gender=_gender(schema.subject_identificatie),
    )
