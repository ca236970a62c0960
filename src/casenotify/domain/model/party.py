"""Normalised party (citizen or organisation) data."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import DistributionChannel


@dataclass(frozen=True, slots=True)
class CitizenData:
    bsn_number: str


@dataclass(frozen=True, slots=True)
class CommonPartyData:
    """Contact data of a party, independent of the customer API version it came from."""

    uri: str
    name: str = ""
    surname_prefix: str = ""
    surname: str = ""
    distribution_channel: DistributionChannel = DistributionChannel.UNKNOWN
    email_address: str = ""
    telephone_number: str = ""
    gender: str = ""

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.name, self.surname_prefix, self.surname) if part)
