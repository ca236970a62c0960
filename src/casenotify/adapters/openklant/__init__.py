"""OpenKlant (Klanten v1 and Klantinteracties v2) query and registration adapters."""

from __future__ import annotations

from .client import QueryKlantV1, QueryKlantV2
from .registration import RegisterContactV1, RegisterContactV2
from .translator import AddressDescriptions, party_from_v1, party_from_v2, select_digital_address

__all__ = [
    "AddressDescriptions",
    "QueryKlantV1",
    "QueryKlantV2",
    "RegisterContactV1",
    "RegisterContactV2",
    "party_from_v1",
    "party_from_v2",
    "select_digital_address",
]
