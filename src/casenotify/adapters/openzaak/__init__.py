"""OpenZaak (Zaken and Catalogi API) query adapters."""

from __future__ import annotations

from .client import QueryZaakV1, QueryZaakV2

__all__ = ["QueryZaakV1", "QueryZaakV2"]
