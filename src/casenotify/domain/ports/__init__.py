"""Ports implemented by backend and delivery adapters."""

from __future__ import annotations

from .querying import (
    BesluitenQuery,
    KlantQuery,
    ObjectenQuery,
    ObjectTypenQuery,
    VersionDetails,
    ZaakQuery,
)
from .registering import ContactRegister
from .sending import NotifyClient, NotifyClientFactory, TemplatePreview

__all__ = [
    "BesluitenQuery",
    "ContactRegister",
    "KlantQuery",
    "NotifyClient",
    "NotifyClientFactory",
    "ObjectTypenQuery",
    "ObjectenQuery",
    "TemplatePreview",
    "VersionDetails",
    "ZaakQuery",
]
