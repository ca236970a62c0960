"""Port for recording notification outcomes in the customer contact history."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .querying import VersionDetails

if TYPE_CHECKING:
    from casenotify.domain.model import ContactMoment


@runtime_checkable
class ContactRegister(VersionDetails, Protocol):
    async def register_contact(self, contact: ContactMoment) -> str:
        """Store ``contact`` and return the URI (or UUID) of the new record."""
        ...


__all__ = ["ContactRegister"]
