"""Port for the outbound delivery provider."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class TemplatePreview:
    template_id: str
    body: str
    subject: str | None = None


@runtime_checkable
class NotifyClient(Protocol):
    """Delivery client bound to one organisation."""

    async def send_email(
        self,
        email_address: str,
        template_id: str,
        personalization: dict[str, object],
        *,
        reference: str,
    ) -> str: ...

    async def send_sms(
        self,
        phone_number: str,
        template_id: str,
        personalization: dict[str, object],
        *,
        reference: str,
    ) -> str: ...

    async def send_letter(
        self,
        template_id: str,
        personalization: dict[str, object],
        *,
        reference: str,
    ) -> str: ...

    async def generate_template_preview(
        self,
        template_id: str,
        personalization: dict[str, object],
    ) -> TemplatePreview: ...


type NotifyClientFactory = Callable[[str], NotifyClient]

__all__ = ["NotifyClient", "NotifyClientFactory", "TemplatePreview"]
