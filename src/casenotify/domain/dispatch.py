"""Deliver assembled packages through per-organisation delivery clients."""

from __future__ import annotations

import threading
from logging import getLogger
from typing import TYPE_CHECKING

from casenotify.domain.errors import NotifyDeliveryError
from casenotify.domain.model import NotifyMethod, NotifySendResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from casenotify.domain.model import NotificationEvent, NotifyData
    from casenotify.domain.ports.sending import (
        NotifyClient,
        NotifyClientFactory,
        TemplatePreview,
    )

log = getLogger(__name__)

DUTCH_COUNTRY_CODE = "+31"


class ClientRegistry:
    """Process-wide cache of delivery clients keyed by organisation id.

    A client is built at most once per organisation, even when many requests
    ask for it at the same time.
    """

    def __init__(self) -> None:
        self._clients: dict[str, NotifyClient] = {}
        self._lock = threading.Lock()

    def get_or_create(self, organization_id: str, factory: NotifyClientFactory) -> NotifyClient:
        client = self._clients.get(organization_id)
        if client is not None:
            return client
        with self._lock:
            client = self._clients.get(organization_id)
            if client is None:
                client = factory(organization_id)
                self._clients[organization_id] = client
            return client

    def reset(self) -> None:
        with self._lock:
            self._clients.clear()

    def __len__(self) -> int:
        return len(self._clients)


DEFAULT_CLIENT_REGISTRY = ClientRegistry()


def normalize_phone_number(number: str) -> str:
    """Give Dutch local numbers (``06...``) the international prefix."""

    cleaned = number.strip().replace(" ", "").replace("-", "")
    if cleaned.startswith("0") and not cleaned.startswith("00"):
        return DUTCH_COUNTRY_CODE + cleaned[1:]
    return cleaned


class NotifyDispatcher:
    def __init__(
        self,
        client_factory: NotifyClientFactory,
        *,
        reference_encoder: Callable[[NotificationEvent], str],
        registry: ClientRegistry = DEFAULT_CLIENT_REGISTRY,
    ) -> None:
        self._client_factory = client_factory
        self._encode_reference = reference_encoder
        self._registry = registry

    def _client_for(self, event: NotificationEvent) -> NotifyClient:
        return self._registry.get_or_create(event.organization_id, self._client_factory)

    async def send(self, event: NotificationEvent, package: NotifyData) -> NotifySendResult:
        client = self._client_for(event)
        reference = self._encode_reference(event)
        try:
            match package.method:
                case NotifyMethod.EMAIL:
                    notification_id = await client.send_email(
                        package.contact_details,
                        package.template_id,
                        package.personalization,
                        reference=reference,
                    )
                case NotifyMethod.SMS:
                    notification_id = await client.send_sms(
                        normalize_phone_number(package.contact_details),
                        package.template_id,
                        package.personalization,
                        reference=reference,
                    )
                case NotifyMethod.LETTER:
                    notification_id = await client.send_letter(
                        package.template_id,
                        package.personalization,
                        reference=reference,
                    )
        except NotifyDeliveryError as exc:
            log.error(
                "Delivery of %s with template %s failed: %s",
                package.method,
                package.template_id,
                exc,
            )
            return NotifySendResult.failure(str(exc))

        log.info("Delivered %s notification %s", package.method, notification_id)
        return NotifySendResult.success(notification_id)

    async def preview(self, event: NotificationEvent, package: NotifyData) -> TemplatePreview:
        client = self._client_for(event)
        return await client.generate_template_preview(package.template_id, package.personalization)
