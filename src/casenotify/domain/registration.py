"""Record delivery receipts as contact moments in the citizen's contact history."""

from __future__ import annotations

from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING

from casenotify.domain.errors import InvalidEventError, InvalidReceiptError
from casenotify.domain.model import ContactMoment, Feedback

if TYPE_CHECKING:
    from collections.abc import Callable

    from casenotify.config.registration import UxMessages
    from casenotify.domain.model import DeliveryReceipt, NotificationEvent
    from casenotify.domain.ports.registering import ContactRegister
    from casenotify.domain.scenarios.resolver import ScenariosResolver

log = getLogger(__name__)

REGISTERED_FEEDBACK = frozenset({Feedback.SUCCESS, Feedback.FAILURE})


class ReceiptRegistrar:
    """Turn a final delivery status into a contact moment.

    The receipt reference holds the source event, so the party and case are
    found again through the scenario that handled it. Intermediate statuses
    are not registered.
    """

    def __init__(
        self,
        resolver: ScenariosResolver,
        register: ContactRegister,
        messages: UxMessages,
        *,
        reference_decoder: Callable[[str], NotificationEvent],
    ) -> None:
        self._resolver = resolver
        self._register = register
        self._messages = messages
        self._decode_reference = reference_decoder

    def _event(self, receipt: DeliveryReceipt) -> NotificationEvent:
        try:
            return self._decode_reference(receipt.reference)
        except InvalidEventError as exc:
            raise InvalidReceiptError(
                f"Delivery receipt {receipt.notification_id} has an unreadable reference"
            ) from exc

    async def register(self, receipt: DeliveryReceipt) -> str | None:
        feedback = receipt.feedback
        if feedback not in REGISTERED_FEEDBACK:
            log.info(
                "Not registering receipt %s with status %s",
                receipt.notification_id,
                receipt.status,
            )
            return None

        event = self._event(receipt)
        scenario = self._resolver.resolve(event)
        subject = await scenario.contact_subject(event)
        success = feedback is Feedback.SUCCESS
        message = self._messages.for_outcome(receipt.method, success=success)
        contact = ContactMoment(
            organization_id=event.organization_id,
            method=receipt.method,
            subject=message.subject,
            body=message.body,
            is_successful=success,
            occurred_at=receipt.occurred_at or datetime.now(UTC),
            party_uri=subject.party.uri,
            case_uri=subject.case_uri,
        )
        uri = await self._register.register_contact(contact)
        log.info(
            "Registered %s %s for receipt %s as %s",
            receipt.method,
            feedback,
            receipt.notification_id,
            uri,
        )
        return uri
