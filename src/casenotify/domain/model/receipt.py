"""Delivery receipts from the notification provider and the contact moments they become."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from .enums import DeliveryStatus, Feedback, NotifyMethod
    from .party import CommonPartyData


@dataclass(frozen=True, slots=True)
class DeliveryReceipt:
    """Final (or intermediate) status of one delivered notification.

    ``reference`` is the opaque value passed along when the notification was
    sent: the base64 encoded source event.
    """

    notification_id: str
    reference: str
    recipient: str
    status: DeliveryStatus
    method: NotifyMethod
    template_id: str = ""
    template_version: int | None = None
    created_at: datetime | None = None
    completed_at: datetime | None = None
    sent_at: datetime | None = None

    @property
    def feedback(self) -> Feedback:
        return self.status.feedback

    @property
    def occurred_at(self) -> datetime | None:
        return self.sent_at or self.completed_at or self.created_at


@dataclass(frozen=True, slots=True)
class ContactSubject:
    """Who a notification was about, and the case it concerned if there is one."""

    party: CommonPartyData
    case_uri: str | None = None


@dataclass(frozen=True, slots=True)
class ContactMoment:
    """A notification outcome to record in the citizen's contact history."""

    organization_id: str
    method: NotifyMethod
    subject: str
    body: str
    is_successful: bool
    occurred_at: datetime
    party_uri: str
    case_uri: str | None = None
