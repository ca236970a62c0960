"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum
from typing import Self


class _LenientEnum(StrEnum):
    """StrEnum that maps unrecognised wire values to ``UNKNOWN``."""

    @classmethod
    def parse(cls, value: str | None) -> Self:
        if value is None:
            return cls("unknown")
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls("unknown")


class Action(_LenientEnum):
    CREATE = "create"
    UPDATE = "update"
    PARTIAL_UPDATE = "partial_update"
    DESTROY = "destroy"
    UNKNOWN = "unknown"


class Channel(_LenientEnum):
    ZAKEN = "zaken"
    OBJECTEN = "objecten"
    BESLUITEN = "besluiten"
    UNKNOWN = "unknown"


class Resource(_LenientEnum):
    ZAAK = "zaak"
    STATUS = "status"
    OBJECT = "object"
    BESLUIT = "besluit"
    BESLUIT_INFORMATIEOBJECT = "besluitinformatieobject"
    UNKNOWN = "unknown"


class DistributionChannel(_LenientEnum):
    """Preferred contact channel of a party."""

    EMAIL = "email"
    SMS = "sms"
    LETTER = "post"
    BOTH = "beide"
    NONE = "geen voorkeur"
    UNKNOWN = "unknown"


class NotifyMethod(StrEnum):
    EMAIL = "email"
    SMS = "sms"
    LETTER = "letter"


class TaskStatus(_LenientEnum):
    OPEN = "open"
    CLOSED = "gesloten"
    UNKNOWN = "unknown"


class IdentificationType(_LenientEnum):
    BSN = "bsn"
    KVK = "kvk"
    UNKNOWN = "unknown"


class Confidentiality(_LenientEnum):
    PUBLIC = "openbaar"
    RESTRICTED = "beperkt_openbaar"
    INTERNAL = "intern"
    CASE_CONFIDENTIAL = "zaakvertrouwelijk"
    CONFIDENTIAL = "vertrouwelijk"
    SECRET = "geheim"
    UNKNOWN = "unknown"


class InfoObjectStatus(_LenientEnum):
    IN_PROGRESS = "in_bewerking"
    FOR_APPROVAL = "ter_vaststelling"
    FINAL = "definitief"
    ARCHIVED = "gearchiveerd"
    UNKNOWN = "unknown"


class CaseProgress(StrEnum):
    CREATED = "created"
    UPDATED = "updated"
    CLOSED = "closed"


class ScenarioState(StrEnum):
    START = "start"
    VALIDATING = "validating"
    ASSEMBLING = "assembling"
    DONE = "done"
    ABORTED = "aborted"


class Feedback(StrEnum):
    """What a delivery status means for the citizen's contact history."""

    SUCCESS = "success"
    INFO = "info"
    FAILURE = "failure"
    UNKNOWN = "unknown"


class DeliveryStatus(_LenientEnum):
    CREATED = "created"
    SENDING = "sending"
    PENDING = "pending"
    PENDING_VIRUS_CHECK = "pending-virus-check"
    ACCEPTED = "accepted"
    SENT = "sent"
    DELIVERED = "delivered"
    RECEIVED = "received"
    PERMANENT_FAILURE = "permanent-failure"
    TEMPORARY_FAILURE = "temporary-failure"
    TECHNICAL_FAILURE = "technical-failure"
    VALIDATION_FAILED = "validation-failed"
    VIRUS_SCAN_FAILED = "virus-scan-failed"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"

    @property
    def feedback(self) -> Feedback:
        return _FEEDBACK_BY_STATUS.get(self, Feedback.UNKNOWN)


_FEEDBACK_BY_STATUS: dict[DeliveryStatus, Feedback] = {
    DeliveryStatus.CREATED: Feedback.INFO,
    DeliveryStatus.SENDING: Feedback.INFO,
    DeliveryStatus.PENDING: Feedback.INFO,
    DeliveryStatus.PENDING_VIRUS_CHECK: Feedback.INFO,
    DeliveryStatus.ACCEPTED: Feedback.INFO,
    DeliveryStatus.SENT: Feedback.SUCCESS,
    DeliveryStatus.DELIVERED: Feedback.SUCCESS,
    DeliveryStatus.RECEIVED: Feedback.SUCCESS,
    DeliveryStatus.PERMANENT_FAILURE: Feedback.FAILURE,
    DeliveryStatus.TEMPORARY_FAILURE: Feedback.FAILURE,
    DeliveryStatus.TECHNICAL_FAILURE: Feedback.FAILURE,
    DeliveryStatus.VALIDATION_FAILED: Feedback.FAILURE,
    DeliveryStatus.VIRUS_SCAN_FAILED: Feedback.FAILURE,
    DeliveryStatus.CANCELLED: Feedback.FAILURE,
}
