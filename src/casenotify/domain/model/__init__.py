"""Public domain model surface."""

from __future__ import annotations

from casenotify.domain.model.besluit import Decision, DecisionResource, DecisionType, InfoObject
from casenotify.domain.model.enums import (
    Action,
    CaseProgress,
    Channel,
    Confidentiality,
    DeliveryStatus,
    DistributionChannel,
    Feedback,
    IdentificationType,
    InfoObjectStatus,
    NotifyMethod,
    Resource,
    ScenarioState,
    TaskStatus,
)
from casenotify.domain.model.events import EventAttributes, NotificationEvent
from casenotify.domain.model.notify import NotifyData, NotifySendResult
from casenotify.domain.model.objects import Identification, MessageObject, TaskObject
from casenotify.domain.model.party import CitizenData, CommonPartyData
from casenotify.domain.model.receipt import ContactMoment, ContactSubject, DeliveryReceipt
from casenotify.domain.model.zaak import Case, CaseRole, CaseStatus, CaseStatuses, CaseType

__all__ = [
    "Action",
    "Case",
    "CaseProgress",
    "CaseRole",
    "CaseStatus",
    "CaseStatuses",
    "CaseType",
    "Channel",
    "CitizenData",
    "CommonPartyData",
    "Confidentiality",
    "ContactMoment",
    "ContactSubject",
    "Decision",
    "DecisionResource",
    "DecisionType",
    "DeliveryReceipt",
    "DeliveryStatus",
    "DistributionChannel",
    "EventAttributes",
    "Feedback",
    "Identification",
    "IdentificationType",
    "InfoObject",
    "InfoObjectStatus",
    "MessageObject",
    "NotificationEvent",
    "NotifyData",
    "NotifyMethod",
    "NotifySendResult",
    "Resource",
    "ScenarioState",
    "TaskObject",
    "TaskStatus",
]
