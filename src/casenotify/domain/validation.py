"""Health check of a parsed notification before it is handled."""

from __future__ import annotations

from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from casenotify.domain.model import NotificationEvent

log = getLogger(__name__)


class EventHealth(StrEnum):
    VALID = "valid"
    INCONSISTENT = "inconsistent"
    INVALID = "invalid"


def validate_event(event: NotificationEvent) -> EventHealth:
    """Classify an event.

    Unknown top-level fields or empty object references make an event
    ``INVALID``. Unknown attributes only make it ``INCONSISTENT``; such events
    are still processed.
    """

    if event.orphans:
        log.warning("Notification has unknown fields: %s", ", ".join(sorted(event.orphans)))
        return EventHealth.INVALID
    if not event.main_object_uri or not event.resource_uri:
        log.warning("Notification lacks its main object or resource reference")
        return EventHealth.INVALID
    if event.attributes.orphans:
        log.warning(
            "Notification has unknown attributes: %s",
            ", ".join(sorted(event.attributes.orphans)),
        )
        return EventHealth.INCONSISTENT
    return EventHealth.VALID
