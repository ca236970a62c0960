"""Inbound event notification model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .enums import Action, Channel, Resource

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(frozen=True, slots=True)
class EventAttributes:
    """The ``kenmerken`` of an event; only a few are known per channel."""

    case_type_uri: str | None = None
    source_organization: str | None = None
    confidentiality: str | None = None
    object_type_uri: str | None = None
    decision_type_uri: str | None = None
    responsible_organization: str | None = None
    orphans: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class NotificationEvent:
    action: Action
    channel: Channel
    resource: Resource
    main_object_uri: str
    resource_uri: str
    attributes: EventAttributes = field(default_factory=EventAttributes)
    created_at: datetime | None = None
    orphans: dict[str, object] = field(default_factory=dict)

    @property
    def organization_id(self) -> str:
        """Identifier of the organisation the notification is sent on behalf of."""

        attributes = self.attributes
        return attributes.source_organization or attributes.responsible_organization or ""
