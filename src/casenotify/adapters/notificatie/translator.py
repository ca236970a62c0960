"""Translate Notificaties payloads to and from ``NotificationEvent``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from casenotify.domain.errors import InvalidEventError
from casenotify.domain.model import Action, Channel, EventAttributes, NotificationEvent, Resource

from .schema import NotificatieSchema

if TYPE_CHECKING:
    from collections.abc import Mapping


def parse_event(payload: Mapping[str, Any]) -> NotificationEvent:
    """Parse a callback payload; unknown fields survive as orphans."""

    try:
        schema = NotificatieSchema.model_validate(payload)
    except ValidationError as exc:
        raise InvalidEventError(f"Notification payload is not valid: {exc}") from exc
    return event_from_schema(schema)


def event_from_schema(schema: NotificatieSchema) -> NotificationEvent:
    kenmerken = schema.kenmerken
    attributes = EventAttributes(
        case_type_uri=kenmerken.zaaktype,
        source_organization=kenmerken.bronorganisatie,
        confidentiality=kenmerken.vertrouwelijkheidaanduiding,
        object_type_uri=kenmerken.object_type,
        decision_type_uri=kenmerken.besluittype,
        responsible_organization=kenmerken.verantwoordelijke_organisatie,
        orphans=kenmerken.orphans,
    )
    return NotificationEvent(
        action=Action.parse(schema.actie),
        channel=Channel.parse(schema.kanaal),
        resource=Resource.parse(schema.resource),
        main_object_uri=schema.hoofd_object,
        resource_uri=schema.resource_url,
        attributes=attributes,
        created_at=schema.aanmaakdatum,
        orphans=schema.orphans,
    )


def event_to_payload(event: NotificationEvent) -> dict[str, Any]:
    """Serialise an event back to the Notificaties wire format, orphans included."""

    attributes = event.attributes
    kenmerken: dict[str, Any] = {
        "zaaktype": attributes.case_type_uri,
        "bronorganisatie": attributes.source_organization,
        "vertrouwelijkheidaanduiding": attributes.confidentiality,
        "objectType": attributes.object_type_uri,
        "besluittype": attributes.decision_type_uri,
        "verantwoordelijkeOrganisatie": attributes.responsible_organization,
    }
    kenmerken = {key: value for key, value in kenmerken.items() if value is not None}
    kenmerken.update(attributes.orphans)

    payload: dict[str, Any] = {
        "actie": str(event.action),
        "kanaal": str(event.channel),
        "resource": str(event.resource),
        "kenmerken": kenmerken,
        "hoofdObject": event.main_object_uri,
        "resourceUrl": event.resource_uri,
    }
    if event.created_at is not None:
        payload["aanmaakdatum"] = event.created_at.isoformat()
    payload.update(event.orphans)
    return payload
