"""Base64 reference attached to each delivery for traceability."""

from __future__ import annotations

import base64
import binascii
import json
from typing import TYPE_CHECKING

from casenotify.domain.errors import InvalidEventError

from .translator import event_to_payload, parse_event

if TYPE_CHECKING:
    from casenotify.domain.model import NotificationEvent


def encode_reference(event: NotificationEvent) -> str:
    serialized = json.dumps(event_to_payload(event), separators=(",", ":"), sort_keys=True)
    return base64.b64encode(serialized.encode("utf-8")).decode("ascii")


def decode_reference(reference: str) -> NotificationEvent:
    try:
        payload = json.loads(base64.b64decode(reference, validate=True).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidEventError("Reference is not a base64 encoded notification") from exc
    if not isinstance(payload, dict):
        raise InvalidEventError("Reference does not hold a notification object")
    return parse_event(payload)
