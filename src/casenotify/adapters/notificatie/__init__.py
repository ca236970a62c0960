"""Notificaties API payload codec."""

from __future__ import annotations

from .reference import decode_reference, encode_reference
from .schema import KenmerkenSchema, NotificatieSchema
from .translator import event_from_schema, event_to_payload, parse_event

__all__ = [
    "KenmerkenSchema",
    "NotificatieSchema",
    "decode_reference",
    "encode_reference",
    "event_from_schema",
    "event_to_payload",
    "parse_event",
]
