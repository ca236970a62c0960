"""Parse NotifyNL delivery receipt callbacks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from casenotify.domain.errors import InvalidReceiptError
from casenotify.domain.model import DeliveryReceipt, DeliveryStatus, NotifyMethod

from .schema import DeliveryReceiptSchema

if TYPE_CHECKING:
    from collections.abc import Mapping


def parse_delivery_receipt(payload: Mapping[str, Any]) -> DeliveryReceipt:
    try:
        schema = DeliveryReceiptSchema.model_validate(payload)
    except ValidationError as exc:
        raise InvalidReceiptError(f"Delivery receipt is not valid: {exc}") from exc
    if not schema.reference:
        raise InvalidReceiptError(f"Delivery receipt {schema.id} has no reference")
    try:
        method = NotifyMethod(schema.notification_type.strip().lower())
    except ValueError as exc:
        raise InvalidReceiptError(
            f"Delivery receipt {schema.id} has unknown type {schema.notification_type!r}"
        ) from exc

    return DeliveryReceipt(
        notification_id=schema.id,
        reference=schema.reference,
        recipient=schema.to,
        status=DeliveryStatus.parse(schema.status),
        method=method,
        template_id=schema.template_id,
        template_version=schema.template_version,
        created_at=schema.created_at,
        completed_at=schema.completed_at,
        sent_at=schema.sent_at,
    )
