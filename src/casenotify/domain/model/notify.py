"""Outbound notification packages and delivery results."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import NotifyMethod


@dataclass(frozen=True, slots=True)
class NotifyData:
    """One message to deliver: who, which template, and which values to fill in."""

    method: NotifyMethod
    contact_details: str
    template_id: str
    personalization: dict[str, object] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class NotifySendResult:
    is_success: bool
    notification_id: str | None = None
    error: str | None = None

    @classmethod
    def success(cls, notification_id: str | None) -> NotifySendResult:
        return cls(is_success=True, notification_id=notification_id)

    @classmethod
    def failure(cls, error: str) -> NotifySendResult:
        return cls(is_success=False, error=error)
