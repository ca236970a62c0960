"""NotifyNL request and response schemas."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field


class NotifyModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class EmailRequest(NotifyModel):
    email_address: str
    template_id: str
    personalisation: dict[str, object] = Field(default_factory=dict)
    reference: str | None = None


class SmsRequest(NotifyModel):
    phone_number: str
    template_id: str
    personalisation: dict[str, object] = Field(default_factory=dict)
    reference: str | None = None


class LetterRequest(NotifyModel):
    template_id: str
    personalisation: dict[str, object] = Field(default_factory=dict)
    reference: str | None = None


class PreviewRequest(NotifyModel):
    personalisation: dict[str, object] = Field(default_factory=dict)


class NotificationResponse(NotifyModel):
    id: str
    reference: str | None = None


class PreviewResponse(NotifyModel):
    id: str
    type: str = ""
    body: str = ""
    subject: str | None = None


class ApiErrorDetail(NotifyModel):
    error: str = ""
    message: str = ""


class ApiErrorResponse(NotifyModel):
    status_code: int | None = None
    errors: list[ApiErrorDetail] = Field(default_factory=list)

    def describe(self) -> str:
        return "; ".join(f"{item.error}: {item.message}" for item in self.errors) or "unknown error"


class DeliveryReceiptSchema(NotifyModel):
    """Body of the delivery receipt callback; every value but the template version is a string."""

    id: str
    reference: str | None = None
    to: str = ""
    status: str
    notification_type: str
    template_id: str = ""
    template_version: int | None = None
    created_at: datetime | None = None
    completed_at: datetime | None = None
    sent_at: datetime | None = None
