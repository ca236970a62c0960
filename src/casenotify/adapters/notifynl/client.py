"""Async NotifyNL delivery client."""

from __future__ import annotations

import time
from logging import getLogger
from typing import TYPE_CHECKING, ClassVar

import httpx
import jwt
from pydantic import BaseModel, ValidationError

from casenotify.adapters.http_resilience import ResilientClient, build_limiter
from casenotify.domain.errors import NotifyDeliveryError
from casenotify.domain.ports.sending import TemplatePreview

from .schema import (
    ApiErrorResponse,
    EmailRequest,
    LetterRequest,
    NotificationResponse,
    PreviewRequest,
    PreviewResponse,
    SmsRequest,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from casenotify.adapters.http_resilience import ClientFactory
    from casenotify.config.notify import NotifyApiKey, NotifyConfig

log = getLogger(__name__)


def create_bearer_token(api_key: NotifyApiKey, *, issued_at: int | None = None) -> str:
    payload = {
        "iss": api_key.service_id,
        "iat": issued_at if issued_at is not None else int(time.time()),
    }
    return jwt.encode(payload, api_key.secret_key, algorithm="HS256")


class NotifyNLClient:
    """Delivery client bound to the API key of one organisation."""

    name: ClassVar[str] = "NotifyNL"
    version: ClassVar[str] = "2"

    def __init__(
        self,
        *,
        config: NotifyConfig,
        organization_id: str,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self.organization_id = organization_id
        self._api_key = config.api_key_for(organization_id)
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient
        self._limiter = build_limiter(config.resilience.ratelimit)

    async def send_email(
        self,
        email_address: str,
        template_id: str,
        personalization: dict[str, object],
        *,
        reference: str,
    ) -> str:
        request = EmailRequest(
            email_address=email_address,
            template_id=template_id,
            personalisation=personalization,
            reference=reference,
        )
        response = await self._post("/v2/notifications/email", request, NotificationResponse)
        return response.id

    async def send_sms(
        self,
        phone_number: str,
        template_id: str,
        personalization: dict[str, object],
        *,
        reference: str,
    ) -> str:
        request = SmsRequest(
            phone_number=phone_number,
            template_id=template_id,
            personalisation=personalization,
            reference=reference,
        )
        response = await self._post("/v2/notifications/sms", request, NotificationResponse)
        return response.id

    async def send_letter(
        self,
        template_id: str,
        personalization: dict[str, object],
        *,
        reference: str,
    ) -> str:
        request = LetterRequest(
            template_id=template_id,
            personalisation=personalization,
            reference=reference,
        )
        response = await self._post("/v2/notifications/letter", request, NotificationResponse)
        return response.id

    async def generate_template_preview(
        self,
        template_id: str,
        personalization: dict[str, object],
    ) -> TemplatePreview:
        request = PreviewRequest(personalisation=personalization)
        response = await self._post(f"/v2/template/{template_id}/preview", request, PreviewResponse)
        return TemplatePreview(
            template_id=response.id, body=response.body, subject=response.subject
        )

    async def _post[ResponseT: BaseModel](
        self,
        path: str,
        request: BaseModel,
        response_schema: type[ResponseT],
    ) -> ResponseT:
        headers = {"Authorization": f"Bearer {create_bearer_token(self._api_key)}"}
        try:
            async with self._limiter, self._client_factory(self._resilience) as client:
                response = await client.post(
                    path,
                    json=request.model_dump(mode="json", exclude_none=True),
                    headers=headers,
                )
        except httpx.HTTPError as exc:
            raise NotifyDeliveryError(f"NotifyNL request to {path} failed: {exc}") from exc

        if response.is_error:
            raise NotifyDeliveryError(
                f"NotifyNL rejected {path}: {_describe_error(response)}",
                status_code=response.status_code,
            )
        try:
            return response_schema.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise NotifyDeliveryError(f"NotifyNL returned an unexpected answer for {path}") from exc


def _describe_error(response: httpx.Response) -> str:
    try:
        return ApiErrorResponse.model_validate(response.json()).describe()
    except (ValueError, ValidationError):
        return f"HTTP {response.status_code}"


def build_notify_client_factory(
    config: NotifyConfig,
    *,
    client_factory: ClientFactory | None = None,
) -> Callable[[str], NotifyNLClient]:
    def factory(organization_id: str) -> NotifyNLClient:
        log.info("Creating NotifyNL client for organisation %r", organization_id)
        return NotifyNLClient(
            config=config,
            organization_id=organization_id,
            client_factory=client_factory,
        )

    return factory
