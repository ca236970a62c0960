from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING

import httpx
import jwt
import pytest

from casenotify.adapters.notifynl import (
    NotifyNLClient,
    build_notify_client_factory,
    create_bearer_token,
)
from casenotify.config.http_resilience import RateLimit, ResilienceConfig
from casenotify.config.notify import NotifyApiKey, NotifyConfig
from casenotify.domain.errors import NotifyDeliveryError
from tests.support.http import make_client_factory

if TYPE_CHECKING:
    from collections.abc import Callable

SERVICE_ID = "b6a7c3c2-1f2e-4f0a-9d3e-5c1b2a3d4e5f"
SECRET = "0f9e8d7c-6b5a-4c3d-2e1f-0a9b8c7d6e5f"
API_KEY = NotifyApiKey.parse(f"casenotify_test-{SERVICE_ID}-{SECRET}")
OTHER_SERVICE_ID = "11111111-2222-4333-8444-555555555555"
OTHER_KEY = NotifyApiKey.parse(f"other-{OTHER_SERVICE_ID}-{SECRET}")


def _config() -> NotifyConfig:
    return NotifyConfig(
        api_key=API_KEY,
        resilience=ResilienceConfig(name="notifynl", base_url="https://api.notifynl.test"),
        organization_api_keys={"002220647": OTHER_KEY},
    )


def _client(
    handler: Callable[[httpx.Request], httpx.Response],
    seen: list[httpx.Request],
    organization: str = "001479179",
) -> NotifyNLClient:
    return NotifyNLClient(
        config=_config(),
        organization_id=organization,
        client_factory=make_client_factory(handler, seen=seen),
    )


def test_bearer_token_is_signed_with_secret() -> None:
    token = create_bearer_token(API_KEY, issued_at=1_714_550_400)

    claims = jwt.decode(token, SECRET, algorithms=["HS256"], options={"verify_iat": False})

    assert claims == {"iss": SERVICE_ID, "iat": 1_714_550_400}


def test_send_email_posts_notification() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(201, json={"id": "n-1", "reference": "ref"})

    notification_id = asyncio.run(
        _client(handler, seen).send_email(
            "jan@example.nl", "tpl-1", {"zaak.identificatie": "Z1"}, reference="ref"
        )
    )

    assert notification_id == "n-1"
    [request] = seen
    assert request.url == "https://api.notifynl.test/v2/notifications/email"
    assert json.loads(request.content) == {
        "email_address": "jan@example.nl",
        "template_id": "tpl-1",
        "personalisation": {"zaak.identificatie": "Z1"},
        "reference": "ref",
    }
    scheme, token = request.headers["Authorization"].split(" ")
    assert scheme == "Bearer"
    assert jwt.decode(token, SECRET, algorithms=["HS256"])["iss"] == SERVICE_ID


def test_organization_key_is_used_for_its_organization() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(201, json={"id": "n-1"})

    asyncio.run(
        _client(handler, seen, organization="002220647").send_sms(
            "+31612345678", "tpl-1", {}, reference="ref"
        )
    )

    token = seen[0].headers["Authorization"].removeprefix("Bearer ")
    assert jwt.decode(token, SECRET, algorithms=["HS256"])["iss"] == OTHER_SERVICE_ID
    assert seen[0].url.path == "/v2/notifications/sms"


def test_rejected_request_raises_delivery_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            400,
            json={
                "status_code": 400,
                "errors": [{"error": "BadRequestError", "message": "Template not found"}],
            },
        )

    with pytest.raises(NotifyDeliveryError, match="Template not found") as excinfo:
        asyncio.run(_client(handler, []).send_letter("tpl-1", {}, reference="ref"))

    assert excinfo.value.status_code == 400


def test_unreachable_service_raises_delivery_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(NotifyDeliveryError):
        asyncio.run(_client(handler, []).send_email("a@b.nl", "tpl", {}, reference="ref"))


def test_template_preview() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json={"id": "tpl-1", "type": "email", "body": "Beste Jan", "subject": "Zaak"}
        )

    preview = asyncio.run(
        _client(handler, seen).generate_template_preview("tpl-1", {"klant.voornaam": "Jan"})
    )

    assert (preview.template_id, preview.body, preview.subject) == ("tpl-1", "Beste Jan", "Zaak")
    assert seen[0].url.path == "/v2/template/tpl-1/preview"


def test_factory_builds_client_per_organization() -> None:
    factory = build_notify_client_factory(_config())

    client = factory("002220647")

    assert client.organization_id == "002220647"


def test_deliveries_share_the_client_rate_limit() -> None:
    seen: list[httpx.Request] = []
    config = NotifyConfig(
        api_key=API_KEY,
        resilience=ResilienceConfig(
            name="notifynl",
            base_url="https://api.notifynl.test",
            ratelimit=RateLimit(max_calls=1, per_seconds=60.0),
        ),
    )
    client = NotifyNLClient(
        config=config,
        organization_id="001479179",
        client_factory=make_client_factory(
            lambda _: httpx.Response(201, json={"id": "n-1"}), seen=seen
        ),
    )

    async def run() -> None:
        await client.send_sms("0612345678", "tpl-1", {}, reference="ref")
        async with asyncio.timeout(0.2):
            await client.send_sms("0612345678", "tpl-1", {}, reference="ref")

    with pytest.raises(TimeoutError):
        asyncio.run(run())
    assert len(seen) == 1
