from __future__ import annotations

import asyncio
import json
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import httpx
import pytest

from casenotify.adapters.openklant import RegisterContactV1, RegisterContactV2
from casenotify.config.http_resilience import ResilienceConfig
from casenotify.config.registration import RegistrationConfig
from casenotify.domain.errors import BackendUnavailableError, MalformedResponseError
from casenotify.domain.model import ContactMoment, NotifyMethod
from tests.support.builders import CASE_URI
from tests.support.http import make_client_factory

if TYPE_CHECKING:
    from collections.abc import Callable

DOMAIN = "openklant.example.nl"
PARTY_UUID = "3B9C8F1E-1D2A-4C5B-8E7F-0A1B2C3D4E5F"
PARTY_URI = f"https://{DOMAIN}/klantinteracties/api/v1/partijen/{PARTY_UUID}"
CONTACT_URI = f"https://{DOMAIN}/contactmomenten/api/v1/contactmomenten/cm-1"
KLANTCONTACT_UUID = "0f5d5c1e-7a6b-4c3d-9e8f-1a2b3c4d5e6f"
KLANTCONTACT_URI = f"https://{DOMAIN}/klantinteracties/api/v1/klantcontacten/{KLANTCONTACT_UUID}"
ACTOR_UUID = "9a8b7c6d-5e4f-4a3b-8c2d-1e0f9a8b7c6d"


def _contact(*, case_uri: str | None = CASE_URI, success: bool = True) -> ContactMoment:
    return ContactMoment(
        organization_id="001479179",
        method=NotifyMethod.EMAIL,
        subject="Notificatie verzonden",
        body="De notificatie is per e-mail verzonden.",
        is_successful=success,
        occurred_at=datetime(2024, 5, 1, 10, 15, tzinfo=UTC),
        party_uri=PARTY_URI,
        case_uri=case_uri,
    )


def _body(request: httpx.Request) -> dict[str, object]:
    return json.loads(request.content)


def _v1(
    handler: Callable[[httpx.Request], httpx.Response],
    seen: list[httpx.Request],
) -> RegisterContactV1:
    return RegisterContactV1(
        domain=DOMAIN,
        registration=RegistrationConfig(employee_identification="notifier"),
        resilience=ResilienceConfig(name="contactmomenten"),
        client_factory=make_client_factory(handler, seen=seen),
    )


def _v2(
    handler: Callable[[httpx.Request], httpx.Response],
    seen: list[httpx.Request],
    *,
    actor_uuid: str | None = None,
) -> RegisterContactV2:
    return RegisterContactV2(
        domain=DOMAIN,
        registration=RegistrationConfig(actor_uuid=actor_uuid),
        resilience=ResilienceConfig(name="openklant"),
        client_factory=make_client_factory(handler, seen=seen),
    )


def _created_contactmoment(request: httpx.Request) -> httpx.Response:
    if request.url.path.endswith("/contactmomenten"):
        return httpx.Response(201, json={"url": CONTACT_URI, "kanaal": "email"})
    return httpx.Response(201, json={"url": f"{request.url}/link-1"})


def test_v1_creates_contact_moment_and_links_case_and_customer() -> None:
    seen: list[httpx.Request] = []

    uri = asyncio.run(_v1(_created_contactmoment, seen).register_contact(_contact()))

    assert uri == CONTACT_URI
    assert [request.method for request in seen] == ["POST", "POST", "POST"]
    assert [request.url.path.rsplit("/", 1)[-1] for request in seen] == [
        "contactmomenten",
        "objectcontactmomenten",
        "klantcontactmomenten",
    ]
    created, case_link, customer_link = (_body(request) for request in seen)
    assert created == {
        "bronorganisatie": "001479179",
        "registratiedatum": "2024-05-01T10:15:00+00:00",
        "kanaal": "email",
        "tekst": "De notificatie is per e-mail verzonden.",
        "initiatief": "gemeente",
        "medewerkerIdentificatie": {"identificatie": "notifier", "achternaam": "notifier"},
    }
    assert case_link == {"contactmoment": CONTACT_URI, "object": CASE_URI, "objectType": "zaak"}
    assert customer_link == {
        "contactmoment": CONTACT_URI,
        "klant": PARTY_URI,
        "rol": "belanghebbende",
        "gelezen": False,
    }


def test_v1_without_case_only_links_customer() -> None:
    seen: list[httpx.Request] = []

    asyncio.run(_v1(_created_contactmoment, seen).register_contact(_contact(case_uri=None)))

    assert [request.url.path.rsplit("/", 1)[-1] for request in seen] == [
        "contactmomenten",
        "klantcontactmomenten",
    ]


def test_v1_rejected_contact_moment_is_not_linked() -> None:
    seen: list[httpx.Request] = []

    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"detail": "invalid"})

    with pytest.raises(BackendUnavailableError) as excinfo:
        asyncio.run(_v1(handler, seen).register_contact(_contact()))

    assert excinfo.value.status_code == 400
    assert len(seen) == 1


def _created_klantcontact(request: httpx.Request) -> httpx.Response:
    if request.url.path.endswith("/maak-klantcontact"):
        return httpx.Response(
            201,
            json={
                "klantcontact": {
                    "uuid": KLANTCONTACT_UUID,
                    "url": KLANTCONTACT_URI,
                },
                "betrokkene": {"uuid": "b-1"},
            },
        )
    return httpx.Response(201, json={"uuid": "link-1"})


def test_v2_registers_klantcontact_with_party_and_case() -> None:
    seen: list[httpx.Request] = []

    uri = asyncio.run(_v2(_created_klantcontact, seen).register_contact(_contact(success=False)))

    assert uri == KLANTCONTACT_URI
    [request] = seen
    assert request.method == "POST"
    assert request.url.path == "/klantinteracties/api/v1/maak-klantcontact"
    body = _body(request)
    assert body["klantcontact"] == {
        "kanaal": "email",
        "onderwerp": "Notificatie verzonden",
        "inhoud": "De notificatie is per e-mail verzonden.",
        "indicatieContactGelukt": False,
        "taal": "nld",
        "vertrouwelijk": True,
        "plaatsgevondenOp": "2024-05-01T10:15:00+00:00",
    }
    assert body["betrokkene"] == {
        "wasPartij": {"uuid": "3b9c8f1e-1d2a-4c5b-8e7f-0a1b2c3d4e5f"},
        "rol": "klant",
        "initiator": True,
    }
    assert body["onderwerpobject"] == {
        "onderwerpobjectidentificator": {
            "objectId": "4205aec5-9f5b-4abf-b177-c5a9946a77af",
            "codeObjecttype": "zaak",
            "codeRegister": "openzaak",
            "codeSoortObjectId": "uuid",
        }
    }


def test_v2_without_case_has_no_subject_object() -> None:
    seen: list[httpx.Request] = []

    asyncio.run(_v2(_created_klantcontact, seen).register_contact(_contact(case_uri=None)))

    [request] = seen
    assert "onderwerpobject" not in _body(request)


def test_v2_links_configured_actor() -> None:
    seen: list[httpx.Request] = []

    asyncio.run(
        _v2(_created_klantcontact, seen, actor_uuid=ACTOR_UUID).register_contact(_contact())
    )

    assert [request.url.path for request in seen] == [
        "/klantinteracties/api/v1/maak-klantcontact",
        "/klantinteracties/api/v1/actorklantcontacten",
    ]
    assert _body(seen[1]) == {
        "actor": {"uuid": ACTOR_UUID},
        "klantcontact": {"uuid": KLANTCONTACT_UUID},
    }


def test_v2_answer_without_klantcontact_is_malformed() -> None:
    seen: list[httpx.Request] = []

    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(201, json={"betrokkene": {"uuid": "b-1"}})

    with pytest.raises(MalformedResponseError):
        asyncio.run(_v2(handler, seen).register_contact(_contact()))


def test_adapters_report_their_api_versions() -> None:
    assert (RegisterContactV1.name, RegisterContactV1.version) == ("Contactmomenten", "1.0.0")
    assert (RegisterContactV2.name, RegisterContactV2.version) == ("Klantcontacten", "2.0.0")
