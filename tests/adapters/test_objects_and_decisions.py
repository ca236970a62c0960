from __future__ import annotations

import asyncio
from datetime import date

import httpx
import pytest

from casenotify.adapters.besluiten import QueryBesluiten
from casenotify.adapters.objecten import QueryObjecten
from casenotify.adapters.objecttypen import QueryObjectTypen
from casenotify.config.http_resilience import ResilienceConfig
from casenotify.domain.errors import MalformedResponseError
from casenotify.domain.model import (
    Confidentiality,
    IdentificationType,
    InfoObjectStatus,
    TaskStatus,
)
from tests.support.builders import BSN, CASE_URI, OBJECTTYPEN, TASK_TYPE_UUID, TASK_URI
from tests.support.http import make_client_factory

BESLUITEN = "https://openzaak.example.nl/besluiten/api/v1"
CATALOGI = "https://openzaak.example.nl/catalogi/api/v1"


def _task_payload(**data: object) -> dict[str, object]:
    return {
        "url": TASK_URI,
        "type": f"{OBJECTTYPEN}/{TASK_TYPE_UUID}",
        "record": {
            "typeVersion": 1,
            "data": {
                "zaak": CASE_URI,
                "title": "Upload your documents",
                "status": "open",
                "verloopdatum": "2024-06-01T12:00:00Z",
                "identificatie": {"type": "bsn", "value": f" {BSN} "},
                **data,
            },
            "startAt": "2024-05-01",
        },
    }


def test_task_is_translated() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_task_payload())

    query = QueryObjecten(
        resilience=ResilienceConfig(name="objecten"),
        client_factory=make_client_factory(handler),
    )

    task = asyncio.run(query.get_task(TASK_URI))

    assert task.case_uri == CASE_URI
    assert task.is_open
    assert task.identification.type is IdentificationType.BSN
    assert task.identification.value == BSN
    assert task.schema_version == "2.3.1"


def test_closed_task_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_task_payload(status="gesloten"))

    query = QueryObjecten(
        resilience=ResilienceConfig(name="objecten"),
        client_factory=make_client_factory(handler),
    )

    task = asyncio.run(query.get_task(TASK_URI))

    assert task.status is TaskStatus.CLOSED
    assert not task.is_open


def test_message_is_translated() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        data = {
            "onderwerp": "Nieuw bericht",
            "handelingsperspectief": "Lees het bericht",
            "identificatie": {"type": "kvk", "value": "12345678"},
        }
        return httpx.Response(200, json={"url": TASK_URI, "record": {"data": data}})

    query = QueryObjecten(
        resilience=ResilienceConfig(name="objecten"),
        client_factory=make_client_factory(handler),
    )

    message = asyncio.run(query.get_message(TASK_URI))

    assert message.subject == "Nieuw bericht"
    assert message.identification.type is IdentificationType.KVK


def test_task_without_case_is_malformed() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        payload = _task_payload()
        del payload["record"]["data"]["zaak"]  # type: ignore[index]
        return httpx.Response(200, json=payload)

    query = QueryObjecten(
        resilience=ResilienceConfig(name="objecten"),
        client_factory=make_client_factory(handler),
    )

    with pytest.raises(MalformedResponseError):
        asyncio.run(query.get_task(TASK_URI))


@pytest.mark.parametrize(
    ("object_type_uri", "expected"),
    [
        (f"{OBJECTTYPEN}/{TASK_TYPE_UUID}", True),
        (f"{OBJECTTYPEN}/{TASK_TYPE_UUID.upper()}/", True),
        (f"{OBJECTTYPEN}/38327774-7023-4f25-9386-acb0c6f10636", False),
        (None, False),
        ("", False),
    ],
)
def test_object_type_compares_uuid_tail(
    object_type_uri: str | None,
    expected: bool,  # noqa: FBT001
) -> None:
    assert QueryObjectTypen().is_valid_type(object_type_uri, TASK_TYPE_UUID) is expected


def test_decision_chain_is_translated() -> None:
    seen: list[httpx.Request] = []
    responses = {
        "/besluiten/api/v1/besluitinformatieobjecten/1": {
            "url": f"{BESLUITEN}/besluitinformatieobjecten/1",
            "besluit": f"{BESLUITEN}/besluiten/1",
            "informatieobject": "https://openzaak.example.nl/documenten/api/v1/eio/1",
        },
        "/documenten/api/v1/eio/1": {
            "url": "https://openzaak.example.nl/documenten/api/v1/eio/1",
            "informatieobjecttype": f"{CATALOGI}/informatieobjecttypen/1",
            "status": "definitief",
            "vertrouwelijkheidaanduiding": "openbaar",
        },
        "/besluiten/api/v1/besluiten/1": {
            "url": f"{BESLUITEN}/besluiten/1",
            "identificatie": "BESLUIT-2024-1",
            "besluittype": f"{CATALOGI}/besluittypen/1",
            "zaak": CASE_URI,
            "datum": "2024-05-02",
            "uiterlijkeReactiedatum": "2024-06-13",
        },
        "/catalogi/api/v1/besluittypen/1": {
            "url": f"{CATALOGI}/besluittypen/1",
            "omschrijving": "Vergunning verleend",
            "publicatieIndicatie": True,
        },
    }

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=responses[request.url.path])

    query = QueryBesluiten(
        resilience=ResilienceConfig(name="besluiten"),
        client_factory=make_client_factory(handler, seen=seen),
    )

    async def load() -> None:
        resource = await query.get_decision_resource(f"{BESLUITEN}/besluitinformatieobjecten/1")
        info_object = await query.get_info_object(resource.info_object_uri)
        decision = await query.get_decision(resource.decision_uri)
        decision_type = await query.get_decision_type(decision.decision_type_uri)

        assert info_object.status is InfoObjectStatus.FINAL
        assert info_object.confidentiality is Confidentiality.PUBLIC
        assert decision.case_uri == CASE_URI
        assert decision.response_date == date(2024, 6, 13)
        assert decision_type.publication_indicator

    asyncio.run(load())

    assert len(seen) == 4
