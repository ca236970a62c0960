from __future__ import annotations

import base64

import pytest

from casenotify.adapters.notificatie import (
    decode_reference,
    encode_reference,
    event_to_payload,
    parse_event,
)
from casenotify.domain.errors import InvalidEventError
from casenotify.domain.model import Action, Channel, Resource
from tests.support.builders import CASE_URI

PAYLOAD = {
    "actie": "create",
    "kanaal": "zaken",
    "resource": "status",
    "kenmerken": {
        "zaaktype": "https://openzaak.example.nl/catalogi/api/v1/zaaktypen/1",
        "bronorganisatie": "001479179",
        "vertrouwelijkheidaanduiding": "openbaar",
    },
    "hoofdObject": CASE_URI,
    "resourceUrl": f"{CASE_URI}/statussen/1",
    "aanmaakdatum": "2024-05-01T09:30:00+00:00",
}


def test_parse_event() -> None:
    event = parse_event(PAYLOAD)

    assert (event.action, event.channel, event.resource) == (
        Action.CREATE,
        Channel.ZAKEN,
        Resource.STATUS,
    )
    assert event.main_object_uri == CASE_URI
    assert event.organization_id == "001479179"
    assert event.orphans == {}
    assert event.attributes.orphans == {}


def test_unknown_values_and_fields_are_kept() -> None:
    payload = {
        **PAYLOAD,
        "actie": "archive",
        "extraVeld": 1,
        "kenmerken": {**PAYLOAD["kenmerken"], "zaaktypeOud": "x"},  # type: ignore[dict-item]
    }

    event = parse_event(payload)

    assert event.action is Action.UNKNOWN
    assert event.orphans == {"extraVeld": 1}
    assert event.attributes.orphans == {"zaaktypeOud": "x"}


def test_orphans_survive_serialisation() -> None:
    payload = {**PAYLOAD, "extraVeld": 1}

    assert event_to_payload(parse_event(payload)) == payload


@pytest.mark.parametrize("missing", ["actie", "hoofdObject", "resourceUrl"])
def test_missing_required_field_is_invalid(missing: str) -> None:
    payload = {key: value for key, value in PAYLOAD.items() if key != missing}

    with pytest.raises(InvalidEventError):
        parse_event(payload)


def test_reference_round_trip() -> None:
    event = parse_event(PAYLOAD)

    assert decode_reference(encode_reference(event)) == event


@pytest.mark.parametrize(
    "reference",
    [
        "not base64!",
        base64.b64encode(b"not json").decode(),
        base64.b64encode(b"[1, 2]").decode(),
    ],
)
def test_bad_reference_is_invalid(reference: str) -> None:
    with pytest.raises(InvalidEventError):
        decode_reference(reference)
