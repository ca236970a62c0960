from __future__ import annotations

import asyncio
from dataclasses import replace
from typing import TYPE_CHECKING

import pytest

from casenotify.config.workflow import Whitelists
from casenotify.domain.model import (
    Channel,
    Confidentiality,
    DistributionChannel,
    InfoObjectStatus,
    NotifyMethod,
    Resource,
)
from casenotify.domain.scenarios import (
    Aborted,
    Assembled,
    DecisionMadeScenario,
    MessageReceivedScenario,
)
from tests.support.builders import (
    BSN,
    MESSAGE_TYPE_UUID,
    OBJECTTYPEN,
    TASK_URI,
    make_case_type,
    make_event,
    make_party,
)

if TYPE_CHECKING:
    from casenotify.config.workflow import WorkflowConfig
    from casenotify.domain.model import NotificationEvent
    from casenotify.domain.query_context import QueryService
    from tests.support.fakes import FakeBesluitenQuery, FakeKlantQuery, FakeZaakQuery

CATALOGI = "https://openzaak.example.nl/catalogi/api/v1"


def _message_event() -> NotificationEvent:
    return make_event(
        channel=Channel.OBJECTEN,
        resource=Resource.OBJECT,
        main_object_uri=TASK_URI,
        resource_uri=TASK_URI,
        object_type_uri=f"{OBJECTTYPEN}/{MESSAGE_TYPE_UUID}",
    )


def _decision_event() -> NotificationEvent:
    return make_event(
        channel=Channel.BESLUITEN,
        resource=Resource.BESLUIT_INFORMATIEOBJECT,
        main_object_uri="https://openzaak.example.nl/besluiten/api/v1/besluiten/1",
        resource_uri="https://openzaak.example.nl/besluiten/api/v1/besluitinformatieobjecten/1",
    )


def test_message_received_uses_message_recipient(
    query_service: QueryService,
    workflow: WorkflowConfig,
    klant_query: FakeKlantQuery,
) -> None:
    scenario = MessageReceivedScenario(query_service, workflow)

    result = asyncio.run(scenario.assemble_notifications(_message_event()))

    assert isinstance(result, Assembled)
    assert klant_query.arguments["get_party"] == [BSN]
    personalization = result.packages[0].personalization
    assert personalization["message.onderwerp"] == "Nieuw bericht"
    assert personalization["message.handelingsperspectief"] == "Lees het bericht"


def test_message_received_respects_disabled_messages(
    query_service: QueryService,
    workflow: WorkflowConfig,
) -> None:
    disabled = replace(workflow, whitelists=Whitelists(messages_allowed=False))
    scenario = MessageReceivedScenario(query_service, disabled)

    result = asyncio.run(scenario.assemble_notifications(_message_event()))

    assert result == Aborted(reason="message notifications are disabled", gate="messages allowed")


def test_decision_made_assembles_decision_personalization(
    query_service: QueryService,
    workflow: WorkflowConfig,
    zaak_query: FakeZaakQuery,
    besluiten_query: FakeBesluitenQuery,
) -> None:
    scenario = DecisionMadeScenario(query_service, workflow)

    result = asyncio.run(scenario.assemble_notifications(_decision_event()))

    assert isinstance(result, Assembled)
    personalization = result.packages[0].personalization
    assert personalization["besluit.identificatie"] == "BESLUIT-2024-1"
    assert personalization["besluit.datum"] == "02-05-2024"
    assert personalization["besluit.vervaldatum"] == ""
    assert personalization["besluittype.omschrijving"] == "Vergunning verleend"
    assert personalization["besluittype.publicatieindicatie"] == "yes"
    assert personalization["zaak.registratiedatum"] == "01-05-2024"
    assert personalization["zaaktype.omschrijving"] == "In behandeling"
    assert besluiten_query.calls["get_decision_resource"] == 1
    assert besluiten_query.calls["get_decision"] == 1
    assert zaak_query.calls["get_bsn_number"] == 1


def test_decision_sms_falls_back_to_shared_template(
    query_service: QueryService,
    workflow: WorkflowConfig,
    klant_query: FakeKlantQuery,
) -> None:
    klant_query.party = make_party(DistributionChannel.SMS)
    scenario = DecisionMadeScenario(query_service, workflow)

    result = asyncio.run(scenario.assemble_notifications(_decision_event()))

    assert isinstance(result, Assembled)
    [package] = result.packages
    assert package.method is NotifyMethod.SMS
    assert package.template_id == "decision_made-email"


@pytest.mark.parametrize(
    ("change", "gate"),
    [
        ({"type_uri": f"{CATALOGI}/informatieobjecttypen/other"}, "info object type"),
        ({"status": InfoObjectStatus.IN_PROGRESS}, "info object status"),
        ({"confidentiality": Confidentiality.CONFIDENTIAL}, "confidentiality"),
    ],
)
def test_decision_info_object_gates(
    query_service: QueryService,
    workflow: WorkflowConfig,
    besluiten_query: FakeBesluitenQuery,
    klant_query: FakeKlantQuery,
    change: dict[str, object],
    gate: str,
) -> None:
    info_object = besluiten_query.info_object
    besluiten_query.info_object = replace(info_object, **change)  # type: ignore[arg-type]
    scenario = DecisionMadeScenario(query_service, workflow)

    result = asyncio.run(scenario.assemble_notifications(_decision_event()))

    assert isinstance(result, Aborted)
    assert result.gate == gate
    assert klant_query.calls["get_party"] == 0


def test_decision_for_case_type_without_inform_flag_aborts(
    query_service: QueryService,
    workflow: WorkflowConfig,
    zaak_query: FakeZaakQuery,
) -> None:
    zaak_query.case_type = make_case_type(inform=False)
    scenario = DecisionMadeScenario(query_service, workflow)

    result = asyncio.run(scenario.assemble_notifications(_decision_event()))

    assert isinstance(result, Aborted)
    assert result.gate == "notification expected"
