from __future__ import annotations

from datetime import date

import pytest

from casenotify.adapters.objecttypen import QueryObjectTypen
from casenotify.config.workflow import (
    ScenarioTemplates,
    TemplateIds,
    Variables,
    Whitelist,
    Whitelists,
    WorkflowConfig,
)
from casenotify.domain.dispatch import ClientRegistry
from casenotify.domain.model import (
    Case,
    CaseRole,
    CitizenData,
    Confidentiality,
    Decision,
    DecisionResource,
    DecisionType,
    Identification,
    IdentificationType,
    InfoObject,
    InfoObjectStatus,
    MessageObject,
)
from casenotify.domain.query_context import QueryService
from tests.support.builders import (
    BSN,
    CASE_URI,
    INFO_OBJECT_TYPE_UUID,
    MESSAGE_TYPE_UUID,
    TASK_TYPE_UUID,
    TASK_URI,
    make_case_type,
    make_party,
    make_statuses,
    make_task,
)
from tests.support.fakes import (
    FakeBesluitenQuery,
    FakeKlantQuery,
    FakeObjectenQuery,
    FakeZaakQuery,
)

CATALOGI = "https://openzaak.example.nl/catalogi/api/v1"
DOCUMENT_URI = "https://openzaak.example.nl/documenten/api/v1/enkelvoudiginformatieobjecten/1"


@pytest.fixture
def variables() -> Variables:
    return Variables(
        task_object_type_uuid=TASK_TYPE_UUID,
        message_object_type_uuid=MESSAGE_TYPE_UUID,
        decision_info_object_type_uuids=(INFO_OBJECT_TYPE_UUID,),
    )


@pytest.fixture
def workflow(variables: Variables) -> WorkflowConfig:
    allow_all = Whitelist.from_values(("*",))
    templates = {
        scenario: ScenarioTemplates(
            email=f"{scenario}-email", sms=f"{scenario}-sms", letter=f"{scenario}-letter"
        )
        for scenario in (
            "case_created",
            "case_updated",
            "case_closed",
            "task_assigned",
            "message_received",
        )
    }
    templates["decision_made"] = ScenarioTemplates(email="decision_made-email")
    return WorkflowConfig(
        variables=variables,
        whitelists=Whitelists(
            case_created=allow_all,
            case_updated=allow_all,
            case_closed=allow_all,
            decision_made=allow_all,
            messages_allowed=True,
        ),
        templates=TemplateIds(by_scenario=templates),
    )


@pytest.fixture
def zaak_query() -> FakeZaakQuery:
    return FakeZaakQuery(
        case=Case(
            uri=CASE_URI,
            identification="ZAAK-2024-0000000042",
            name="Aanvraag parkeervergunning",
            case_type_uri="https://openzaak.example.nl/catalogi/api/v1/zaaktypen/1",
            registration_date=date(2024, 5, 1),
        ),
        statuses=make_statuses(2),
        case_type=make_case_type(),
        roles=[CaseRole(role_label="initiator", citizen=CitizenData(bsn_number=BSN))],
    )


@pytest.fixture
def klant_query() -> FakeKlantQuery:
    return FakeKlantQuery(make_party())


@pytest.fixture
def objecten_query() -> FakeObjectenQuery:
    return FakeObjectenQuery(
        task=make_task(),
        message=MessageObject(
            uri=TASK_URI,
            subject="Nieuw bericht",
            actions_perspective="Lees het bericht",
            identification=Identification(type=IdentificationType.BSN, value=BSN),
        ),
    )


@pytest.fixture
def besluiten_query() -> FakeBesluitenQuery:
    return FakeBesluitenQuery(
        resource=DecisionResource(
            uri="https://openzaak.example.nl/besluiten/api/v1/besluitinformatieobjecten/1",
            decision_uri="https://openzaak.example.nl/besluiten/api/v1/besluiten/1",
            info_object_uri=DOCUMENT_URI,
        ),
        info_object=InfoObject(
            uri=DOCUMENT_URI,
            type_uri=f"{CATALOGI}/informatieobjecttypen/{INFO_OBJECT_TYPE_UUID}",
            status=InfoObjectStatus.FINAL,
            confidentiality=Confidentiality.PUBLIC,
        ),
        decision=Decision(
            uri="https://openzaak.example.nl/besluiten/api/v1/besluiten/1",
            identification="BESLUIT-2024-1",
            decision_type_uri="https://openzaak.example.nl/catalogi/api/v1/besluittypen/1",
            case_uri=CASE_URI,
            date=date(2024, 5, 2),
        ),
        decision_type=DecisionType(
            uri="https://openzaak.example.nl/catalogi/api/v1/besluittypen/1",
            name="Vergunning verleend",
            publication_indicator=True,
        ),
    )


@pytest.fixture
def query_service(
    zaak_query: FakeZaakQuery,
    klant_query: FakeKlantQuery,
    objecten_query: FakeObjectenQuery,
    besluiten_query: FakeBesluitenQuery,
    variables: Variables,
) -> QueryService:
    return QueryService(
        zaak=zaak_query,
        klant=klant_query,
        objecten=objecten_query,
        objecttypen=QueryObjectTypen(),
        besluiten=besluiten_query,
        variables=variables,
    )


@pytest.fixture
def client_registry() -> ClientRegistry:
    return ClientRegistry()
