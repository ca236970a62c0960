"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Any

from casenotify import __version__
from casenotify.adapters.besluiten import QueryBesluiten
from casenotify.adapters.notificatie import decode_reference, encode_reference, parse_event
from casenotify.adapters.notifynl import (
    NotifyNLClient,
    build_notify_client_factory,
    parse_delivery_receipt,
)
from casenotify.adapters.objecten import QueryObjecten
from casenotify.adapters.objecttypen import QueryObjectTypen
from casenotify.adapters.openklant import (
    QueryKlantV1,
    QueryKlantV2,
    RegisterContactV1,
    RegisterContactV2,
)
from casenotify.adapters.openzaak import QueryZaakV1, QueryZaakV2
from casenotify.config import get_app_config
from casenotify.domain.dispatch import NotifyDispatcher
from casenotify.domain.errors import (
    BackendUnavailableError,
    InvalidEventError,
    InvalidReceiptError,
    MalformedResponseError,
    UnimplementedScenarioError,
)
from casenotify.domain.query_context import QueryService
from casenotify.domain.registration import ReceiptRegistrar
from casenotify.domain.scenarios import Aborted, ScenariosResolver
from casenotify.domain.validation import EventHealth, validate_event
from casenotify.domain.versions import VersionsRegister, product_version

if TYPE_CHECKING:
    from collections.abc import Mapping

    from casenotify.adapters.http_resilience import ClientFactory
    from casenotify.config import AppConfig
    from casenotify.domain.model import DeliveryReceipt, NotificationEvent, NotifySendResult
    from casenotify.domain.ports.registering import ContactRegister
    from casenotify.domain.versions import VersionProvider

log = getLogger(__name__)

ZAAK_ADAPTERS: dict[str, type[QueryZaakV1 | QueryZaakV2]] = {
    "1": QueryZaakV1,
    "2": QueryZaakV2,
}
KLANT_ADAPTERS: dict[str, type[QueryKlantV1 | QueryKlantV2]] = {
    "1": QueryKlantV1,
    "2": QueryKlantV2,
}
REGISTER_ADAPTERS: dict[str, type[RegisterContactV1 | RegisterContactV2]] = {
    "1": RegisterContactV1,
    "2": RegisterContactV2,
}


class ProcessingStatus(StrEnum):
    SENT = "sent"
    ABORTED = "aborted"
    UNIMPLEMENTED = "unimplemented"
    BACKEND_UNAVAILABLE = "backend_unavailable"
    MALFORMED = "malformed"
    DELIVERY_FAILED = "delivery_failed"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class ProcessingOutcome:
    status: ProcessingStatus
    message: str = ""
    scenario: str | None = None
    results: tuple[NotifySendResult, ...] = field(default_factory=tuple)

    @property
    def sent(self) -> int:
        return sum(1 for result in self.results if result.is_success)

    @property
    def failed(self) -> int:
        return sum(1 for result in self.results if not result.is_success)


class ReceiptStatus(StrEnum):
    REGISTERED = "registered"
    IGNORED = "ignored"
    INVALID = "invalid"
    UNIMPLEMENTED = "unimplemented"
    BACKEND_UNAVAILABLE = "backend_unavailable"
    MALFORMED = "malformed"


@dataclass(frozen=True, slots=True)
class ReceiptOutcome:
    status: ReceiptStatus
    message: str = ""
    contact_uri: str | None = None


def build_query_service(
    config: AppConfig,
    *,
    client_factory: ClientFactory | None = None,
) -> QueryService:
    """Wire the adapter version configured for each backend."""

    backends = config.backends
    domains = backends.domains
    variables = config.workflow.variables
    zaak_adapter = ZAAK_ADAPTERS[backends.versions.openzaak]
    klant_adapter = KLANT_ADAPTERS[backends.versions.openklant]
    log.info(
        "Using %s v%s and %s v%s",
        zaak_adapter.name,
        zaak_adapter.version,
        klant_adapter.name,
        klant_adapter.version,
    )
    return QueryService(
        zaak=zaak_adapter(
            domain=domains.openzaak,
            variables=variables,
            resilience=backends.resilience_for("openzaak"),
            catalogue_resilience=backends.resilience_for("catalogi"),
            client_factory=client_factory,
        ),
        klant=klant_adapter(
            domain=domains.openklant,
            variables=variables,
            resilience=backends.resilience_for("openklant"),
            client_factory=client_factory,
        ),
        objecten=QueryObjecten(
            resilience=backends.resilience_for("objecten"),
            client_factory=client_factory,
        ),
        objecttypen=QueryObjectTypen(),
        besluiten=QueryBesluiten(
            resilience=backends.resilience_for("besluiten"),
            catalogue_resilience=backends.resilience_for("catalogi"),
            client_factory=client_factory,
        ),
        variables=variables,
    )


def build_dispatcher(
    config: AppConfig,
    *,
    client_factory: ClientFactory | None = None,
) -> NotifyDispatcher:
    return NotifyDispatcher(
        build_notify_client_factory(config.notify, client_factory=client_factory),
        reference_encoder=encode_reference,
    )


def build_contact_register(
    config: AppConfig,
    *,
    client_factory: ClientFactory | None = None,
) -> ContactRegister:
    """Wire the contact registration matching the configured OpenKlant version."""

    backends = config.backends
    version = backends.versions.openklant
    adapter = REGISTER_ADAPTERS[version]
    if version == "1":
        domain, resilience = backends.domains.contactmomenten, "contactmomenten"
    else:
        domain, resilience = backends.domains.openklant, "openklant"
    log.info("Registering contacts with %s v%s", adapter.name, adapter.version)
    return adapter(
        domain=domain,
        registration=config.registration,
        resilience=backends.resilience_for(resilience),
        client_factory=client_factory,
    )


def build_versions_register(
    queries: QueryService,
    contact_register: ContactRegister | None = None,
) -> VersionsRegister:
    components: list[VersionProvider] = [
        lambda: queries.zaak,
        lambda: queries.klant,
        lambda: queries.objecten,
        lambda: queries.objecttypen,
        lambda: queries.besluiten,
        lambda: NotifyNLClient,
    ]
    if contact_register is not None:
        components.append(lambda: contact_register)
    return VersionsRegister(components)


async def process_notification(
    event: NotificationEvent,
    *,
    resolver: ScenariosResolver,
    dispatcher: NotifyDispatcher,
    deadline_seconds: float | None = None,
) -> ProcessingOutcome:
    """Resolve, assemble and deliver one notification.

    Nothing is delivered unless assembly finished. Every failure of the
    processing taxonomy is reported as an outcome; cancellation and the
    deadline propagate as ``asyncio`` exceptions.
    """

    if validate_event(event) is EventHealth.INVALID:
        return ProcessingOutcome(ProcessingStatus.INVALID, "notification failed validation")

    scenario = resolver.resolve(event)
    try:
        async with asyncio.timeout(deadline_seconds):
            result = await scenario.assemble_notifications(event)
            if isinstance(result, Aborted):
                return ProcessingOutcome(ProcessingStatus.ABORTED, result.reason, scenario.name)
            results = [await dispatcher.send(event, package) for package in result.packages]
    except UnimplementedScenarioError as exc:
        return ProcessingOutcome(ProcessingStatus.UNIMPLEMENTED, str(exc), scenario.name)
    except BackendUnavailableError as exc:
        log.warning("Backend unavailable while handling %s: %s", scenario.name, exc)
        return ProcessingOutcome(ProcessingStatus.BACKEND_UNAVAILABLE, str(exc), scenario.name)
    except MalformedResponseError as exc:
        log.warning("Unusable backend data while handling %s: %s", scenario.name, exc)
        return ProcessingOutcome(ProcessingStatus.MALFORMED, str(exc), scenario.name)

    outcome_status = (
        ProcessingStatus.SENT
        if all(item.is_success for item in results)
        else ProcessingStatus.DELIVERY_FAILED
    )
    return ProcessingOutcome(
        outcome_status,
        f"{len(results)} package(s) handled",
        scenario.name,
        tuple(results),
    )


def handle_payload(
    payload: Mapping[str, Any],
    *,
    config: AppConfig | None = None,
    deadline_seconds: float | None = None,
) -> ProcessingOutcome:
    """Parse a Notificaties callback payload and process it with the configured adapters."""

    try:
        event = parse_event(payload)
    except InvalidEventError as exc:
        log.warning("Rejected notification: %s", exc)
        return ProcessingOutcome(ProcessingStatus.INVALID, str(exc))

    effective_config = config or get_app_config()
    queries = build_query_service(effective_config)
    resolver = ScenariosResolver(queries, effective_config.workflow)
    dispatcher = build_dispatcher(effective_config)
    log.info(
        "Processing %s/%s/%s for %s",
        event.channel,
        event.resource,
        event.action,
        event.main_object_uri,
    )
    outcome = asyncio.run(
        process_notification(
            event,
            resolver=resolver,
            dispatcher=dispatcher,
            deadline_seconds=deadline_seconds,
        )
    )
    log.info("Finished notification: status=%s, %s", outcome.status, outcome.message)
    return outcome


async def register_delivery_receipt(
    receipt: DeliveryReceipt,
    *,
    registrar: ReceiptRegistrar,
    deadline_seconds: float | None = None,
) -> ReceiptOutcome:
    """Record the outcome of one delivery in the citizen's contact history."""

    try:
        async with asyncio.timeout(deadline_seconds):
            contact_uri = await registrar.register(receipt)
    except InvalidReceiptError as exc:
        return ReceiptOutcome(ReceiptStatus.INVALID, str(exc))
    except UnimplementedScenarioError as exc:
        return ReceiptOutcome(ReceiptStatus.UNIMPLEMENTED, str(exc))
    except BackendUnavailableError as exc:
        log.warning("Backend unavailable while registering %s: %s", receipt.notification_id, exc)
        return ReceiptOutcome(ReceiptStatus.BACKEND_UNAVAILABLE, str(exc))
    except MalformedResponseError as exc:
        log.warning("Unusable backend data while registering %s: %s", receipt.notification_id, exc)
        return ReceiptOutcome(ReceiptStatus.MALFORMED, str(exc))

    if contact_uri is None:
        return ReceiptOutcome(ReceiptStatus.IGNORED, f"status {receipt.status} is not final")
    return ReceiptOutcome(
        ReceiptStatus.REGISTERED, f"{receipt.method} {receipt.feedback}", contact_uri
    )


def handle_delivery_receipt(
    payload: Mapping[str, Any],
    *,
    config: AppConfig | None = None,
    deadline_seconds: float | None = None,
) -> ReceiptOutcome:
    """Parse a NotifyNL delivery receipt callback and register its outcome."""

    try:
        receipt = parse_delivery_receipt(payload)
    except InvalidReceiptError as exc:
        log.warning("Rejected delivery receipt: %s", exc)
        return ReceiptOutcome(ReceiptStatus.INVALID, str(exc))

    effective_config = config or get_app_config()
    registrar = ReceiptRegistrar(
        ScenariosResolver(build_query_service(effective_config), effective_config.workflow),
        build_contact_register(effective_config),
        effective_config.registration.messages,
        reference_decoder=decode_reference,
    )
    log.info(
        "Processing %s receipt %s: %s", receipt.method, receipt.notification_id, receipt.status
    )
    outcome = asyncio.run(
        register_delivery_receipt(receipt, registrar=registrar, deadline_seconds=deadline_seconds)
    )
    log.info("Finished delivery receipt: status=%s, %s", outcome.status, outcome.message)
    return outcome


def describe_versions(config: AppConfig | None = None) -> str:
    effective_config = config or get_app_config()
    register = build_versions_register(
        build_query_service(effective_config), build_contact_register(effective_config)
    )
    return product_version(
        version=__version__,
        environment=effective_config.environment,
        workflow_version=effective_config.workflow_version,
        components=register.report_versions(),
    )
