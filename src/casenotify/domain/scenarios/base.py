"""Scenario strategy skeleton: ordered gates, then package assembly.

A scenario walks ``START -> VALIDATING -> ASSEMBLING -> DONE``. Any gate may
end the walk in ``ABORTED``; that is a normal outcome reported as an
``Aborted`` value, not an exception. Backend and parsing failures propagate as
``ProcessingError`` subclasses and also leave the scenario ``ABORTED``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from logging import getLogger
from typing import TYPE_CHECKING, ClassVar

from casenotify.config.errors import ConfigurationError
from casenotify.domain.errors import MissingContactMethodError
from casenotify.domain.model import (
    ContactSubject,
    DistributionChannel,
    NotifyData,
    NotifyMethod,
    ScenarioState,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from casenotify.config.workflow import ScenarioTemplates, WorkflowConfig
    from casenotify.domain.model import CommonPartyData, NotificationEvent
    from casenotify.domain.query_context import QueryContext, QueryService

log = getLogger(__name__)

type Personalization = dict[str, object]

_METHODS_BY_CHANNEL: dict[DistributionChannel, tuple[NotifyMethod, ...]] = {
    DistributionChannel.EMAIL: (NotifyMethod.EMAIL,),
    DistributionChannel.SMS: (NotifyMethod.SMS,),
    DistributionChannel.LETTER: (NotifyMethod.LETTER,),
    DistributionChannel.BOTH: (NotifyMethod.EMAIL, NotifyMethod.SMS),
}


@dataclass(frozen=True, slots=True)
class Gate:
    """One precondition; ``check`` returns an abort reason or ``None`` to continue."""

    name: str
    check: Callable[[], Awaitable[str | None]]


@dataclass(frozen=True, slots=True)
class Assembled:
    packages: tuple[NotifyData, ...]


@dataclass(frozen=True, slots=True)
class Aborted:
    reason: str
    gate: str = ""


type AssemblyResult = Assembled | Aborted


def format_value(value: object) -> str:
    """Render a personalisation value the way the message templates expect it."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, date):
        return value.strftime("%d-%m-%Y")
    return str(value)


def party_personalization(party: CommonPartyData) -> Personalization:
    return {
        "klant.voornaam": party.name,
        "klant.voorvoegselAchternaam": party.surname_prefix,
        "klant.achternaam": party.surname,
    }


class BaseScenario(ABC):
    name: ClassVar[str]

    def __init__(self, queries: QueryService, workflow: WorkflowConfig) -> None:
        self._queries = queries
        self._workflow = workflow
        self._context: QueryContext | None = None
        self._party: CommonPartyData | None = None
        self.state = ScenarioState.START

    @property
    def context(self) -> QueryContext:
        if self._context is None:
            raise RuntimeError(f"{type(self).__name__} is not bound to an event")
        return self._context

    @property
    def party(self) -> CommonPartyData:
        if self._party is None:
            raise RuntimeError(f"{type(self).__name__} has not loaded a party yet")
        return self._party

    @property
    def workflow(self) -> WorkflowConfig:
        return self._workflow

    def _bind(self, event: NotificationEvent) -> QueryContext:
        if self._context is None:
            self._context = self._queries.context_for(event)
        else:
            self._context.bind(event)
        return self._context

    async def assemble_notifications(self, event: NotificationEvent) -> AssemblyResult:
        self._bind(event)
        self.state = ScenarioState.VALIDATING
        try:
            for gate in self.gates():
                reason = await gate.check()
                if reason is not None:
                    self.state = ScenarioState.ABORTED
                    log.info("Scenario %s aborted at %r: %s", self.name, gate.name, reason)
                    return Aborted(reason=reason, gate=gate.name)

            self.state = ScenarioState.ASSEMBLING
            self._party = await self.prepare_party()
            packages = await self._build_packages(self._party)
        except BaseException:
            self.state = ScenarioState.ABORTED
            raise

        self.state = ScenarioState.DONE
        log.info("Scenario %s assembled %d package(s)", self.name, len(packages))
        return Assembled(packages=tuple(packages))

    async def contact_subject(self, event: NotificationEvent) -> ContactSubject:
        """Party and case a delivery for ``event`` concerned, without re-running the gates."""

        self._bind(event)
        self._party = await self.prepare_party()
        return ContactSubject(party=self._party, case_uri=await self.subject_case_uri())

    async def subject_case_uri(self) -> str | None:
        return None

    def drop_cache(self) -> None:
        """Forget the party and every lookup made for the current event."""

        self._party = None
        if self._context is not None:
            self._context.bind(self._context.event)

    @abstractmethod
    def gates(self) -> Sequence[Gate]: ...

    @abstractmethod
    async def prepare_party(self) -> CommonPartyData: ...

    # --- templates and personalisation ---

    @property
    def template_key(self) -> str:
        return self.name

    def _templates(self) -> ScenarioTemplates:
        return self._workflow.templates.for_scenario(self.template_key)

    def email_template_id(self) -> str | None:
        return self._templates().email

    def sms_template_id(self) -> str | None:
        return self._templates().sms

    def letter_template_id(self) -> str | None:
        return self._templates().letter

    @abstractmethod
    async def email_personalization(self, party: CommonPartyData) -> Personalization: ...

    async def sms_personalization(self, party: CommonPartyData) -> Personalization:
        return await self.email_personalization(party)

    async def letter_personalization(self, party: CommonPartyData) -> Personalization:
        return await self.email_personalization(party)

    async def _build_packages(self, party: CommonPartyData) -> list[NotifyData]:
        methods = _METHODS_BY_CHANNEL.get(party.distribution_channel)
        if methods is None:
            raise MissingContactMethodError(
                f"Party has no notification method ({party.distribution_channel})"
            )
        return [await self._build_package(method, party) for method in methods]

    async def _build_package(self, method: NotifyMethod, party: CommonPartyData) -> NotifyData:
        match method:
            case NotifyMethod.EMAIL:
                contact = party.email_address
                template_id = self.email_template_id()
                personalization = await self.email_personalization(party)
            case NotifyMethod.SMS:
                contact = party.telephone_number
                template_id = self.sms_template_id()
                personalization = await self.sms_personalization(party)
            case NotifyMethod.LETTER:
                contact = party.full_name
                template_id = self.letter_template_id()
                personalization = await self.letter_personalization(party)

        if method is not NotifyMethod.LETTER and not contact:
            raise MissingContactMethodError(f"Party prefers {method} but has no {method} contact")
        if not template_id:
            raise ConfigurationError(f"No {method} template configured for {self.template_key}")
        return NotifyData(
            method=method,
            contact_details=contact,
            template_id=template_id,
            personalization={key: format_value(value) for key, value in personalization.items()},
        )
