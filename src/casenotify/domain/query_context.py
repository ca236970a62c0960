"""Per-notification facade over the query adapters.

A ``QueryContext`` is bound to exactly one event. Every lookup is memoised on
its logical key for the lifetime of that binding, so a scenario can ask for
the same party or case type from several gates and builders while the backend
is called once. Rebinding to another event clears the memo.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from casenotify.config.workflow import Variables
    from casenotify.domain.model import (
        Case,
        CaseStatuses,
        CaseType,
        CitizenData,
        CommonPartyData,
        Decision,
        DecisionResource,
        DecisionType,
        InfoObject,
        MessageObject,
        NotificationEvent,
        TaskObject,
    )
    from casenotify.domain.ports.querying import (
        BesluitenQuery,
        KlantQuery,
        ObjectenQuery,
        ObjectTypenQuery,
        ZaakQuery,
    )

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QueryService:
    """Adapter set chosen at startup; hands out one context per notification."""

    zaak: ZaakQuery
    klant: KlantQuery
    objecten: ObjectenQuery
    objecttypen: ObjectTypenQuery
    besluiten: BesluitenQuery
    variables: Variables

    def context_for(self, event: NotificationEvent) -> QueryContext:
        return QueryContext(self, event)


class QueryContext:
    def __init__(self, service: QueryService, event: NotificationEvent) -> None:
        self._service = service
        self._event = event
        self._cache: dict[str, Any] = {}
        self._locks: dict[str, asyncio.Lock] = {}
        self._generation = 0

    @property
    def event(self) -> NotificationEvent:
        return self._event

    @property
    def variables(self) -> Variables:
        return self._service.variables

    def bind(self, event: NotificationEvent) -> QueryContext:
        """Rebind to ``event`` and forget everything looked up for the previous one."""

        self._event = event
        self._cache.clear()
        self._locks.clear()
        self._generation += 1
        return self

    def cached_keys(self) -> frozenset[str]:
        return frozenset(self._cache)

    async def _memoized[T](self, key: str, load: Callable[[], Awaitable[T]]) -> T:
        if key in self._cache:
            return self._cache[key]
        lock = self._locks.setdefault(key, asyncio.Lock())
        async with lock:
            if key in self._cache:
                return self._cache[key]
            generation = self._generation
            value = await load()
            # a result fetched for a previous binding is returned but not kept
            if generation == self._generation:
                self._cache[key] = value
            return value

    # --- objects ---

    def is_valid_type(self, expected_uuid: str) -> bool:
        """Check the event's object type against ``expected_uuid`` without any I/O."""

        return self._service.objecttypen.is_valid_type(
            self._event.attributes.object_type_uri, expected_uuid
        )

    async def get_task(self) -> TaskObject:
        return await self._memoized(
            "task", lambda: self._service.objecten.get_task(self._event.main_object_uri)
        )

    async def get_message(self) -> MessageObject:
        return await self._memoized(
            "message", lambda: self._service.objecten.get_message(self._event.main_object_uri)
        )

    # --- cases ---

    def _case_uri(self, case_uri: str | None) -> str:
        return case_uri or self._event.main_object_uri

    async def get_case(self, case_uri: str | None = None) -> Case:
        uri = self._case_uri(case_uri)
        return await self._memoized("case", lambda: self._service.zaak.get_case(uri))

    async def get_case_statuses(self, case_uri: str | None = None) -> CaseStatuses:
        uri = self._case_uri(case_uri)
        return await self._memoized(
            "case_statuses", lambda: self._service.zaak.get_case_statuses(uri)
        )

    async def get_case_type(self, case_uri: str | None = None) -> CaseType:
        """Type of the most recent status of the case."""

        async def load() -> CaseType:
            statuses = await self.get_case_statuses(case_uri)
            return await self._service.zaak.get_case_type(statuses.last_status().status_type_uri)

        return await self._memoized("case_type", load)

    async def get_bsn_number(self, case_uri: str | None = None) -> CitizenData:
        uri = self._case_uri(case_uri)
        return await self._memoized("bsn", lambda: self._service.zaak.get_bsn_number(uri))

    # --- parties ---

    async def get_party(
        self,
        bsn_number: str | None = None,
        *,
        case_identifier: str | None = None,
    ) -> CommonPartyData:
        """Return the party to notify, resolving the case initiator when no BSN is given."""

        async def load() -> CommonPartyData:
            bsn = bsn_number or (await self.get_bsn_number()).bsn_number
            return await self._service.klant.get_party(bsn, case_identifier=case_identifier)

        return await self._memoized("party", load)

    # --- decisions ---

    async def get_decision_resource(self) -> DecisionResource:
        return await self._memoized(
            "decision_resource",
            lambda: self._service.besluiten.get_decision_resource(self._event.resource_uri),
        )

    async def get_info_object(self) -> InfoObject:
        async def load() -> InfoObject:
            resource = await self.get_decision_resource()
            return await self._service.besluiten.get_info_object(resource.info_object_uri)

        return await self._memoized("info_object", load)

    async def get_decision(self) -> Decision:
        async def load() -> Decision:
            resource = await self.get_decision_resource()
            return await self._service.besluiten.get_decision(resource.decision_uri)

        return await self._memoized("decision", load)

    async def get_decision_type(self) -> DecisionType:
        async def load() -> DecisionType:
            decision = await self.get_decision()
            return await self._service.besluiten.get_decision_type(decision.decision_type_uri)

        return await self._memoized("decision_type", load)
