"""Versioned query adapters for the Zaken and Catalogi APIs (OpenZaak)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from logging import getLogger
from typing import TYPE_CHECKING, ClassVar
from urllib.parse import urlencode

from casenotify.adapters.querying import ApiQueryClient
from casenotify.domain.initiator import resolve_initiator

from .schema import RolListSchema, RolSchema, StatusListSchema, StatusTypeSchema, ZaakSchema
from .translator import to_case, to_case_roles, to_case_statuses, to_case_type

if TYPE_CHECKING:
    from casenotify.adapters.http_resilience import ClientFactory
    from casenotify.config.http_resilience import ResilienceConfig
    from casenotify.config.workflow import Variables
    from casenotify.domain.model import Case, CaseRole, CaseStatuses, CaseType, CitizenData

log = getLogger(__name__)


class _QueryZaakBase(ABC):
    name: ClassVar[str] = "OpenZaak"
    version: ClassVar[str]

    def __init__(
        self,
        *,
        domain: str,
        variables: Variables,
        resilience: ResilienceConfig,
        catalogue_resilience: ResilienceConfig | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._domain = domain
        self._variables = variables
        self._api = ApiQueryClient(resilience, client_factory=client_factory)
        self._catalogue = ApiQueryClient(
            catalogue_resilience or resilience, client_factory=client_factory
        )

    def _url(self, path: str, **query: str) -> str:
        url = f"https://{self._domain}/zaken/api/v1/{path}"
        return f"{url}?{urlencode(query)}" if query else url

    async def get_case(self, case_uri: str) -> Case:
        schema = await self._api.get_model(case_uri, ZaakSchema)
        return to_case(schema, schema_version=self.version)

    async def get_case_statuses(self, case_uri: str) -> CaseStatuses:
        schema = await self._api.get_model(self._url("statussen", zaak=case_uri), StatusListSchema)
        return to_case_statuses(schema, schema_version=self.version)

    async def get_case_type(self, status_type_uri: str) -> CaseType:
        schema = await self._catalogue.get_model(status_type_uri, StatusTypeSchema)
        return to_case_type(schema, schema_version=self.version)

    @abstractmethod
    async def get_case_roles(self, case_uri: str) -> list[CaseRole]: ...

    async def get_bsn_number(self, case_uri: str) -> CitizenData:
        roles = await self.get_case_roles(case_uri)
        log.debug("%s v%s: %d roles for %s", self.name, self.version, len(roles), case_uri)
        return resolve_initiator(roles, self._variables.initiator_role)


class QueryZaakV1(_QueryZaakBase):
    """Zaken API 1.0: the roles endpoint answers with a bare JSON list."""

    version: ClassVar[str] = "1.0.0"

    async def get_case_roles(self, case_uri: str) -> list[CaseRole]:
        url = self._url("rollen", zaak=case_uri, betrokkeneType=self._variables.subject_type)
        roles = await self._api.get_list(url, RolSchema)
        return to_case_roles(roles)


class QueryZaakV2(_QueryZaakBase):
    """Zaken API 1.5+: paginated roles, pre-filtered on the generic role description."""

    version: ClassVar[str] = "2.0.0"

    async def get_case_roles(self, case_uri: str) -> list[CaseRole]:
        url = self._url(
            "rollen",
            zaak=case_uri,
            betrokkeneType=self._variables.subject_type,
            omschrijvingGeneriek=self._variables.initiator_role,
        )
        roles: list[RolSchema] = []
        next_url: str | None = url
        while next_url is not None:
            page = await self._api.get_model(next_url, RolListSchema)
            roles.extend(page.results)
            next_url = page.next
        return to_case_roles(roles)
