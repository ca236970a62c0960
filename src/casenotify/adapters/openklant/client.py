"""Versioned query adapters for the customer APIs (OpenKlant)."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, ClassVar
from urllib.parse import urlencode

from casenotify.adapters.querying import ApiQueryClient
from casenotify.domain.errors import MalformedResponseError

from .schema import DigitaalAdresListSchema, KlantListSchema, PartijListSchema
from .translator import AddressDescriptions, party_from_v1, party_from_v2

if TYPE_CHECKING:
    from casenotify.adapters.http_resilience import ClientFactory
    from casenotify.config.http_resilience import ResilienceConfig
    from casenotify.config.workflow import Variables
    from casenotify.domain.model import CommonPartyData

log = getLogger(__name__)


class QueryKlantV1:
    """Klanten API 1.0: one flat ``klant`` record per citizen."""

    name: ClassVar[str] = "OpenKlant"
    version: ClassVar[str] = "1.0.0"

    def __init__(
        self,
        *,
        domain: str,
        variables: Variables,
        resilience: ResilienceConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._domain = domain
        self._variables = variables
        self._api = ApiQueryClient(resilience, client_factory=client_factory)

    async def get_party(
        self,
        bsn_number: str,
        *,
        case_identifier: str | None = None,  # noqa: ARG002
    ) -> CommonPartyData:
        query = urlencode({"subjectNatuurlijkPersoon__inpBsn": bsn_number})
        url = f"https://{self._domain}/klanten/api/v1/klanten?{query}"
        page = await self._api.get_model(url, KlantListSchema)
        if not page.results:
            raise MalformedResponseError("Klanten API returned no party for the citizen")
        return party_from_v1(page.results[0])


class QueryKlantV2:
    """Klantinteracties API 2.0: parties with separately stored digital addresses."""

    name: ClassVar[str] = "OpenKlant"
    version: ClassVar[str] = "2.0.0"

    def __init__(
        self,
        *,
        domain: str,
        variables: Variables,
        resilience: ResilienceConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._domain = domain
        self._variables = variables
        self._api = ApiQueryClient(resilience, client_factory=client_factory)
        self._descriptions = AddressDescriptions(
            email=variables.email_generic_description,
            phone=variables.phone_generic_description,
        )

    def _url(self, path: str, query: dict[str, str]) -> str:
        return f"https://{self._domain}/klantinteracties/api/v1/{path}?{urlencode(query)}"

    async def get_party(
        self,
        bsn_number: str,
        *,
        case_identifier: str | None = None,
    ) -> CommonPartyData:
        url = self._url(
            "partijen",
            {
                "partijIdentificator__codeSoortObjectId": self._variables.party_identifier,
                "partijIdentificator__objectId": bsn_number,
                "expand": "digitaleAdressen",
            },
        )
        page = await self._api.get_model(url, PartijListSchema)
        if not page.results:
            raise MalformedResponseError("Klantinteracties API returned no party for the citizen")
        party = page.results[0]

        expanded = party.expand.digitale_adressen if party.expand is not None else None
        if expanded is None:
            log.debug("Party %s not expanded; fetching digital addresses", party.uuid)
            addresses_url = self._url("digitaleadressen", {"verstrektDoorPartij__uuid": party.uuid})
            expanded = (await self._api.get_model(addresses_url, DigitaalAdresListSchema)).results

        return party_from_v2(
            party,
            expanded,
            descriptions=self._descriptions,
            case_identifier=case_identifier,
        )
