"""Query adapter for the Besluiten API."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from casenotify.adapters.querying import ApiQueryClient
from casenotify.domain.model import (
    Confidentiality,
    Decision,
    DecisionResource,
    DecisionType,
    InfoObject,
    InfoObjectStatus,
)

from .schema import (
    BesluitInformatieObjectSchema,
    BesluitSchema,
    BesluitTypeSchema,
    InformatieObjectSchema,
)

if TYPE_CHECKING:
    from casenotify.adapters.http_resilience import ClientFactory
    from casenotify.config.http_resilience import ResilienceConfig


class QueryBesluiten:
    name: ClassVar[str] = "Besluiten"
    version: ClassVar[str] = "1.1.0"

    def __init__(
        self,
        *,
        resilience: ResilienceConfig,
        catalogue_resilience: ResilienceConfig | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._api = ApiQueryClient(resilience, client_factory=client_factory)
        self._catalogue = ApiQueryClient(
            catalogue_resilience or resilience, client_factory=client_factory
        )

    async def get_decision_resource(self, resource_uri: str) -> DecisionResource:
        schema = await self._api.get_model(resource_uri, BesluitInformatieObjectSchema)
        return DecisionResource(
            uri=schema.url,
            decision_uri=schema.besluit,
            info_object_uri=schema.informatieobject,
            schema_version=self.version,
        )

    async def get_info_object(self, info_object_uri: str) -> InfoObject:
        schema = await self._api.get_model(info_object_uri, InformatieObjectSchema)
        return InfoObject(
            uri=schema.url,
            type_uri=schema.informatieobjecttype,
            status=InfoObjectStatus.parse(schema.status),
            confidentiality=Confidentiality.parse(schema.vertrouwelijkheidaanduiding),
            schema_version=self.version,
        )

    async def get_decision(self, decision_uri: str) -> Decision:
        schema = await self._api.get_model(decision_uri, BesluitSchema)
        return Decision(
            uri=schema.url,
            identification=schema.identificatie,
            decision_type_uri=schema.besluittype,
            case_uri=schema.zaak,
            date=schema.datum,
            explanation=schema.toelichting,
            governing_body=schema.bestuursorgaan,
            effective_date=schema.ingangsdatum,
            expiration_date=schema.vervaldatum,
            expiration_reason=schema.vervalreden,
            publication_date=schema.publicatiedatum,
            shipping_date=schema.verzenddatum,
            response_date=schema.uiterlijke_reactiedatum,
            schema_version=self.version,
        )

    async def get_decision_type(self, decision_type_uri: str) -> DecisionType:
        schema = await self._catalogue.get_model(decision_type_uri, BesluitTypeSchema)
        return DecisionType(
            uri=schema.url,
            name=schema.omschrijving,
            generic_name=schema.omschrijving_generiek,
            category=schema.besluitcategorie,
            publication_indicator=schema.publicatie_indicatie,
            publication_text=schema.publicatietekst,
            explanation=schema.toelichting,
            schema_version=self.version,
        )
