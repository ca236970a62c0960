"""A decision on a case was made public through one of its information objects."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from casenotify.domain.model import Confidentiality, InfoObjectStatus

from .base import BaseScenario, Gate, party_personalization

if TYPE_CHECKING:
    from collections.abc import Sequence

    from casenotify.domain.model import CommonPartyData

    from .base import Personalization


class DecisionMadeScenario(BaseScenario):
    name: ClassVar[str] = "decision_made"

    def gates(self) -> Sequence[Gate]:
        return (
            Gate("info object type", self._check_info_object_type),
            Gate("info object status", self._check_info_object_status),
            Gate("confidentiality", self._check_confidentiality),
            Gate("whitelist", self._check_whitelist),
            Gate("notification expected", self._check_notification_expected),
        )

    async def _case_uri(self) -> str:
        return (await self.context.get_decision()).case_uri

    async def _check_info_object_type(self) -> str | None:
        info_object = await self.context.get_info_object()
        if info_object.type_uuid not in self.context.variables.decision_info_object_type_uuids:
            return f"information object type {info_object.type_uuid!r} is not whitelisted"
        return None

    async def _check_info_object_status(self) -> str | None:
        info_object = await self.context.get_info_object()
        if info_object.status is not InfoObjectStatus.FINAL:
            return f"information object is not final ({info_object.status})"
        return None

    async def _check_confidentiality(self) -> str | None:
        info_object = await self.context.get_info_object()
        if info_object.confidentiality is not Confidentiality.PUBLIC:
            return f"information object is not public ({info_object.confidentiality})"
        return None

    async def _check_whitelist(self) -> str | None:
        case_type = await self.context.get_case_type(await self._case_uri())
        if not self.workflow.whitelists.decision_made.is_allowed(case_type.identification):
            return f"case type {case_type.identification!r} is not whitelisted for decisions"
        return None

    async def _check_notification_expected(self) -> str | None:
        case_type = await self.context.get_case_type(await self._case_uri())
        if not case_type.is_notification_expected:
            return "case status does not require informing the citizen"
        return None

    async def prepare_party(self) -> CommonPartyData:
        case_uri = await self._case_uri()
        case = await self.context.get_case(case_uri)
        citizen = await self.context.get_bsn_number(case_uri)
        return await self.context.get_party(citizen.bsn_number, case_identifier=case.identification)

    async def subject_case_uri(self) -> str | None:
        return await self._case_uri()

    def sms_template_id(self) -> str | None:
        return self._templates().sms or self.email_template_id()

    async def email_personalization(self, party: CommonPartyData) -> Personalization:
        decision = await self.context.get_decision()
        decision_type = await self.context.get_decision_type()
        case = await self.context.get_case(decision.case_uri)
        case_type = await self.context.get_case_type(decision.case_uri)
        return {
            **party_personalization(party),
            "besluit.identificatie": decision.identification,
            "besluit.datum": decision.date,
            "besluit.toelichting": decision.explanation,
            "besluit.bestuursorgaan": decision.governing_body,
            "besluit.ingangsdatum": decision.effective_date,
            "besluit.vervaldatum": decision.expiration_date,
            "besluit.vervalreden": decision.expiration_reason,
            "besluit.publicatiedatum": decision.publication_date,
            "besluit.verzenddatum": decision.shipping_date,
            "besluit.uiterlijkereactiedatum": decision.response_date,
            "besluittype.omschrijving": decision_type.name,
            "besluittype.omschrijvingGeneriek": decision_type.generic_name,
            "besluittype.besluitcategorie": decision_type.category,
            "besluittype.publicatieindicatie": decision_type.publication_indicator,
            "besluittype.publicatietekst": decision_type.publication_text,
            "besluittype.toelichting": decision_type.explanation,
            "zaak.identificatie": case.identification,
            "zaak.omschrijving": case.name,
            "zaak.registratiedatum": case.registration_date,
            "zaaktype.omschrijving": case_type.name,
            "zaaktype.omschrijvingGeneriek": case_type.description,
        }
