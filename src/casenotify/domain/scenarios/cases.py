"""A status was set on a case: the case was created, updated or closed."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from casenotify.domain.model import CaseProgress

from .base import BaseScenario, Gate, party_personalization

if TYPE_CHECKING:
    from collections.abc import Sequence

    from casenotify.config.workflow import Whitelist, WorkflowConfig
    from casenotify.domain.model import CommonPartyData
    from casenotify.domain.query_context import QueryService

    from .base import Personalization


class CaseStatusScenario(BaseScenario):
    """Covers the three case life-cycle notifications.

    Which one applies is only known after the case statuses are fetched, so the
    progress is determined by the first gate instead of by the resolver.
    """

    name: ClassVar[str] = "case_status"

    def __init__(self, queries: QueryService, workflow: WorkflowConfig) -> None:
        super().__init__(queries, workflow)
        self._progress: CaseProgress | None = None

    @property
    def progress(self) -> CaseProgress:
        if self._progress is None:
            raise RuntimeError("case progress is not determined yet")
        return self._progress

    @property
    def template_key(self) -> str:
        return f"case_{self.progress}"

    def gates(self) -> Sequence[Gate]:
        return (
            Gate("case progress", self._determine_progress),
            Gate("whitelist", self._check_whitelist),
            Gate("notification expected", self._check_notification_expected),
        )

    def drop_cache(self) -> None:
        super().drop_cache()
        self._progress = None

    def _whitelist(self) -> Whitelist:
        whitelists = self.workflow.whitelists
        match self.progress:
            case CaseProgress.CREATED:
                return whitelists.case_created
            case CaseProgress.UPDATED:
                return whitelists.case_updated
            case CaseProgress.CLOSED:
                return whitelists.case_closed

    async def _determine_progress(self) -> str | None:
        statuses = await self.context.get_case_statuses()
        if not statuses.statuses:
            return "case has no statuses"
        if statuses.were_never_updated():
            self._progress = CaseProgress.CREATED
        elif (await self.context.get_case_type()).is_final_status:
            self._progress = CaseProgress.CLOSED
        else:
            self._progress = CaseProgress.UPDATED
        return None

    async def _check_whitelist(self) -> str | None:
        case_type = await self.context.get_case_type()
        if not self._whitelist().is_allowed(case_type.identification):
            return f"case type {case_type.identification!r} is not whitelisted for {self.progress}"
        return None

    async def _check_notification_expected(self) -> str | None:
        if not (await self.context.get_case_type()).is_notification_expected:
            return "case status does not require informing the citizen"
        return None

    async def prepare_party(self) -> CommonPartyData:
        case = await self.context.get_case()
        return await self.context.get_party(case_identifier=case.identification)

    async def subject_case_uri(self) -> str | None:
        return (await self.context.get_case()).uri

    async def email_personalization(self, party: CommonPartyData) -> Personalization:
        case = await self.context.get_case()
        case_type = await self.context.get_case_type()
        return {
            **party_personalization(party),
            "zaak.omschrijving": case.name,
            "zaak.identificatie": case.identification,
            "status.omschrijving": case_type.name,
        }
