"""A task from the objects registry was assigned to a citizen."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from casenotify.domain.model import IdentificationType

from .base import BaseScenario, Gate, party_personalization

if TYPE_CHECKING:
    from collections.abc import Sequence

    from casenotify.domain.model import CommonPartyData

    from .base import Personalization


class TaskAssignedScenario(BaseScenario):
    name: ClassVar[str] = "task_assigned"

    def gates(self) -> Sequence[Gate]:
        return (
            Gate("object type", self._check_object_type),
            Gate("task status", self._check_task_open),
            Gate("assignee", self._check_assignee),
        )

    async def _check_object_type(self) -> str | None:
        if not self.context.is_valid_type(self.context.variables.task_object_type_uuid):
            return "object is not a task"
        return None

    async def _check_task_open(self) -> str | None:
        task = await self.context.get_task()
        if not task.is_open:
            return "task closed"
        return None

    async def _check_assignee(self) -> str | None:
        identification = (await self.context.get_task()).identification
        if identification.type is not IdentificationType.BSN:
            return f"task assignee is not a citizen ({identification.type})"
        if not identification.value:
            return "task assignee has no citizen service number"
        return None

    async def prepare_party(self) -> CommonPartyData:
        task = await self.context.get_task()
        case = await self.context.get_case(task.case_uri)
        return await self.context.get_party(
            task.identification.value, case_identifier=case.identification
        )

    async def subject_case_uri(self) -> str | None:
        return (await self.context.get_task()).case_uri

    async def email_personalization(self, party: CommonPartyData) -> Personalization:
        task = await self.context.get_task()
        case = await self.context.get_case(task.case_uri)
        return {
            **party_personalization(party),
            "taak.verloopdatum": task.expiration_date,
            "taak.heeft_verloopdatum": task.expiration_date is not None,
            "taak.record.data.title": task.title,
            "zaak.omschrijving": case.name,
            "zaak.identificatie": case.identification,
        }
