"""Fail-closed scenario for event shapes nobody registered."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, NoReturn

from casenotify.domain.errors import UnimplementedScenarioError

from .base import BaseScenario

if TYPE_CHECKING:
    from collections.abc import Sequence

    from casenotify.domain.model import CommonPartyData, NotificationEvent

    from .base import AssemblyResult, Gate


class NotImplementedScenario(BaseScenario):
    name: ClassVar[str] = "not_implemented"

    def _refuse(self) -> NoReturn:
        raise UnimplementedScenarioError("No scenario handles this notification")

    async def assemble_notifications(self, event: NotificationEvent) -> AssemblyResult:
        raise UnimplementedScenarioError(
            f"No scenario handles {event.action}/{event.channel}/{event.resource}"
        )

    def gates(self) -> Sequence[Gate]:
        self._refuse()

    async def prepare_party(self) -> CommonPartyData:
        self._refuse()

    def email_template_id(self) -> str | None:
        self._refuse()

    def sms_template_id(self) -> str | None:
        self._refuse()

    def letter_template_id(self) -> str | None:
        self._refuse()

    async def email_personalization(self, party: CommonPartyData) -> dict[str, object]:
        self._refuse()
