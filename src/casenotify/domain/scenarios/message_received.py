"""A message for a citizen was stored in the objects registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from .base import BaseScenario, Gate, party_personalization

if TYPE_CHECKING:
    from collections.abc import Sequence

    from casenotify.domain.model import CommonPartyData

    from .base import Personalization


class MessageReceivedScenario(BaseScenario):
    name: ClassVar[str] = "message_received"

    def gates(self) -> Sequence[Gate]:
        return (
            Gate("object type", self._check_object_type),
            Gate("messages allowed", self._check_allowed),
            Gate("recipient", self._check_recipient),
        )

    async def _check_object_type(self) -> str | None:
        if not self.context.is_valid_type(self.context.variables.message_object_type_uuid):
            return "object is not a message"
        return None

    async def _check_allowed(self) -> str | None:
        if not self.workflow.whitelists.messages_allowed:
            return "message notifications are disabled"
        return None

    async def _check_recipient(self) -> str | None:
        message = await self.context.get_message()
        if not message.identification.value:
            return "message has no recipient"
        return None

    async def prepare_party(self) -> CommonPartyData:
        message = await self.context.get_message()
        return await self.context.get_party(message.identification.value)

    async def email_personalization(self, party: CommonPartyData) -> Personalization:
        message = await self.context.get_message()
        return {
            **party_personalization(party),
            "message.onderwerp": message.subject,
            "message.handelingsperspectief": message.actions_perspective,
        }
