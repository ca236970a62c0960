"""Pick the scenario strategy for an inbound event."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from casenotify.domain.model import Action, Channel, Resource

from .cases import CaseStatusScenario
from .decision_made import DecisionMadeScenario
from .message_received import MessageReceivedScenario
from .not_implemented import NotImplementedScenario
from .task_assigned import TaskAssignedScenario

if TYPE_CHECKING:
    from collections.abc import Mapping

    from casenotify.config.workflow import WorkflowConfig
    from casenotify.domain.model import NotificationEvent
    from casenotify.domain.ports.querying import ObjectTypenQuery
    from casenotify.domain.query_context import QueryService

    from .base import BaseScenario

log = getLogger(__name__)

type ScenarioFactory = Callable[[QueryService, WorkflowConfig], BaseScenario]

SUBJECT_TASK = "task"
SUBJECT_MESSAGE = "message"


@dataclass(frozen=True, slots=True)
class ScenarioKey:
    channel: Channel
    resource: Resource
    action: Action
    subject: str = ""


DEFAULT_SCENARIOS: dict[ScenarioKey, ScenarioFactory] = {
    ScenarioKey(Channel.ZAKEN, Resource.STATUS, Action.CREATE): CaseStatusScenario,
    ScenarioKey(Channel.OBJECTEN, Resource.OBJECT, Action.CREATE, SUBJECT_TASK): (
        TaskAssignedScenario
    ),
    ScenarioKey(Channel.OBJECTEN, Resource.OBJECT, Action.CREATE, SUBJECT_MESSAGE): (
        MessageReceivedScenario
    ),
    ScenarioKey(Channel.BESLUITEN, Resource.BESLUIT_INFORMATIEOBJECT, Action.CREATE): (
        DecisionMadeScenario
    ),
}


class ScenariosResolver:
    """Table lookup from event shape to a fresh scenario instance.

    Resolution never performs I/O: the only nested attribute it reads is the
    object type URI, compared against configured UUIDs. Unknown shapes resolve
    to ``NotImplementedScenario``.
    """

    def __init__(
        self,
        queries: QueryService,
        workflow: WorkflowConfig,
        *,
        scenarios: Mapping[ScenarioKey, ScenarioFactory] | None = None,
    ) -> None:
        self._queries = queries
        self._workflow = workflow
        self._scenarios = dict(DEFAULT_SCENARIOS if scenarios is None else scenarios)

    def key_for(self, event: NotificationEvent) -> ScenarioKey:
        return ScenarioKey(
            channel=event.channel,
            resource=event.resource,
            action=event.action,
            subject=self._subject(event, self._queries.objecttypen),
        )

    def _subject(self, event: NotificationEvent, objecttypen: ObjectTypenQuery) -> str:
        if event.channel is not Channel.OBJECTEN:
            return ""
        variables = self._workflow.variables
        object_type_uri = event.attributes.object_type_uri
        if objecttypen.is_valid_type(object_type_uri, variables.task_object_type_uuid):
            return SUBJECT_TASK
        if objecttypen.is_valid_type(object_type_uri, variables.message_object_type_uuid):
            return SUBJECT_MESSAGE
        return ""

    def resolve(self, event: NotificationEvent) -> BaseScenario:
        key = self.key_for(event)
        factory = self._scenarios.get(key)
        if factory is None:
            log.info("No scenario registered for %s", key)
            return NotImplementedScenario(self._queries, self._workflow)
        return factory(self._queries, self._workflow)
