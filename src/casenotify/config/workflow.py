"""Workflow configuration: role names, object types, whitelists and templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from .env import env_flag, env_list, optional_env_var, require_env_vars

ALLOW_ALL: Final[str] = "*"

SCENARIO_NAMES: Final[tuple[str, ...]] = (
    "case_created",
    "case_updated",
    "case_closed",
    "task_assigned",
    "message_received",
    "decision_made",
)


@dataclass(frozen=True, slots=True)
class Variables:
    """Values used to interpret backend data for this municipality."""

    task_object_type_uuid: str
    message_object_type_uuid: str
    initiator_role: str = "initiator"
    subject_type: str = "natuurlijk_persoon"
    party_identifier: str = "bsn"
    email_generic_description: str = "Email"
    phone_generic_description: str = "Telefoonnummer"
    decision_info_object_type_uuids: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Whitelist:
    """Set of identifiers for which notifications may be sent.

    ``*`` allows every identifier; an empty whitelist allows none.
    """

    ids: frozenset[str] = frozenset()

    @classmethod
    def from_values(cls, values: tuple[str, ...]) -> Whitelist:
        return cls(ids=frozenset(value.lower() for value in values))

    def is_allowed(self, identifier: str | None) -> bool:
        if ALLOW_ALL in self.ids:
            return True
        if not identifier:
            return False
        return identifier.strip().lower() in self.ids


@dataclass(frozen=True, slots=True)
class Whitelists:
    case_created: Whitelist = field(default_factory=Whitelist)
    case_updated: Whitelist = field(default_factory=Whitelist)
    case_closed: Whitelist = field(default_factory=Whitelist)
    decision_made: Whitelist = field(default_factory=Whitelist)
    messages_allowed: bool = False


@dataclass(frozen=True, slots=True)
class ScenarioTemplates:
    email: str | None = None
    sms: str | None = None
    letter: str | None = None


@dataclass(frozen=True, slots=True)
class TemplateIds:
    by_scenario: dict[str, ScenarioTemplates] = field(default_factory=dict)

    def for_scenario(self, scenario: str) -> ScenarioTemplates:
        return self.by_scenario.get(scenario, ScenarioTemplates())


@dataclass(frozen=True, slots=True)
class WorkflowConfig:
    variables: Variables
    whitelists: Whitelists = field(default_factory=Whitelists)
    templates: TemplateIds = field(default_factory=TemplateIds)


def _template(name: str) -> str | None:
    return optional_env_var(name) or None


def get_workflow_config() -> WorkflowConfig:
    values = require_env_vars(("TASK_OBJECT_TYPE_UUID", "MESSAGE_OBJECT_TYPE_UUID"))
    variables = Variables(
        task_object_type_uuid=values["TASK_OBJECT_TYPE_UUID"].lower(),
        message_object_type_uuid=values["MESSAGE_OBJECT_TYPE_UUID"].lower(),
        initiator_role=optional_env_var("CASE_INITIATOR_ROLE", "initiator"),
        subject_type=optional_env_var("CASE_SUBJECT_TYPE", "natuurlijk_persoon"),
        party_identifier=optional_env_var("PARTY_IDENTIFIER", "bsn"),
        email_generic_description=optional_env_var("EMAIL_GENERIC_DESCRIPTION", "Email"),
        phone_generic_description=optional_env_var(
            "PHONE_GENERIC_DESCRIPTION", "Telefoonnummer"
        ),
        decision_info_object_type_uuids=tuple(
            value.lower() for value in env_list("DECISION_INFO_OBJECT_TYPE_UUIDS")
        ),
    )
    whitelists = Whitelists(
        case_created=Whitelist.from_values(env_list("WHITELIST_CASE_CREATED_IDS")),
        case_updated=Whitelist.from_values(env_list("WHITELIST_CASE_UPDATED_IDS")),
        case_closed=Whitelist.from_values(env_list("WHITELIST_CASE_CLOSED_IDS")),
        decision_made=Whitelist.from_values(env_list("WHITELIST_DECISION_MADE_IDS")),
        messages_allowed=env_flag("WHITELIST_MESSAGE_ALLOWED"),
    )
    templates = TemplateIds(
        by_scenario={
            scenario: ScenarioTemplates(
                email=_template(f"TEMPLATE_{scenario.upper()}_EMAIL"),
                sms=_template(f"TEMPLATE_{scenario.upper()}_SMS"),
                letter=_template(f"TEMPLATE_{scenario.upper()}_LETTER"),
            )
            for scenario in SCENARIO_NAMES
        }
    )
    return WorkflowConfig(variables=variables, whitelists=whitelists, templates=templates)
