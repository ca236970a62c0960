"""Scenario strategies and their resolver."""

from __future__ import annotations

from .base import Aborted, Assembled, AssemblyResult, BaseScenario, Gate
from .cases import CaseStatusScenario
from .decision_made import DecisionMadeScenario
from .message_received import MessageReceivedScenario
from .not_implemented import NotImplementedScenario
from .resolver import DEFAULT_SCENARIOS, ScenarioKey, ScenariosResolver
from .task_assigned import TaskAssignedScenario

__all__ = [
    "DEFAULT_SCENARIOS",
    "Aborted",
    "Assembled",
    "AssemblyResult",
    "BaseScenario",
    "CaseStatusScenario",
    "DecisionMadeScenario",
    "Gate",
    "MessageReceivedScenario",
    "NotImplementedScenario",
    "ScenarioKey",
    "ScenariosResolver",
    "TaskAssignedScenario",
]
