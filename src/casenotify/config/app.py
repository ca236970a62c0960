"""Aggregate application configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from .backends import BackendConfig, get_backend_config
from .env import optional_env_var
from .notify import NotifyConfig, get_notify_config
from .registration import RegistrationConfig, get_registration_config
from .workflow import WorkflowConfig, get_workflow_config


@dataclass(frozen=True, slots=True)
class AppConfig:
    backends: BackendConfig
    workflow: WorkflowConfig
    notify: NotifyConfig
    registration: RegistrationConfig = field(default_factory=RegistrationConfig)
    environment: str = "production"
    workflow_version: str = "1"


def get_app_config() -> AppConfig:
    return AppConfig(
        backends=get_backend_config(),
        workflow=get_workflow_config(),
        notify=get_notify_config(),
        registration=get_registration_config(),
        environment=optional_env_var("CASENOTIFY_ENVIRONMENT", "production"),
        workflow_version=optional_env_var("CASENOTIFY_WORKFLOW_VERSION", "1"),
    )
