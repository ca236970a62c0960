"""Application configuration helpers."""

from __future__ import annotations

from .app import AppConfig, get_app_config
from .backends import ApiVersions, BackendConfig, BackendDomains, get_backend_config
from .env import env_flag, env_list, optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .notify import NotifyApiKey, NotifyConfig, get_notify_config
from .registration import RegistrationConfig, UxMessage, UxMessages, get_registration_config
from .workflow import (
    ALLOW_ALL,
    ScenarioTemplates,
    TemplateIds,
    Variables,
    Whitelist,
    Whitelists,
    WorkflowConfig,
    get_workflow_config,
)

__all__ = [
    "ALLOW_ALL",
    "ApiVersions",
    "AppConfig",
    "BackendConfig",
    "BackendDomains",
    "CacheConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "NotifyApiKey",
    "NotifyConfig",
    "RateLimit",
    "ResilienceConfig",
    "RegistrationConfig",
    "RetryPolicy",
    "ScenarioTemplates",
    "TemplateIds",
    "UxMessage",
    "UxMessages",
    "Variables",
    "Whitelist",
    "Whitelists",
    "WorkflowConfig",
    "configure_logging",
    "env_flag",
    "env_list",
    "get_app_config",
    "get_backend_config",
    "get_notify_config",
    "get_registration_config",
    "get_workflow_config",
    "optional_env_var",
    "require_env_vars",
]
