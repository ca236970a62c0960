"""NotifyNL delivery configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import env_list, optional_env_var, require_env_vars
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_NOTIFY_BASE_URL = "https://api.notifynl.nl"
_UUID_LENGTH = 36


@dataclass(frozen=True, slots=True)
class NotifyApiKey:
    """A NotifyNL API key: ``{key name}-{service id}-{secret key}``."""

    raw: str

    @property
    def service_id(self) -> str:
        return self.raw[-2 * _UUID_LENGTH - 1 : -_UUID_LENGTH - 1]

    @property
    def secret_key(self) -> str:
        return self.raw[-_UUID_LENGTH:]

    @classmethod
    def parse(cls, value: str) -> NotifyApiKey:
        cleaned = value.strip()
        if (
            len(cleaned) < 2 * _UUID_LENGTH + 3
            or cleaned[-_UUID_LENGTH - 1] != "-"
            or cleaned[-2 * _UUID_LENGTH - 2] != "-"
        ):
            raise ConfigurationError("Value does not look like a NotifyNL API key")
        return cls(raw=cleaned)


@dataclass(frozen=True, slots=True)
class NotifyConfig:
    api_key: NotifyApiKey
    resilience: ResilienceConfig
    organization_api_keys: dict[str, NotifyApiKey] = field(default_factory=dict)

    def api_key_for(self, organization_id: str) -> NotifyApiKey:
        return self.organization_api_keys.get(organization_id, self.api_key)


def _organization_keys() -> dict[str, NotifyApiKey]:
    keys: dict[str, NotifyApiKey] = {}
    for entry in env_list("NOTIFY_ORGANIZATION_API_KEYS"):
        organization_id, separator, key = entry.partition("=")
        if not separator or not organization_id.strip():
            raise ConfigurationError(
                "NOTIFY_ORGANIZATION_API_KEYS entries must look like '<organisation>=<api key>'"
            )
        keys[organization_id.strip()] = NotifyApiKey.parse(key)
    return keys


def get_notify_config() -> NotifyConfig:
    values = require_env_vars(("NOTIFY_API_KEY",))
    base_url = optional_env_var("NOTIFY_API_BASE_URL", DEFAULT_NOTIFY_BASE_URL).rstrip("/")
    resilience = ResilienceConfig(
        name="notifynl",
        base_url=base_url,
        timeout_seconds=float(optional_env_var("NOTIFY_TIMEOUT_SECONDS", "30")),
        retry=RetryPolicy(total=2),
        ratelimit=RateLimit(max_calls=50, per_seconds=1.0),
        default_headers={"Content-Type": "application/json"},
    )
    return NotifyConfig(
        api_key=NotifyApiKey.parse(values["NOTIFY_API_KEY"]),
        resilience=resilience,
        organization_api_keys=_organization_keys(),
    )
