"""Backend service configuration: domains, API versions and HTTP behaviour."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

SUPPORTED_OPENZAAK_VERSIONS = ("1", "2")
SUPPORTED_OPENKLANT_VERSIONS = ("1", "2")

_DOMAIN_VARS = (
    "OPENZAAK_DOMAIN",
    "OPENKLANT_DOMAIN",
    "OBJECTEN_DOMAIN",
    "OBJECTTYPEN_DOMAIN",
    "BESLUITEN_DOMAIN",
)


@dataclass(frozen=True, slots=True)
class BackendDomains:
    """Host names (without scheme) of the case-management backends."""

    openzaak: str
    openklant: str
    objecten: str
    objecttypen: str
    besluiten: str
    contactmomenten: str = ""


@dataclass(frozen=True, slots=True)
class ApiVersions:
    openzaak: str = "2"
    openklant: str = "2"


@dataclass(frozen=True, slots=True)
class BackendConfig:
    domains: BackendDomains
    versions: ApiVersions = field(default_factory=ApiVersions)
    resilience: dict[str, ResilienceConfig] = field(default_factory=dict)

    def resilience_for(self, backend: str) -> ResilienceConfig:
        return self.resilience.get(backend) or ResilienceConfig(name=backend)


def _strip_scheme(domain: str) -> str:
    cleaned = domain.strip().removeprefix("https://").removeprefix("http://")
    return cleaned.rstrip("/")


def _select_version(name: str, supported: tuple[str, ...]) -> str:
    value = optional_env_var(name, "2").lower().removeprefix("v")
    if value not in supported:
        raise ConfigurationError(
            f"{name} must be one of {', '.join(supported)}, got {value!r}"
        )
    return value


def _catalogue_cache() -> CacheConfig | None:
    path = optional_env_var("HTTP_CACHE_PATH")
    if not path:
        return None
    return CacheConfig(sqlite_path=path)


def _backend_resilience(backend: str, *, cached: bool) -> ResilienceConfig:
    authorization = optional_env_var(f"{backend.upper()}_AUTHORIZATION")
    headers = {"Accept": "application/json", "Accept-Crs": "EPSG:4326"}
    if authorization:
        headers["Authorization"] = authorization
    return ResilienceConfig(
        name=backend,
        timeout_seconds=float(optional_env_var("BACKEND_TIMEOUT_SECONDS", "20")),
        retry=RetryPolicy(total=3),
        ratelimit=RateLimit(max_calls=20, per_seconds=1.0),
        cache=_catalogue_cache() if cached else None,
        default_headers=headers,
    )


def get_backend_config() -> BackendConfig:
    values = require_env_vars(_DOMAIN_VARS)
    domains = BackendDomains(
        openzaak=_strip_scheme(values["OPENZAAK_DOMAIN"]),
        openklant=_strip_scheme(values["OPENKLANT_DOMAIN"]),
        objecten=_strip_scheme(values["OBJECTEN_DOMAIN"]),
        objecttypen=_strip_scheme(values["OBJECTTYPEN_DOMAIN"]),
        besluiten=_strip_scheme(values["BESLUITEN_DOMAIN"]),
        contactmomenten=_strip_scheme(
            optional_env_var("CONTACTMOMENTEN_DOMAIN", values["OPENKLANT_DOMAIN"])
        ),
    )
    versions = ApiVersions(
        openzaak=_select_version("OPENZAAK_API_VERSION", SUPPORTED_OPENZAAK_VERSIONS),
        openklant=_select_version("OPENKLANT_API_VERSION", SUPPORTED_OPENKLANT_VERSIONS),
    )
    # catalogue lookups (status types) are cached when HTTP_CACHE_PATH is set
    resilience = {
        "openzaak": _backend_resilience("openzaak", cached=False),
        "catalogi": _backend_resilience("openzaak", cached=True),
        "openklant": _backend_resilience("openklant", cached=False),
        "objecten": _backend_resilience("objecten", cached=False),
        "besluiten": _backend_resilience("besluiten", cached=False),
        "contactmomenten": _backend_resilience("contactmomenten", cached=False),
    }
    return BackendConfig(domains=domains, versions=versions, resilience=resilience)
