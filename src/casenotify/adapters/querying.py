"""Shared plumbing for the versioned backend query adapters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

import httpx
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from casenotify.adapters.http_resilience import ResilientClient, build_limiter
from casenotify.domain.errors import BackendUnavailableError, MalformedResponseError

if TYPE_CHECKING:
    from casenotify.adapters.http_resilience import ClientFactory
    from casenotify.config.http_resilience import ResilienceConfig

log = logging.getLogger(__name__)


class BackendModel(BaseModel):
    """Base schema for backend responses; unmodelled keys are kept and logged once."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        seen = BackendModel._logged_extra_keys
        new_keys = {f"{type(self).__name__}.{key}" for key in extras}.difference(seen)
        if not new_keys:
            return
        seen.update(new_keys)
        log.debug("Unmodelled backend keys: %s", ", ".join(sorted(new_keys)))


class ApiQueryClient:
    """Exchange JSON with one backend and validate answers against pydantic schemas."""

    def __init__(
        self,
        resilience: ResilienceConfig,
        *,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._resilience = resilience
        self._client_factory = client_factory or ResilientClient
        self._limiter = build_limiter(resilience.ratelimit)

    async def get_json(self, uri: str) -> object:
        return await self._exchange("GET", uri)

    async def post_json(self, uri: str, body: dict[str, object]) -> object:
        return await self._exchange("POST", uri, body)

    async def _exchange(
        self, method: str, uri: str, body: dict[str, object] | None = None
    ) -> object:
        try:
            async with self._limiter, self._client_factory(self._resilience) as client:
                if body is None:
                    response = await client.request(method, uri)
                else:
                    response = await client.request(method, uri, json=body)
        except httpx.HTTPError as exc:
            raise BackendUnavailableError(
                f"{self._resilience.name}: request to {uri} failed: {exc}", uri=uri
            ) from exc

        if response.is_error:
            raise BackendUnavailableError(
                f"{self._resilience.name}: {uri} answered HTTP {response.status_code}",
                uri=uri,
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"{self._resilience.name}: {uri} did not return JSON"
            ) from exc

    def _validate[ModelT: BaseModel](
        self, payload: object, uri: str, schema: type[ModelT]
    ) -> ModelT:
        try:
            return schema.model_validate(payload)
        except ValidationError as exc:
            raise MalformedResponseError(
                f"{self._resilience.name}: unexpected {schema.__name__} payload from {uri}: {exc}"
            ) from exc

    async def get_model[ModelT: BaseModel](self, uri: str, schema: type[ModelT]) -> ModelT:
        return self._validate(await self.get_json(uri), uri, schema)

    async def post_model[ModelT: BaseModel](
        self, uri: str, body: dict[str, object], schema: type[ModelT]
    ) -> ModelT:
        return self._validate(await self.post_json(uri, body), uri, schema)

    async def get_list[ModelT: BaseModel](self, uri: str, schema: type[ModelT]) -> list[ModelT]:
        payload = await self.get_json(uri)
        try:
            return TypeAdapter(list[schema]).validate_python(payload)
        except ValidationError as exc:
            raise MalformedResponseError(
                f"{self._resilience.name}: unexpected list of {schema.__name__} from {uri}: {exc}"
            ) from exc


def uuid_from_uri(uri: str | None) -> str:
    """Return the last path segment of a resource URI, lower-cased."""

    if not uri:
        return ""
    return uri.rstrip("/").rsplit("/", 1)[-1].lower()
