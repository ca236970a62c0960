"""Async HTTP client shared by every backend adapter.

Each backend gets one ``ResilientClient`` built from its ``ResilienceConfig``:
reads are retried on transient failures and catalogue backends may answer
from a hishel sqlite cache. Clients are opened per request, so throttling
lives with the adapter: it builds one limiter with ``build_limiter`` and
enters it around every call.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager, nullcontext
from typing import TYPE_CHECKING, TypedDict, Unpack

import httpx
from aiolimiter import AsyncLimiter
from hishel import AsyncSqliteStorage
from hishel.httpx import AsyncCacheClient
from httpx_retries import Retry, RetryTransport

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._client import UseClientDefault
    from httpx._types import QueryParamTypes, RequestContent, TimeoutTypes, URLTypes

    from casenotify.config.http_resilience import (
        CacheConfig,
        RateLimit,
        ResilienceConfig,
        RetryPolicy,
    )

log = logging.getLogger(__name__)


class RequestOptions(TypedDict, total=False):
    content: RequestContent | None
    json: object
    params: QueryParamTypes | None
    headers: dict[str, str] | None
    timeout: TimeoutTypes | UseClientDefault


def retry_for(policy: RetryPolicy) -> Retry:
    return Retry(
        total=policy.total,
        backoff_factor=policy.backoff_factor,
        backoff_jitter=policy.backoff_jitter,
        max_backoff_wait=policy.max_backoff_wait,
        respect_retry_after_header=policy.respect_retry_after_header,
        allowed_methods=sorted(policy.allowed_methods),
        status_forcelist=sorted(policy.status_forcelist),
        retry_on_exceptions=policy.retry_on_exceptions,
    )


def _open_client(config: ResilienceConfig) -> httpx.AsyncClient:
    transport = RetryTransport(retry=retry_for(config.retry))
    headers = dict(config.default_headers or {})
    base_url = config.base_url or ""
    if config.cache is None:
        return httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=config.timeout_seconds,
            transport=transport,
        )
    return AsyncCacheClient(
        base_url=base_url,
        headers=headers,
        timeout=config.timeout_seconds,
        transport=transport,
        storage=_cache_storage(config.name, config.cache),
    )


def _cache_storage(name: str, cache: CacheConfig) -> AsyncSqliteStorage:
    log.debug("HTTP cache for %s at %s", name, cache.database_path)
    return AsyncSqliteStorage(
        database_path=cache.database_path,
        default_ttl=cache.ttl_seconds,
        refresh_ttl_on_access=False,
    )


type Throttle = AbstractAsyncContextManager[object]


def build_limiter(ratelimit: RateLimit | None) -> Throttle:
    """Token bucket shared by every request of one adapter; a no-op without a rate limit."""

    if ratelimit is None:
        return nullcontext()
    return AsyncLimiter(ratelimit.max_calls, ratelimit.per_seconds)


class ResilientClient:
    """Thin wrapper around ``httpx.AsyncClient`` configured from a ``ResilienceConfig``."""

    def __init__(self, config: ResilienceConfig) -> None:
        self.config = config
        self._client = _open_client(config)

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        return await self._client.request(method, url, **kwargs)

    async def get(self, url: URLTypes, **kwargs: Unpack[RequestOptions]) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: URLTypes, **kwargs: Unpack[RequestOptions]) -> httpx.Response:
        return await self.request("POST", url, **kwargs)


type ClientFactory = Callable[[ResilienceConfig], ResilientClient]
