"""Query adapter for the Objects API (tasks and messages)."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from casenotify.adapters.querying import ApiQueryClient
from casenotify.domain.model import (
    Identification,
    IdentificationType,
    MessageObject,
    TaskObject,
    TaskStatus,
)

from .schema import IdentificatieSchema, MessageObjectSchema, TaskObjectSchema

if TYPE_CHECKING:
    from casenotify.adapters.http_resilience import ClientFactory
    from casenotify.config.http_resilience import ResilienceConfig


def _identification(schema: IdentificatieSchema) -> Identification:
    return Identification(type=IdentificationType.parse(schema.type), value=schema.value.strip())


class QueryObjecten:
    name: ClassVar[str] = "Objecten"
    version: ClassVar[str] = "2.3.1"

    def __init__(
        self,
        *,
        resilience: ResilienceConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._api = ApiQueryClient(resilience, client_factory=client_factory)

    async def get_task(self, object_uri: str) -> TaskObject:
        schema = await self._api.get_model(object_uri, TaskObjectSchema)
        data = schema.record.data
        return TaskObject(
            uri=schema.url,
            case_uri=data.zaak,
            title=data.title,
            status=TaskStatus.parse(data.status),
            identification=_identification(data.identificatie),
            expiration_date=data.verloopdatum,
            schema_version=self.version,
        )

    async def get_message(self, object_uri: str) -> MessageObject:
        schema = await self._api.get_model(object_uri, MessageObjectSchema)
        data = schema.record.data
        return MessageObject(
            uri=schema.url,
            subject=data.onderwerp,
            actions_perspective=data.handelingsperspectief,
            identification=_identification(data.identificatie),
            schema_version=self.version,
        )
