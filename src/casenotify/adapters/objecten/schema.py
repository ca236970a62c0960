"""Objects API response schemas for tasks and messages."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import Field

from casenotify.adapters.querying import BackendModel


class IdentificatieSchema(BackendModel):
    type: str = ""
    value: str = ""


class TaskDataSchema(BackendModel):
    zaak: str
    title: str = ""
    status: str = ""
    verloopdatum: datetime | None = None
    identificatie: IdentificatieSchema


class MessageDataSchema(BackendModel):
    onderwerp: str = ""
    handelingsperspectief: str = ""
    identificatie: IdentificatieSchema


class TaskRecordSchema(BackendModel):
    type_version: int | None = Field(default=None, alias="typeVersion")
    data: TaskDataSchema


class MessageRecordSchema(BackendModel):
    type_version: int | None = Field(default=None, alias="typeVersion")
    data: MessageDataSchema


class TaskObjectSchema(BackendModel):
    url: str
    uuid: str = ""
    type: str = ""
    record: TaskRecordSchema


class MessageObjectSchema(BackendModel):
    url: str
    uuid: str = ""
    type: str = ""
    record: MessageRecordSchema
