"""Records stored in the generic objects registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .enums import IdentificationType, TaskStatus

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(frozen=True, slots=True)
class Identification:
    type: IdentificationType
    value: str


@dataclass(frozen=True, slots=True)
class TaskObject:
    uri: str
    case_uri: str
    title: str
    status: TaskStatus
    identification: Identification
    expiration_date: datetime | None = None
    schema_version: str = ""

    @property
    def is_open(self) -> bool:
        return self.status is TaskStatus.OPEN


@dataclass(frozen=True, slots=True)
class MessageObject:
    uri: str
    subject: str
    actions_perspective: str
    identification: Identification
    schema_version: str = ""
