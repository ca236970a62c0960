"""Decision (besluit) records and their information objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .enums import Confidentiality, InfoObjectStatus

if TYPE_CHECKING:
    from datetime import date


@dataclass(frozen=True, slots=True)
class DecisionResource:
    """Link between a decision and one of its information objects."""

    uri: str
    decision_uri: str
    info_object_uri: str
    schema_version: str = ""


@dataclass(frozen=True, slots=True)
class InfoObject:
    uri: str
    type_uri: str
    status: InfoObjectStatus
    confidentiality: Confidentiality
    schema_version: str = ""

    @property
    def type_uuid(self) -> str:
        return self.type_uri.rstrip("/").rsplit("/", 1)[-1].lower()


@dataclass(frozen=True, slots=True)
class Decision:
    uri: str
    identification: str
    decision_type_uri: str
    case_uri: str
    date: date | None = None
    explanation: str = ""
    governing_body: str = ""
    effective_date: date | None = None
    expiration_date: date | None = None
    expiration_reason: str = ""
    publication_date: date | None = None
    shipping_date: date | None = None
    response_date: date | None = None
    schema_version: str = ""


@dataclass(frozen=True, slots=True)
class DecisionType:
    uri: str
    name: str
    generic_name: str = ""
    category: str = ""
    publication_indicator: bool = False
    publication_text: str = ""
    explanation: str = ""
    schema_version: str = ""
