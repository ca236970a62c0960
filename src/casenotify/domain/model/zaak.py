"""Case (zaak) records from the case and catalogue APIs."""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date, datetime

    from .party import CitizenData


@dataclass(frozen=True, slots=True)
class Case:
    uri: str
    identification: str
    name: str
    case_type_uri: str
    registration_date: date | None = None
    schema_version: str = ""


@dataclass(frozen=True, slots=True)
class CaseStatus:
    uri: str
    status_type_uri: str
    set_at: datetime | None = None
    description: str = ""


@dataclass(frozen=True, slots=True)
class CaseStatuses:
    statuses: tuple[CaseStatus, ...] = ()
    schema_version: str = ""

    def were_never_updated(self) -> bool:
        """A case with at most its initial status has never progressed."""

        return len(self.statuses) <= 1

    def last_status(self) -> CaseStatus:
        if not self.statuses:
            raise LookupError("case has no statuses")
        if all(status.set_at is not None for status in self.statuses):
            return max(self.statuses, key=attrgetter("set_at"))
        return self.statuses[0]


@dataclass(frozen=True, slots=True)
class CaseType:
    """Type of the latest status of a case, including its case-type identifier."""

    uri: str
    name: str
    description: str = ""
    is_final_status: bool = False
    is_notification_expected: bool = False
    identification: str = ""
    schema_version: str = ""


@dataclass(frozen=True, slots=True)
class CaseRole:
    role_label: str
    citizen: CitizenData | None = None
    subject_type: str = ""
