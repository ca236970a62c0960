"""Ports for querying the case-management backends.

Each backend domain has one port with several concrete versions behind it.
The scenarios only see these protocols; which version is used is decided once
at startup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from casenotify.domain.model import (
        Case,
        CaseRole,
        CaseStatuses,
        CaseType,
        CitizenData,
        CommonPartyData,
        Decision,
        DecisionResource,
        DecisionType,
        InfoObject,
        MessageObject,
        TaskObject,
    )


@runtime_checkable
class VersionDetails(Protocol):
    """Name and version of the backend API an adapter speaks."""

    @property
    def name(self) -> str: ...

    @property
    def version(self) -> str: ...


@runtime_checkable
class ZaakQuery(VersionDetails, Protocol):
    async def get_case(self, case_uri: str) -> Case: ...

    async def get_case_statuses(self, case_uri: str) -> CaseStatuses: ...

    async def get_case_type(self, status_type_uri: str) -> CaseType: ...

    async def get_case_roles(self, case_uri: str) -> list[CaseRole]: ...

    async def get_bsn_number(self, case_uri: str) -> CitizenData: ...


@runtime_checkable
class KlantQuery(VersionDetails, Protocol):
    async def get_party(
        self,
        bsn_number: str,
        *,
        case_identifier: str | None = None,
    ) -> CommonPartyData: ...


@runtime_checkable
class ObjectenQuery(VersionDetails, Protocol):
    async def get_task(self, object_uri: str) -> TaskObject: ...

    async def get_message(self, object_uri: str) -> MessageObject: ...


@runtime_checkable
class ObjectTypenQuery(VersionDetails, Protocol):
    def is_valid_type(self, object_type_uri: str | None, expected_uuid: str) -> bool: ...


@runtime_checkable
class BesluitenQuery(VersionDetails, Protocol):
    async def get_decision_resource(self, resource_uri: str) -> DecisionResource: ...

    async def get_info_object(self, info_object_uri: str) -> InfoObject: ...

    async def get_decision(self, decision_uri: str) -> Decision: ...

    async def get_decision_type(self, decision_type_uri: str) -> DecisionType: ...


__all__ = [
    "BesluitenQuery",
    "KlantQuery",
    "ObjectTypenQuery",
    "ObjectenQuery",
    "VersionDetails",
    "ZaakQuery",
]
