"""Translate Zaken/Catalogi schemas into domain records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from casenotify.domain.model import (
    Case,
    CaseRole,
    CaseStatus,
    CaseStatuses,
    CaseType,
    CitizenData,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .schema import RolSchema, StatusListSchema, StatusTypeSchema, ZaakSchema


def to_case(schema: ZaakSchema, *, schema_version: str) -> Case:
    return Case(
        uri=schema.url,
        identification=schema.identificatie,
        name=schema.omschrijving,
        case_type_uri=schema.zaaktype,
        registration_date=schema.registratiedatum,
        schema_version=schema_version,
    )


def to_case_statuses(schema: StatusListSchema, *, schema_version: str) -> CaseStatuses:
    statuses = tuple(
        CaseStatus(
            uri=status.url,
            status_type_uri=status.statustype,
            set_at=status.datum_status_gezet,
            description=status.statustoelichting,
        )
        for status in schema.results
    )
    return CaseStatuses(statuses=statuses, schema_version=schema_version)


def to_case_type(schema: StatusTypeSchema, *, schema_version: str) -> CaseType:
    return CaseType(
        uri=schema.url,
        name=schema.omschrijving,
        description=schema.omschrijving_generiek,
        is_final_status=schema.is_eindstatus,
        is_notification_expected=schema.informeren,
        identification=schema.zaaktype_identificatie,
        schema_version=schema_version,
    )


def to_case_roles(roles: Iterable[RolSchema]) -> list[CaseRole]:
    translated: list[CaseRole] = []
    for role in roles:
        identification = role.betrokkene_identificatie
        bsn = identification.inp_bsn if identification is not None else None
        translated.append(
            CaseRole(
                role_label=role.omschrijving_generiek,
                citizen=CitizenData(bsn_number=bsn) if bsn else None,
                subject_type=role.betrokkene_type,
            )
        )
    return translated
