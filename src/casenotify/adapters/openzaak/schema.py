"""Zaken and Catalogi API response schemas."""

from __future__ import annotations

from datetime import date, datetime  # noqa: TC003

from pydantic import Field

from casenotify.adapters.querying import BackendModel


class ZaakSchema(BackendModel):
    url: str
    identificatie: str
    omschrijving: str = ""
    zaaktype: str
    registratiedatum: date | None = None
    bronorganisatie: str | None = None


class StatusSchema(BackendModel):
    url: str
    statustype: str
    datum_status_gezet: datetime | None = Field(default=None, alias="datumStatusGezet")
    statustoelichting: str = ""


class StatusListSchema(BackendModel):
    count: int = 0
    results: list[StatusSchema] = Field(default_factory=list)


class StatusTypeSchema(BackendModel):
    url: str
    omschrijving: str
    omschrijving_generiek: str = Field(default="", alias="omschrijvingGeneriek")
    is_eindstatus: bool = Field(default=False, alias="isEindstatus")
    informeren: bool = False
    zaaktype_identificatie: str = Field(default="", alias="zaaktypeIdentificatie")


class NatuurlijkPersoonIdentificatie(BackendModel):
    inp_bsn: str | None = Field(default=None, alias="inpBsn")


class RolSchema(BackendModel):
    omschrijving_generiek: str = Field(default="", alias="omschrijvingGeneriek")
    betrokkene_type: str = Field(default="", alias="betrokkeneType")
    betrokkene_identificatie: NatuurlijkPersoonIdentificatie | None = Field(
        default=None, alias="betrokkeneIdentificatie"
    )


class RolListSchema(BackendModel):
    """Paginated roles answer of Zaken API 1.5 and later."""

    count: int = 0
    next: str | None = None
    results: list[RolSchema] = Field(default_factory=list)
