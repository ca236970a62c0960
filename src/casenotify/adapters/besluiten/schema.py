"""Besluiten API (and linked document) response schemas."""

from __future__ import annotations

from datetime import date  # noqa: TC003

from pydantic import Field

from casenotify.adapters.querying import BackendModel


class BesluitInformatieObjectSchema(BackendModel):
    url: str
    besluit: str
    informatieobject: str


class InformatieObjectSchema(BackendModel):
    url: str
    informatieobjecttype: str
    status: str = ""
    vertrouwelijkheidaanduiding: str = ""


class BesluitSchema(BackendModel):
    url: str
    identificatie: str = ""
    besluittype: str
    zaak: str = ""
    datum: date | None = None
    toelichting: str = ""
    bestuursorgaan: str = ""
    ingangsdatum: date | None = None
    vervaldatum: date | None = None
    vervalreden: str = ""
    publicatiedatum: date | None = None
    verzenddatum: date | None = None
    uiterlijke_reactiedatum: date | None = Field(default=None, alias="uiterlijkeReactiedatum")


class BesluitTypeSchema(BackendModel):
    url: str
    omschrijving: str = ""
    omschrijving_generiek: str = Field(default="", alias="omschrijvingGeneriek")
    besluitcategorie: str = ""
    publicatie_indicatie: bool = Field(default=False, alias="publicatieIndicatie")
    publicatietekst: str = ""
    toelichting: str = ""
