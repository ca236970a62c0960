"""Klanten (v1) and Klantinteracties (v2) response schemas."""

from __future__ import annotations

from pydantic import Field

from casenotify.adapters.querying import BackendModel

# --- v1: Klanten API ---


class KlantSubjectIdentificatie(BackendModel):
    inp_bsn: str | None = Field(default=None, alias="inpBsn")
    geslachtsaanduiding: str = ""


class KlantSchema(BackendModel):
    url: str
    voornaam: str = ""
    voorvoegsel_achternaam: str = Field(default="", alias="voorvoegselAchternaam")
    achternaam: str = ""
    aanmaakkanaal: str = ""
    telefoonnummer: str = ""
    emailadres: str = ""
    subject_identificatie: KlantSubjectIdentificatie | None = Field(
        default=None, alias="subjectIdentificatie"
    )


class KlantListSchema(BackendModel):
    count: int = 0
    results: list[KlantSchema] = Field(default_factory=list)


# --- v2: Klantinteracties API ---


class UuidReference(BackendModel):
    uuid: str
    url: str | None = None


class DigitaalAdresSchema(BackendModel):
    uuid: str
    soort_digitaal_adres: str = Field(default="", alias="soortDigitaalAdres")
    adres: str = ""
    omschrijving: str = ""
    referentie: str = ""


class DigitaalAdresListSchema(BackendModel):
    count: int = 0
    results: list[DigitaalAdresSchema] = Field(default_factory=list)


class Contactnaam(BackendModel):
    voornaam: str = ""
    voorvoegsel_achternaam: str = Field(default="", alias="voorvoegselAchternaam")
    achternaam: str = ""


class PartijIdentificatie(BackendModel):
    contactnaam: Contactnaam | None = None


class PartijExpand(BackendModel):
    digitale_adressen: list[DigitaalAdresSchema] | None = Field(
        default=None, alias="digitaleAdressen"
    )


class PartijSchema(BackendModel):
    url: str
    uuid: str = ""
    voorkeurs_digitaal_adres: UuidReference | None = Field(
        default=None, alias="voorkeursDigitaalAdres"
    )
    partij_identificatie: PartijIdentificatie | None = Field(
        default=None, alias="partijIdentificatie"
    )
    subject_identificatie: KlantSubjectIdentificatie | None = Field(
        default=None, alias="subjectIdentificatie"
    )
    expand: PartijExpand | None = Field(default=None, alias="_expand")


class PartijListSchema(BackendModel):
    count: int = 0
    results: list[PartijSchema] = Field(default_factory=list)


# --- contact registration ---


class ContactmomentSchema(BackendModel):
    url: str


class KlantcontactSchema(BackendModel):
    uuid: str
    url: str = ""


class MaakKlantcontactSchema(BackendModel):
    klantcontact: KlantcontactSchema
