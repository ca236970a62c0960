"""Schema of the Notificaties API callback payload."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field


class KenmerkenSchema(BaseModel):
    """Event attributes; unknown attributes are kept as orphans."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    zaaktype: str | None = None
    bronorganisatie: str | None = None
    vertrouwelijkheidaanduiding: str | None = None
    object_type: str | None = Field(default=None, alias="objectType")
    besluittype: str | None = None
    verantwoordelijke_organisatie: str | None = Field(
        default=None, alias="verantwoordelijkeOrganisatie"
    )

    @property
    def orphans(self) -> dict[str, object]:
        return dict(self.__pydantic_extra__ or {})


class NotificatieSchema(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    actie: str
    kanaal: str
    resource: str
    kenmerken: KenmerkenSchema = Field(default_factory=KenmerkenSchema)
    hoofd_object: str = Field(alias="hoofdObject")
    resource_url: str = Field(alias="resourceUrl")
    aanmaakdatum: datetime | None = None

    @property
    def orphans(self) -> dict[str, object]:
        return dict(self.__pydantic_extra__ or {})
