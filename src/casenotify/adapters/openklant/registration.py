"""Versioned contact registration: record delivery outcomes in the customer APIs.

v1 writes to the Contactmomenten API and links the moment to the case and the
customer with two follow-up calls. v2 uses the Klantinteracties convenience
endpoint, which stores the contact, the party involvement and the case in one
call, and optionally links the contact to the configured actor.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, ClassVar

from casenotify.adapters.querying import ApiQueryClient, uuid_from_uri

from .schema import ContactmomentSchema, MaakKlantcontactSchema

if TYPE_CHECKING:
    from casenotify.adapters.http_resilience import ClientFactory
    from casenotify.config.http_resilience import ResilienceConfig
    from casenotify.config.registration import RegistrationConfig
    from casenotify.domain.model import ContactMoment

log = getLogger(__name__)


class RegisterContactV1:
    name: ClassVar[str] = "Contactmomenten"
    version: ClassVar[str] = "1.0.0"

    def __init__(
        self,
        *,
        domain: str,
        registration: RegistrationConfig,
        resilience: ResilienceConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._domain = domain
        self._registration = registration
        self._api = ApiQueryClient(resilience, client_factory=client_factory)

    def _url(self, path: str) -> str:
        return f"https://{self._domain}/contactmomenten/api/v1/{path}"

    def _create_body(self, contact: ContactMoment) -> dict[str, object]:
        employee = self._registration.employee_identification
        return {
            "bronorganisatie": contact.organization_id,
            "registratiedatum": contact.occurred_at.isoformat(),
            "kanaal": str(contact.method),
            "tekst": contact.body or contact.subject,
            "initiatief": "gemeente",
            "medewerkerIdentificatie": {
                "identificatie": employee,
                "achternaam": employee,
            },
        }

    async def register_contact(self, contact: ContactMoment) -> str:
        created = await self._api.post_model(
            self._url("contactmomenten"), self._create_body(contact), ContactmomentSchema
        )
        if contact.case_uri:
            await self._api.post_json(
                self._url("objectcontactmomenten"),
                {"contactmoment": created.url, "object": contact.case_uri, "objectType": "zaak"},
            )
        await self._api.post_json(
            self._url("klantcontactmomenten"),
            {
                "contactmoment": created.url,
                "klant": contact.party_uri,
                "rol": "belanghebbende",
                "gelezen": False,
            },
        )
        log.debug("Registered contact moment %s", created.url)
        return created.url


class RegisterContactV2:
    name: ClassVar[str] = "Klantcontacten"
    version: ClassVar[str] = "2.0.0"

    def __init__(
        self,
        *,
        domain: str,
        registration: RegistrationConfig,
        resilience: ResilienceConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._domain = domain
        self._registration = registration
        self._api = ApiQueryClient(resilience, client_factory=client_factory)

    def _url(self, path: str) -> str:
        return f"https://{self._domain}/klantinteracties/api/v1/{path}"

    def _create_body(self, contact: ContactMoment) -> dict[str, object]:
        body: dict[str, object] = {
            "klantcontact": {
                "kanaal": str(contact.method),
                "onderwerp": contact.subject,
                "inhoud": contact.body,
                "indicatieContactGelukt": contact.is_successful,
                "taal": "nld",
                "vertrouwelijk": True,
                "plaatsgevondenOp": contact.occurred_at.isoformat(),
            },
            "betrokkene": {
                "wasPartij": {"uuid": uuid_from_uri(contact.party_uri)},
                "rol": "klant",
                "initiator": True,
            },
        }
        if contact.case_uri:
            registration = self._registration
            body["onderwerpobject"] = {
                "onderwerpobjectidentificator": {
                    "objectId": uuid_from_uri(contact.case_uri),
                    "codeObjecttype": registration.code_object_type,
                    "codeRegister": registration.code_register,
                    "codeSoortObjectId": registration.code_object_id_type,
                }
            }
        return body

    async def register_contact(self, contact: ContactMoment) -> str:
        created = await self._api.post_model(
            self._url("maak-klantcontact"), self._create_body(contact), MaakKlantcontactSchema
        )
        klantcontact = created.klantcontact
        actor_uuid = self._registration.actor_uuid
        if actor_uuid:
            await self._api.post_json(
                self._url("actorklantcontacten"),
                {"actor": {"uuid": actor_uuid}, "klantcontact": {"uuid": klantcontact.uuid}},
            )
        log.debug("Registered klantcontact %s", klantcontact.uuid)
        return klantcontact.url or klantcontact.uuid
