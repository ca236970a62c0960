"""Settings for registering delivery outcomes as contact moments."""

from __future__ import annotations

from dataclasses import dataclass, field

from casenotify.domain.model import NotifyMethod

from .env import optional_env_var


@dataclass(frozen=True, slots=True)
class UxMessage:
    subject: str
    body: str


@dataclass(frozen=True, slots=True)
class UxMessages:
    """Subject and text stored with a contact moment, per method and outcome.

    Letters have no receipt texts; they are registered with empty ones.
    """

    email_success: UxMessage = UxMessage(
        "Notificatie verzonden", "De notificatie is per e-mail verzonden."
    )
    email_failure: UxMessage = UxMessage(
        "Notificatie niet verzonden", "De notificatie kon niet per e-mail worden verzonden."
    )
    sms_success: UxMessage = UxMessage(
        "Notificatie verzonden", "De notificatie is per sms verzonden."
    )
    sms_failure: UxMessage = UxMessage(
        "Notificatie niet verzonden", "De notificatie kon niet per sms worden verzonden."
    )

    def for_outcome(self, method: NotifyMethod, *, success: bool) -> UxMessage:
        match method:
            case NotifyMethod.EMAIL:
                return self.email_success if success else self.email_failure
            case NotifyMethod.SMS:
                return self.sms_success if success else self.sms_failure
            case NotifyMethod.LETTER:
                return UxMessage("", "")


@dataclass(frozen=True, slots=True)
class RegistrationConfig:
    """How contact moments identify the case, the employee and the actor.

    ``actor_uuid`` links each Klantinteracties contact to that actor; without
    it the contact is stored unlinked.
    """

    messages: UxMessages = field(default_factory=UxMessages)
    employee_identification: str = "casenotify"
    actor_uuid: str | None = None
    code_object_type: str = "zaak"
    code_register: str = "openzaak"
    code_object_id_type: str = "uuid"


def _ux_message(prefix: str, default: UxMessage) -> UxMessage:
    return UxMessage(
        subject=optional_env_var(f"{prefix}_SUBJECT", default.subject),
        body=optional_env_var(f"{prefix}_BODY", default.body),
    )


def get_registration_config() -> RegistrationConfig:
    defaults = UxMessages()
    messages = UxMessages(
        email_success=_ux_message("UX_EMAIL_SUCCESS", defaults.email_success),
        email_failure=_ux_message("UX_EMAIL_FAILURE", defaults.email_failure),
        sms_success=_ux_message("UX_SMS_SUCCESS", defaults.sms_success),
        sms_failure=_ux_message("UX_SMS_FAILURE", defaults.sms_failure),
    )
    return RegistrationConfig(
        messages=messages,
        employee_identification=optional_env_var("REGISTRATION_EMPLOYEE_ID", "casenotify"),
        actor_uuid=optional_env_var("REGISTRATION_ACTOR_UUID") or None,
        code_object_type=optional_env_var("OPENKLANT_CODE_OBJECT_TYPE", "zaak"),
        code_register=optional_env_var("OPENKLANT_CODE_REGISTER", "openzaak"),
        code_object_id_type=optional_env_var("OPENKLANT_CODE_OBJECT_ID_TYPE", "uuid"),
    )
