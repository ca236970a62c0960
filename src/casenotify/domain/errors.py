"""Failure taxonomy for processing a notification."""

from __future__ import annotations


class ProcessingError(RuntimeError):
    """Base class for every failure raised while handling one notification."""


class BackendUnavailableError(ProcessingError):
    """A backend could not be reached or answered with a non-success status."""

    def __init__(self, message: str, *, uri: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.uri = uri
        self.status_code = status_code


class MalformedResponseError(ProcessingError):
    """A backend answered, but its data could not be parsed or breaks an invariant."""


class MissingInitiatorError(MalformedResponseError):
    """No case role carries the configured initiator label."""


class AmbiguousInitiatorError(MalformedResponseError):
    """More than one case role carries the configured initiator label."""


class MissingContactMethodError(MalformedResponseError):
    """The party has no usable distribution channel or digital address."""


class UnimplementedScenarioError(ProcessingError):
    """The event shape is not handled by any registered scenario."""


class NotifyDeliveryError(ProcessingError):
    """The delivery provider rejected or failed a send request."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidEventError(ProcessingError):
    """The inbound notification payload is missing required fields or has unknown ones."""


class InvalidReceiptError(InvalidEventError):
    """A delivery receipt callback is malformed or carries an unreadable reference."""
