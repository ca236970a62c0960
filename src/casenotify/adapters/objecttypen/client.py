"""Object type checks against the configured ObjectTypen UUIDs."""

from __future__ import annotations

from typing import ClassVar

from casenotify.adapters.querying import uuid_from_uri


class QueryObjectTypen:
    """Decides whether an object belongs to a configured object type.

    The check only compares the UUID at the end of the type URI carried by the
    event; it never calls the ObjectTypen API.
    """

    name: ClassVar[str] = "ObjectTypen"
    version: ClassVar[str] = "2.2.0"

    def is_valid_type(self, object_type_uri: str | None, expected_uuid: str) -> bool:
        if not object_type_uri or not expected_uuid:
            return False
        return uuid_from_uri(object_type_uri) == expected_uuid.strip().lower()
