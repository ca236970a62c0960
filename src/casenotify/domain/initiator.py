"""Selection of the case initiator among the roles attached to a case."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import AmbiguousInitiatorError, MissingInitiatorError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import CaseRole, CitizenData


def resolve_initiator(roles: Iterable[CaseRole], initiator_role: str) -> CitizenData:
    """Return the citizen data of the single role labelled ``initiator_role``.

    Matching is exact and case-sensitive. The result does not depend on the
    order of ``roles``.
    """

    matches = [role for role in roles if role.role_label == initiator_role]
    if not matches:
        raise MissingInitiatorError(f"No case role with label {initiator_role!r}")
    if len(matches) > 1:
        raise AmbiguousInitiatorError(
            f"{len(matches)} case roles share the initiator label {initiator_role!r}"
        )
    citizen = matches[0].citizen
    if citizen is None or not citizen.bsn_number:
        raise MissingInitiatorError("The initiator role has no citizen identification")
    return citizen
