"""Report the versions of the integrated backend APIs."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from casenotify.domain.ports.querying import VersionDetails

log = getLogger(__name__)

type VersionProvider = Callable[[], VersionDetails]


class VersionsRegister:
    """Summarises ``"{name} v{version}"`` for each registered integration.

    Providers are resolved lazily; when any of them is not registered the
    report is empty rather than partial.
    """

    def __init__(self, providers: Sequence[VersionProvider]) -> None:
        self._providers = tuple(providers)

    def report_versions(self) -> str:
        try:
            details = [provider() for provider in self._providers]
        except LookupError as exc:
            log.warning("Cannot report versions, an integration is not registered: %s", exc)
            return ""
        return ", ".join(f"{item.name} v{item.version}" for item in details)


def product_version(
    *,
    version: str,
    environment: str,
    workflow_version: str,
    components: str,
) -> str:
    summary = f"casenotify v{version} ({environment}), workflow v{workflow_version}"
    return f"{summary}: {components}" if components else summary
