from __future__ import annotations

from typing import TYPE_CHECKING

from casenotify.domain.versions import VersionsRegister, product_version
from tests.support.fakes import FakeKlantQuery, FakeZaakQuery

if TYPE_CHECKING:
    from casenotify.domain.ports.querying import VersionDetails


def test_report_lists_each_integration(
    zaak_query: FakeZaakQuery,
    klant_query: FakeKlantQuery,
) -> None:
    register = VersionsRegister([lambda: zaak_query, lambda: klant_query])

    assert register.report_versions() == "OpenZaak v2.0.0, OpenKlant v2.0.0"


def test_report_is_empty_when_an_integration_is_missing(zaak_query: FakeZaakQuery) -> None:
    def missing() -> VersionDetails:
        raise KeyError("besluiten")

    register = VersionsRegister([lambda: zaak_query, missing])

    assert register.report_versions() == ""


def test_report_without_integrations_is_empty() -> None:
    assert VersionsRegister([]).report_versions() == ""


def test_product_version_appends_components() -> None:
    summary = product_version(
        version="0.1.0",
        environment="test",
        workflow_version="2",
        components="OpenZaak v1.0.0",
    )

    assert summary == "casenotify v0.1.0 (test), workflow v2: OpenZaak v1.0.0"


def test_product_version_without_components() -> None:
    summary = product_version(
        version="0.1.0", environment="prod", workflow_version="1", components=""
    )

    assert summary == "casenotify v0.1.0 (prod), workflow v1"
