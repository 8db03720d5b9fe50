"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters
- Application services don't depend on adapters
- Adapters can depend on domain
- No circular dependencies
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should only import the domain models and the compiled-in reference data."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("station_id_resolver.domain.models*")
        .should_not_import("station_id_resolver.adapters*")
        .should_not_import("station_id_resolver.application*")
        .should_not_import("station_id_resolver.domain.contracts*")
        .should_not_import("station_id_resolver.domain.ports*")
        .may_import("station_id_resolver.domain.models*")
        .may_import("station_id_resolver.domain.reference_data*")
        .check("station_id_resolver")
    )


def test_reference_data_has_no_dependencies() -> None:
    """Reference data is plain tables and should import nothing from the project."""
    (
        archrule("reference data", comment="Reference data should be plain tables")
        .match("station_id_resolver.domain.reference_data*")
        .should_not_import("station_id_resolver.domain.models*")
        .should_not_import("station_id_resolver.adapters*")
        .should_not_import("station_id_resolver.application*")
        .may_import("station_id_resolver.domain.reference_data*")
        .check("station_id_resolver")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols/interfaces) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("station_id_resolver.domain.contracts*")
        .should_not_import("station_id_resolver.adapters*")
        .should_not_import("station_id_resolver.application*")
        .may_import("station_id_resolver.domain*")
        .check("station_id_resolver")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("station_id_resolver.domain.ports*")
        .should_not_import("station_id_resolver.adapters*")
        .should_not_import("station_id_resolver.application*")
        .may_import("station_id_resolver.domain*")
        .check("station_id_resolver")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("station_id_resolver.application*")
        .should_not_import("station_id_resolver.adapters*")
        .should_not_import("aiohttp")
        .may_import("station_id_resolver.domain*")
        .may_import("station_id_resolver.application*")
        .check("station_id_resolver")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("station_id_resolver.adapters*")
        .should_not_import("station_id_resolver.application*")
        .may_import("station_id_resolver.domain*")
        .may_import("station_id_resolver.adapters*")
        .check("station_id_resolver", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("station_id_resolver.domain*")
        .should_not_import("station_id_resolver.adapters*")
        .should_not_import("station_id_resolver.application*")
        .may_import("station_id_resolver.domain*")
        .check("station_id_resolver", only_direct_imports=True)
    )


def test_cli_uses_composition_root_for_remote_adapters() -> None:
    """CLI should get remote adapters through the composition root, not import them directly."""
    (
        archrule("CLI independence", comment="CLI should not wire remote adapters itself")
        .match("station_id_resolver.cli")
        .should_not_import("station_id_resolver.adapters.heartrails_api*")
        .should_not_import("station_id_resolver.adapters.odpt_api*")
        .may_import("station_id_resolver.main")
        .may_import("station_id_resolver.domain*")
        .may_import("station_id_resolver.adapters.config*")
        .check("station_id_resolver", only_direct_imports=True)
    )
