"""
Shared pytest fixtures for the E-Invoice Readiness Checker test suite.

Provides:
  - Sample ``BusinessInputs`` for an established and a pre-commencement business.
  - Sample ``CategoryResult`` objects (with and without a deadline).
  - ``config_file``: a minimal TOML config written to ``tmp_path``.
  - ``reset_logging``: removes handlers installed by ``configure_logging()``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from einvoice_checker.models.inputs import BusinessInputs
from einvoice_checker.models.results import CategoryResult
from einvoice_checker.taxonomy.category_taxonomy import ComplianceCategory


# ── Sample domain object factories ────────────────────────────────────────────

@pytest.fixture
def large_business_inputs() -> BusinessInputs:
    """Established business with RM6mil 2024 revenue (category 1)."""
    return BusinessInputs(
        annual_revenue_2024=6_000_000,
        annual_revenue_2025=0,
        business_commencement_year=2020,
        is_pre_business=False,
    )


@pytest.fixture
def small_new_business_inputs() -> BusinessInputs:
    """Pre-business commencing 2025 with RM400k projected revenue (category 6)."""
    return BusinessInputs(
        annual_revenue_2025=400_000,
        business_commencement_year=2025,
        is_pre_business=True,
    )


@pytest.fixture
def large_category_result() -> CategoryResult:
    return CategoryResult(
        category=ComplianceCategory.LARGE_BUSINESS,
        implementation_date="2025-07-01",
    )


@pytest.fixture
def not_applicable_result() -> CategoryResult:
    return CategoryResult(
        category=ComplianceCategory.NOT_APPLICABLE,
        message="Test message for Cat 0",
    )


# ── Config fixture ────────────────────────────────────────────────────────────

MINIMAL_CONFIG_TOML = """\
[questionnaire]
default_commencement_year = 2024
default_current_year = 2024

[logging]
level = "WARNING"
log_file = ""
"""


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a minimal config TOML to a temp dir and return its path."""
    path = tmp_path / "config.toml"
    path.write_text(MINIMAL_CONFIG_TOML, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clear_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer EINVOICE_CHECKER_* variables out of every test."""
    for name in (
        "EINVOICE_CHECKER_LOG_LEVEL",
        "EINVOICE_CHECKER_CURRENT_YEAR",
        "EINVOICE_CHECKER_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def reset_logging():
    """Drop root handlers installed by ``configure_logging()`` after the test.

    ``configure_logging()`` uses ``basicConfig(force=True)``; without this,
    its stderr/file handlers would outlive the test that created them.
    pytest's own capture handlers are left alone.
    """
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if not type(handler).__module__.startswith("_pytest"):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
