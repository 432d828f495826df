"""Shared fixtures for validation tests."""

from __future__ import annotations

import pytest

from cqrs_ddd_validation import (
    RuleEngine,
    build_default_registry,
    set_default_registry,
)


@pytest.fixture(autouse=True)
def default_registry():
    """Fresh default-value registry per test, so registrations never leak."""
    registry = build_default_registry()
    set_default_registry(registry)
    return registry


@pytest.fixture
def engine() -> RuleEngine:
    """Standalone rule engine collecting into its own result."""
    return RuleEngine()
