"""
Pytest configuration for record-factory.

Provides fixtures for:
- Isolated registries and factories, so named types never leak between tests
- Settings built without reading the developer's environment
- Ready-made record types used across unit tests
"""

from __future__ import annotations

from typing import Type

import pytest

from record_factory.config import Settings
from record_factory.domain.record import Record
from record_factory.factory import RecordFactory
from record_factory.registry import RecordRegistry


@pytest.fixture
def test_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """
    Settings with every RECORD_FACTORY_* variable cleared and no .env file.
    """
    for variable in (
        "RECORD_FACTORY_LOG_LEVEL",
        "RECORD_FACTORY_JSON_LOGS",
        "RECORD_FACTORY_DUPLICATE_NAMES",
    ):
        monkeypatch.delenv(variable, raising=False)
    return Settings(_env_file=None)


@pytest.fixture
def registry() -> RecordRegistry:
    """
    Fresh registry with the default (overwrite) duplicate-name policy.
    """
    return RecordRegistry()


@pytest.fixture
def strict_registry() -> RecordRegistry:
    """
    Fresh registry that rejects duplicate names.
    """
    return RecordRegistry(duplicate_names="reject")


@pytest.fixture
def factory(registry: RecordRegistry) -> RecordFactory:
    """
    Factory bound to the isolated `registry` fixture.
    """
    return RecordFactory(registry=registry)


@pytest.fixture
def point_type(factory: RecordFactory) -> Type[Record]:
    """
    Anonymous positional type with fields x, y.
    """
    return factory.define(["x", "y"])


@pytest.fixture
def keyword_type(factory: RecordFactory) -> Type[Record]:
    """
    Anonymous keyword-mode type with fields a, b.
    """
    return factory.define(["a", "b"], keyword_init=True)
