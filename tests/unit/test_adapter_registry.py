import sys
import types
from importlib.metadata import EntryPoint

import pytest

from adapters import registry
from adapters.base import DatabaseAdapter, ModuleNotLoadable
from config.adapter import AdapterConfig


@pytest.fixture
def clean_registry(monkeypatch):
    monkeypatch.setattr(registry, "_REGISTRY", dict(registry._REGISTRY))
    monkeypatch.setattr(registry, "_discovered", False)
    return registry


def test_defaults_are_registered(clean_registry):
    assert {"memory", "sql"} <= set(clean_registry.registered_types())
    assert clean_registry.module_path_for("sql") == "adapters.sql"


def test_type_is_matched_as_written(clean_registry):
    assert clean_registry.module_path_for("SQL") == "adapters.SQL_adapter"


def test_unregistered_type_uses_naming_convention(clean_registry):
    assert clean_registry.module_path_for("redis") == "adapters.redis_adapter"


def test_register_rejects_empty_names(clean_registry):
    with pytest.raises(ValueError, match="adapter type cannot be empty"):
        clean_registry.register_adapter("  ", "adapters.memory")
    with pytest.raises(ValueError, match="module path cannot be empty"):
        clean_registry.register_adapter("redis", "")


def test_convention_module_is_loaded(clean_registry, monkeypatch):
    module = types.ModuleType("adapters.fake_adapter")

    class FakeAdapter(DatabaseAdapter):
        engine = "fake"

    module.FakeAdapter = FakeAdapter
    monkeypatch.setitem(sys.modules, "adapters.fake_adapter", module)

    adapter = AdapterConfig(type="fake", uri="fake://", extension=["x"]).build(object())
    assert isinstance(adapter, FakeAdapter)
    assert adapter.extension == ("x",)


def test_loading_is_idempotent(clean_registry):
    first = clean_registry.load_adapter_module("memory")
    second = clean_registry.load_adapter_module("memory")
    assert first is second


def test_registered_module_missing_raises(clean_registry):
    clean_registry.register_adapter("ghost", "adapters.ghost_impl")
    with pytest.raises(ModuleNotLoadable) as excinfo:
        clean_registry.load_adapter_module("ghost")
    assert excinfo.value.type == "ghost"


def test_discover_adapters_from_entry_points(clean_registry, monkeypatch):
    found = [EntryPoint(name="redis", value="adapters.memory:MemoryAdapter", group=registry.ENTRY_POINT_GROUP)]
    monkeypatch.setattr(registry, "entry_points", lambda group: found)

    assert clean_registry.discover_adapters() == 1
    assert clean_registry.module_path_for("redis") == "adapters.memory"
    # second call is a no-op
    assert clean_registry.discover_adapters() == 0


def test_discovery_does_not_override_explicit_registration(clean_registry, monkeypatch):
    found = [EntryPoint(name="sql", value="elsewhere.sql", group=registry.ENTRY_POINT_GROUP)]
    monkeypatch.setattr(registry, "entry_points", lambda group: found)

    assert clean_registry.discover_adapters() == 0
    assert clean_registry.module_path_for("sql") == "adapters.sql"
