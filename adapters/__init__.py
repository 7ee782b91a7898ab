"""Adapter layer: construction contract, error kinds and the type registry.

Concrete adapters are imported lazily by the registry when a config is built.
"""

from adapters.base import (
    AdapterClassNotFound,
    AdapterConstructionFailed,
    AdapterError,
    DatabaseAdapter,
    ModuleNotLoadable,
    UnsupportedConsole,
)
from adapters.registry import register_adapter, registered_types, unregister_adapter

__all__ = [
    "AdapterClassNotFound",
    "AdapterConstructionFailed",
    "AdapterError",
    "DatabaseAdapter",
    "ModuleNotLoadable",
    "UnsupportedConsole",
    "register_adapter",
    "registered_types",
    "unregister_adapter",
]
