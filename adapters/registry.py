"""Adapter type registry.

Maps an adapter type (``sql``, ``memory``, ...) to the module that implements
it. Types nobody registered fall back to the ``adapters.<type>_adapter``
naming convention, so third-party adapters can still be dropped in as plain
modules. Installed distributions may also advertise adapters through the
``model_adapters.adapters`` entry-point group, whose values are module paths.
"""

from __future__ import annotations

import logging
import threading
from importlib import import_module
from importlib.metadata import entry_points
from types import ModuleType
from typing import Dict, List, Optional

from adapters.base import ModuleNotLoadable

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "model_adapters.adapters"

_REGISTRY: Dict[str, str] = {
    "memory": "adapters.memory",
    "sql": "adapters.sql",
}
_LOAD_LOCK = threading.Lock()
_discovered = False


def _key(adapter_type: Optional[str]) -> str:
    # Matched as written: class_name is derived from the same spelling.
    return str(adapter_type or "")


def register_adapter(adapter_type: str, module_path: str) -> None:
    key = _key(adapter_type)
    if not key.strip():
        raise ValueError("adapter type cannot be empty")
    if not module_path:
        raise ValueError("module path cannot be empty")
    _REGISTRY[key] = module_path


def unregister_adapter(adapter_type: str) -> None:
    _REGISTRY.pop(_key(adapter_type), None)


def registered_types() -> List[str]:
    discover_adapters()
    return sorted(_REGISTRY)


def discover_adapters(force: bool = False) -> int:
    """Register adapters advertised through entry points; returns how many were added."""
    global _discovered
    if _discovered and not force:
        return 0
    _discovered = True
    added = 0
    for entry_point in entry_points(group=ENTRY_POINT_GROUP):
        key = _key(entry_point.name)
        if key in _REGISTRY and not force:
            continue
        _REGISTRY[key] = entry_point.value.partition(":")[0]
        added += 1
        logger.debug("discovered adapter %s -> %s", key, _REGISTRY[key])
    return added


def module_path_for(adapter_type: Optional[str]) -> str:
    discover_adapters()
    key = _key(adapter_type)
    return _REGISTRY.get(key) or f"adapters.{key}_adapter"


def load_adapter_module(adapter_type: Optional[str]) -> ModuleType:
    module_path = module_path_for(adapter_type)
    with _LOAD_LOCK:
        try:
            module = import_module(module_path)
        except ModuleNotFoundError as exc:
            raise ModuleNotLoadable(adapter_type, str(exc)) from exc
    logger.debug("loaded adapter module %s for type %r", module_path, adapter_type)
    return module
