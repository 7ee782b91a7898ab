from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple


class AdapterError(RuntimeError):
    pass


class ModuleNotLoadable(AdapterError, ImportError):
    """The implementation module for an adapter type is not installed."""

    def __init__(self, adapter_type: Optional[str], reason: str):
        self.type = adapter_type
        self.reason = reason
        super().__init__(f"Cannot find adapter '{adapter_type}' ({reason})")


class AdapterClassNotFound(AdapterError, LookupError):
    """The module loaded but the derived adapter class is missing from it."""

    def __init__(self, class_name: str):
        self.class_name = class_name
        super().__init__(f"Cannot find adapter class {class_name}")


class AdapterConstructionFailed(AdapterError):
    def __init__(self, adapter_class: type, reason: str):
        self.adapter_class = adapter_class
        self.reason = reason
        super().__init__(f"Cannot instantiate adapter of {adapter_class.__name__} ({reason})")


class UnsupportedConsole(AdapterError):
    pass


class DatabaseAdapter:
    engine: str = "unknown"

    def __init__(self, mapper: Any, uri: Optional[str] = None, extension: Optional[Sequence[str]] = None):
        self.mapper = mapper
        self.uri = uri
        self.extension: Tuple[str, ...] = tuple(extension or ())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(engine={self.engine!r}, extension={list(self.extension)!r})"
