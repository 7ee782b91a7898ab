from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Sequence

from adapters.base import AdapterClassNotFound, AdapterConstructionFailed, DatabaseAdapter
from adapters.registry import load_adapter_module
from utils.inflector import classify

if TYPE_CHECKING:
    from config.settings import AdapterOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdapterConfig:
    """Declared adapter: type, connection uri and extensions.

    ``class_name`` is derived from ``type`` once, at construction, by the
    ``<type>_adapter`` -> PascalCase convention (``sql`` -> ``SqlAdapter``).
    Nothing is validated until ``build``.

        config = AdapterConfig(type="sql", uri="postgres://localhost/app")
        adapter = config.build(mapper)
    """

    type: Optional[str] = None
    uri: Optional[str] = None
    extension: Optional[Sequence[str]] = None
    class_name: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "class_name", classify(f"{self.type or ''}_adapter"))

    @classmethod
    def from_options(cls, options: "AdapterOptions") -> "AdapterConfig":
        return cls(type=options.type, uri=options.uri, extension=list(options.extension))

    def build(self, mapper: Any) -> DatabaseAdapter:
        module = load_adapter_module(self.type)
        adapter_class = getattr(module, self.class_name, None)
        if not isinstance(adapter_class, type):
            raise AdapterClassNotFound(self.class_name)

        try:
            adapter = adapter_class(mapper, self.uri, extension=self.extension)
        except Exception as exc:
            raise AdapterConstructionFailed(adapter_class, str(exc)) from exc
        logger.debug("built %s for adapter type %r", self.class_name, self.type)
        return adapter

    def __repr__(self) -> str:
        # uri may embed credentials
        return f"AdapterConfig(type={self.type!r}, class_name={self.class_name!r}, extension={self.extension!r})"
