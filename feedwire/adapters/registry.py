from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional

from feedwire.adapters.catalog import FORMATS, PROTOCOLS
from feedwire.adapters.common import Adapter, AdapterFactory, CatalogAdapterFactory
from feedwire.errors import ConfigurationError, InvalidArgument

log = logging.getLogger("feedwire.adapters.registry")


class AdapterRegistry:
    """Adapter factories keyed by protocol type, then format type.

    Populated during startup and sealed; lookups never mutate it, so a sealed
    registry can be shared across threads without locking.
    """

    def __init__(self) -> None:
        self._factories: Dict[str, Dict[str, AdapterFactory]] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        self._sealed = True

    def register(self, protocol_type: str, format_type: str, factory: AdapterFactory) -> None:
        if self._sealed:
            raise ConfigurationError(
                f"Cannot register {protocol_type}/{format_type}: registry is sealed"
            )
        if not protocol_type or not format_type:
            raise InvalidArgument("protocol_type and format_type must be non-empty strings")

        formats = self._factories.setdefault(protocol_type, {})
        if format_type in formats:
            raise ConfigurationError(f"Adapter already registered for {protocol_type}/{format_type}")

        formats[format_type] = factory
        log.debug("Registered adapter %s/%s", protocol_type, format_type)

    def supports_protocol(self, protocol_type: str) -> bool:
        return protocol_type in self._factories

    def protocol_types(self) -> List[str]:
        return list(self._factories)

    def format_types(self, protocol_type: str) -> List[str]:
        return list(self._factories.get(protocol_type, {}))

    def lookup(
        self,
        protocol_type: str,
        format_type: str,
        protocol_parameters: Optional[Mapping[str, Any]] = None,
        format_parameters: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Adapter]:
        factory = self._factories.get(protocol_type, {}).get(format_type)
        if factory is None:
            return None
        return factory(protocol_parameters or {}, format_parameters or {})


def build_registry() -> AdapterRegistry:
    registry = AdapterRegistry()
    for protocol in PROTOCOLS:
        for fmt in FORMATS:
            registry.register(protocol.type, fmt.type, CatalogAdapterFactory(protocol, fmt))
    registry.seal()
    return registry


@lru_cache(maxsize=1)
def default_registry() -> AdapterRegistry:
    """Process-wide registry with every catalog protocol/format pair."""
    return build_registry()
