from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Protocol, runtime_checkable

from feedwire.adapters.catalog import Capability


@runtime_checkable
class DataFetcher(Protocol):
    """Transport collaborator: retrieves raw bytes for one protocol."""

    def fetch(self, protocol: str, parameters: Mapping[str, Any]) -> bytes: ...


@runtime_checkable
class PayloadParser(Protocol):
    """Format collaborator: turns raw bytes into structured data."""

    def parse(self, format: str, raw: bytes, parameters: Mapping[str, Any]) -> Any: ...


@dataclass(frozen=True)
class Adapter:
    """Handler for one (protocol, format) pair.

    Identity is the pair alone; parameters and descriptors ride along for
    execution but do not affect equality or hashing.
    """

    protocol: str
    format: str
    protocol_parameters: Mapping[str, Any] = field(default_factory=dict, compare=False)
    format_parameters: Mapping[str, Any] = field(default_factory=dict, compare=False)
    protocol_capability: Optional[Capability] = field(default=None, compare=False, repr=False)
    format_capability: Optional[Capability] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "protocol_parameters", MappingProxyType(dict(self.protocol_parameters)))
        object.__setattr__(self, "format_parameters", MappingProxyType(dict(self.format_parameters)))

    def with_defaults(self) -> "Adapter":
        """Validate both parameter maps and return a copy with defaults filled in."""
        protocol_parameters = dict(self.protocol_parameters)
        if self.protocol_capability is not None:
            protocol_parameters = self.protocol_capability.parse_parameters(protocol_parameters).to_dict()
        format_parameters = dict(self.format_parameters)
        if self.format_capability is not None:
            format_parameters = self.format_capability.parse_parameters(format_parameters).to_dict()
        return replace(self, protocol_parameters=protocol_parameters, format_parameters=format_parameters)

    def validate(self) -> None:
        self.with_defaults()

    def import_data(self, *, fetcher: DataFetcher, parser: PayloadParser) -> Any:
        adapter = self.with_defaults()
        raw = fetcher.fetch(adapter.protocol, adapter.protocol_parameters)
        return parser.parse(adapter.format, raw, adapter.format_parameters)

    def to_dict(self) -> dict[str, Any]:
        return {
            "protocol": {"type": self.protocol, "parameters": dict(self.protocol_parameters)},
            "format": {"type": self.format, "parameters": dict(self.format_parameters)},
        }


AdapterFactory = Callable[[Mapping[str, Any], Mapping[str, Any]], Adapter]


@dataclass(frozen=True)
class CatalogAdapterFactory:
    """Builds adapters for a catalog protocol/format pair."""

    protocol: Capability
    format: Capability

    def __call__(self, protocol_parameters: Mapping[str, Any], format_parameters: Mapping[str, Any]) -> Adapter:
        return Adapter(
            protocol=self.protocol.type,
            format=self.format.type,
            protocol_parameters=protocol_parameters,
            format_parameters=format_parameters,
            protocol_capability=self.protocol,
            format_capability=self.format,
        )
