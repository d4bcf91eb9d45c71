from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from feedwire.adapters.common import Adapter, DataFetcher, PayloadParser
from feedwire.adapters.registry import AdapterRegistry, default_registry
from feedwire.errors import ConfigurationError, InvalidArgument, UnsupportedFormat, UnsupportedProtocol
from feedwire.models import AdapterConfig

log = logging.getLogger("feedwire.adapters.dispatch")


def _require_type(value: Optional[str], field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{field_name} must be a non-empty string")
    return value


def resolve(
    config: Union[AdapterConfig, Mapping[str, Any]],
    registry: Optional[AdapterRegistry] = None,
) -> Adapter:
    if not isinstance(config, AdapterConfig):
        try:
            config = AdapterConfig.model_validate(config)
        except ValidationError as exc:
            raise InvalidArgument.from_validation_error("adapter config", exc) from exc
    if registry is None:
        registry = default_registry()

    protocol_type = _require_type(config.protocol.type, "protocol.type")
    format_type = _require_type(config.format.type, "format.type")

    if not registry.supports_protocol(protocol_type):
        raise UnsupportedProtocol(protocol_type)

    adapter = registry.lookup(
        protocol_type,
        format_type,
        config.protocol.parameters,
        config.format.parameters,
    )
    if adapter is None:
        raise UnsupportedFormat(format_type, protocol_type)

    if adapter.protocol != protocol_type or adapter.format != format_type:
        raise ConfigurationError(
            f"Factory for {protocol_type}/{format_type} produced {adapter.protocol}/{adapter.format}"
        )

    log.debug("Resolved adapter %s/%s", protocol_type, format_type)
    return adapter


def import_data(
    config: Union[AdapterConfig, Mapping[str, Any]],
    *,
    fetcher: DataFetcher,
    parser: PayloadParser,
    registry: Optional[AdapterRegistry] = None,
) -> Any:
    adapter = resolve(config, registry=registry)
    return adapter.import_data(fetcher=fetcher, parser=parser)
