from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from feedwire.adapters import Adapter, AdapterRegistry, resolve
from feedwire.errors import InvalidArgument
from feedwire.models import AdapterConfig
from feedwire.notifications import NotificationConfig


def load_yaml_file(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise InvalidArgument(f"Malformed YAML in {p}: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidArgument(f"YAML root must be a mapping: {p}")
    return data


def load_adapter_config(path: str | Path) -> AdapterConfig:
    data = load_yaml_file(path)
    try:
        return AdapterConfig.model_validate(data)
    except ValidationError as exc:
        raise InvalidArgument.from_validation_error("adapter config", exc) from exc


def load_notification_config(path: str | Path) -> NotificationConfig:
    data = load_yaml_file(path)
    try:
        return NotificationConfig.model_validate(data)
    except ValidationError as exc:
        raise InvalidArgument.from_validation_error("notification config", exc) from exc


def validate_adapter_config(config: AdapterConfig, registry: Optional[AdapterRegistry] = None) -> Adapter:
    """Resolve `config` and check its parameters against the catalog.

    Returns the resolved adapter with defaults filled in.
    """
    return resolve(config, registry=registry).with_defaults()
