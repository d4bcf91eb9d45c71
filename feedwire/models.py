from __future__ import annotations

from types import MappingProxyType
from typing import Annotated, Any, Dict, Mapping

from pydantic import AfterValidator, Field, PlainSerializer

from schemas.base import ValueObject


def _thaw(parameters: Mapping[str, Any]) -> Dict[str, Any]:
    return dict(parameters)


# Read-only after validation; serialized back to a plain dict.
Parameters = Annotated[
    Mapping[str, Any],
    AfterValidator(MappingProxyType),
    PlainSerializer(_thaw),
]


class ProtocolConfig(ValueObject):
    type: str
    parameters: Parameters = Field(default_factory=dict)


class FormatConfig(ValueObject):
    type: str
    parameters: Parameters = Field(default_factory=dict)


class AdapterConfig(ValueObject):
    protocol: ProtocolConfig
    format: FormatConfig
