"""Closed catalog of the protocols and formats feedwire knows how to handle.

Each capability declares its free-form parameters as a pydantic model. The
models never take part in adapter selection; they are only consulted when an
adapter is executed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Tuple, Type

from pydantic import ConfigDict, Field, StrictBool, StrictStr, ValidationError
from pydantic.alias_generators import to_camel

from feedwire.errors import InvalidArgument
from schemas.base import SchemaBase


class ParametersBase(SchemaBase):
    model_config = ConfigDict(frozen=True)


class HttpParameters(ParametersBase):
    location: StrictStr = Field(description="String of the URI for the HTTP call")
    encoding: Literal["ISO-8859-1", "US-ASCII", "UTF-8"] = Field(
        "UTF-8",
        description="Encoding of the source. Available encodings: ISO-8859-1, US-ASCII, UTF-8",
    )


class JsonParameters(ParametersBase):
    pass


class XmlParameters(ParametersBase):
    pass


class CsvParameters(ParametersBase):
    column_separator: StrictStr = Field(
        ",",
        min_length=1,
        max_length=1,
        description="Column delimiter character, only one character supported",
    )
    line_separator: Literal["\r", "\r\n", "\n"] = Field(
        "\n",
        description="Line delimiter character, only \\r, \\r\\n, and \\n supported",
    )
    skip_first_data_row: StrictBool = Field(False, description="Skip first data row (after header)")
    first_row_as_header: StrictBool = Field(True, description="Interpret first row as header for columns")


@dataclass(frozen=True)
class Capability:
    type: str
    parameters: Type[ParametersBase]

    def describe(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "parameters": {
                field.alias or to_camel(name): field.description or ""
                for name, field in self.parameters.model_fields.items()
            },
        }

    def parse_parameters(self, parameters: Mapping[str, Any]) -> ParametersBase:
        try:
            return self.parameters.model_validate(dict(parameters))
        except ValidationError as exc:
            raise InvalidArgument.from_validation_error(f"{self.type} parameters", exc) from exc


HTTP = Capability("HTTP", HttpParameters)

JSON = Capability("JSON", JsonParameters)
XML = Capability("XML", XmlParameters)
CSV = Capability("CSV", CsvParameters)

PROTOCOLS: Tuple[Capability, ...] = (HTTP,)
FORMATS: Tuple[Capability, ...] = (JSON, XML, CSV)


def list_protocols() -> list[dict[str, Any]]:
    return [p.describe() for p in PROTOCOLS]


def list_formats() -> list[dict[str, Any]]:
    return [f.describe() for f in FORMATS]
