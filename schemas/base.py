from __future__ import annotations

from typing import Any, ClassVar, FrozenSet, Mapping, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _hashable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return frozenset((k, _hashable(v)) for k, v in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_hashable(v) for v in value)
    return value


class SchemaBase(BaseModel):
    """Base for all wire-facing models.

    Python attributes are snake_case; the wire form (YAML/JSON) is camelCase.
    Either spelling is accepted on input.
    """

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class ValueObject(SchemaBase):
    """Immutable model with structural equality.

    Fields named in `identity_fields` are assigned by storage and take no part
    in equality or hashing. Mapping and list fields are hashed by content.
    """

    model_config = ConfigDict(frozen=True)

    identity_fields: ClassVar[FrozenSet[str]] = frozenset()

    def _structural_key(self) -> Tuple[Tuple[str, Any], ...]:
        return tuple(
            (name, getattr(self, name))
            for name in type(self).model_fields
            if name not in self.identity_fields
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueObject):
            return NotImplemented
        return type(self) is type(other) and self._structural_key() == other._structural_key()

    def __hash__(self) -> int:
        return hash((type(self), _hashable(self._structural_key())))
