"""Resource Schema — immutable, ordered field declarations for one resource kind.

Invariants:
    - Field names are unique and keep declaration order
    - Every descriptor carries its type check, resolved when the schema is built
    - The schema never declares the store-owned `id` field
    - Schemas are read-only Mappings: name -> FieldDescriptor

Design Decisions:
    - Mapping subclass so len(schema), `name in schema` and iteration read the
      same as on a plain dict (sanitizer and injector only need Sized + lookup)
    - Built from plain dicts ({"description", "type"}) so configuration stays data
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from faultapi.core.domain_types import FieldType, RECORD_ID_FIELD
from faultapi.core.errors import SchemaDefinitionError
from faultapi.core.field_types import FieldCheck, check_for


@dataclass(frozen=True)
class FieldDescriptor:
    """One declared field: its type and the check that enforces it."""
    name: str
    type: FieldType
    description: str = ""
    check: FieldCheck = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "check", check_for(self.type))


class ResourceSchema(Mapping[str, FieldDescriptor]):
    """Ordered, immutable field schema."""

    def __init__(self, fields: Iterable[FieldDescriptor]):
        declared: dict[str, FieldDescriptor] = {}
        for descriptor in fields:
            if descriptor.name in declared:
                raise SchemaDefinitionError(f"duplicate field '{descriptor.name}'")
            if descriptor.name == RECORD_ID_FIELD:
                raise SchemaDefinitionError(
                    f"'{RECORD_ID_FIELD}' is assigned by the store and cannot be declared",
                )
            declared[descriptor.name] = descriptor
        self._fields = declared

    @classmethod
    def from_dict(cls, raw: Mapping[str, Mapping[str, Any]]) -> "ResourceSchema":
        """Build from {name: {"description": str, "type": str}}."""
        descriptors = []
        for name, spec in raw.items():
            type_name = spec.get("type")
            try:
                field_type = FieldType(type_name)
            except ValueError:
                raise SchemaDefinitionError(
                    f"field '{name}' has unsupported type {type_name!r}",
                ) from None
            descriptors.append(FieldDescriptor(
                name=name,
                type=field_type,
                description=spec.get("description", ""),
            ))
        return cls(descriptors)

    def __getitem__(self, name: str) -> FieldDescriptor:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        fields = ", ".join(f"{d.name}: {d.type.value}" for d in self._fields.values())
        return f"ResourceSchema({fields})"

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {
            d.name: {"description": d.description, "type": d.type.value}
            for d in self._fields.values()
        }
