"""Resource Definition Schemas — Pydantic models for resource definition files.

Invariants:
    - FieldSpec.type is one of the FieldType values (integer, string, number, boolean)
    - ResourceDefinition.path starts with "/" and has no trailing slash
    - ResourceDefinition.fields is non-empty and never declares "id"
    - ResourceCatalog resource names and paths are unique

Design Decisions:
    - Pydantic at the file boundary; core.ResourceSchema is built only from a
      validated definition, so core never sees malformed configuration
    - DEFAULT_CATALOG mirrors the charges API the emulator ships with
"""

import json
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from faultapi.core.domain_types import FieldType, RECORD_ID_FIELD
from faultapi.core.resource_schema import ResourceSchema


class FieldSpec(BaseModel):
    """One field declaration: {"description": ..., "type": ...}."""
    description: str = ""
    type: FieldType


class ResourceDefinition(BaseModel):
    """A resource kind: where it is served and which fields it carries."""
    name: str = Field(min_length=1, max_length=100)
    path: str = Field(pattern=r"^/[A-Za-z0-9_\-/]*$")
    id_param: str = Field("record_id", pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")
    fields: dict[str, FieldSpec]

    @field_validator("path")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        v = v.rstrip("/")
        if not v:
            raise ValueError("path cannot be the root")
        return v

    @field_validator("fields")
    @classmethod
    def check_fields(cls, v: dict[str, FieldSpec]) -> dict[str, FieldSpec]:
        if not v:
            raise ValueError("fields cannot be empty")
        if RECORD_ID_FIELD in v:
            raise ValueError(f"'{RECORD_ID_FIELD}' is assigned by the store")
        return v

    def build_schema(self) -> ResourceSchema:
        return ResourceSchema.from_dict({
            name: spec.model_dump(mode="json") for name, spec in self.fields.items()
        })


class ResourceCatalog(BaseModel):
    """Top-level shape of a resource definition file."""
    resources: list[ResourceDefinition] = Field(min_length=1)

    @model_validator(mode="after")
    def check_unique(self) -> "ResourceCatalog":
        names = [r.name for r in self.resources]
        if len(set(names)) != len(names):
            raise ValueError("resource names must be unique")
        paths = [r.path for r in self.resources]
        if len(set(paths)) != len(paths):
            raise ValueError("resource paths must be unique")
        return self


DEFAULT_CATALOG = ResourceCatalog(resources=[
    ResourceDefinition(
        name="charge",
        path="/charges",
        id_param="charge_id",
        fields={
            "amount": FieldSpec(
                description="The amount to be charged.", type=FieldType.NUMBER,
            ),
            "currency": FieldSpec(
                description="Three-letter ISO currency code.", type=FieldType.STRING,
            ),
            "credit_card_id": FieldSpec(
                description="The credit card to be charged.", type=FieldType.INTEGER,
            ),
        },
    ),
])


def load_catalog(path: str | Path | None) -> ResourceCatalog:
    """Load a catalog from a JSON file, or the built-in one when path is None."""
    if path is None:
        return DEFAULT_CATALOG
    text = Path(path).read_text(encoding="utf-8")
    return ResourceCatalog.model_validate(json.loads(text))
