"""Resource Schema — tests for compiled, immutable field schemas.

Tests cover:
    - from_dict keeps declaration order and resolves each field's check
    - Unsupported types, duplicate names and the reserved id field are rejected
    - Mapping behavior (len, membership, lookup) and round-trip to plain dict
"""

import pytest

from faultapi.core.domain_types import FieldType
from faultapi.core.errors import SchemaDefinitionError
from faultapi.core.field_types import accepts_number
from faultapi.core.resource_schema import FieldDescriptor, ResourceSchema


def test_from_dict_keeps_order(charge_schema):
    assert list(charge_schema) == ["amount", "currency", "credit_card_id"]


def test_descriptor_check_resolved_from_type(charge_schema):
    amount = charge_schema["amount"]
    assert amount.type == FieldType.NUMBER
    assert amount.check is accepts_number
    assert amount.description == "The amount to be charged."


def test_mapping_protocol(charge_schema):
    assert len(charge_schema) == 3
    assert "currency" in charge_schema
    assert "id" not in charge_schema
    assert charge_schema.get("missing") is None


def test_to_dict_renders_plain_fields(charge_schema):
    assert charge_schema.to_dict()["credit_card_id"] == {
        "description": "The credit card to be charged.", "type": "integer",
    }


def test_unsupported_type_rejected():
    with pytest.raises(SchemaDefinitionError) as exc_info:
        ResourceSchema.from_dict({"when": {"type": "date-time"}})
    assert exc_info.value.code == "SCHEMA_DEFINITION_ERROR"


def test_missing_type_rejected():
    with pytest.raises(SchemaDefinitionError):
        ResourceSchema.from_dict({"name": {"description": "no type"}})


def test_duplicate_names_rejected():
    with pytest.raises(SchemaDefinitionError):
        ResourceSchema([
            FieldDescriptor("a", FieldType.STRING),
            FieldDescriptor("a", FieldType.INTEGER),
        ])


def test_reserved_id_rejected():
    with pytest.raises(SchemaDefinitionError):
        ResourceSchema.from_dict({"id": {"type": "integer"}})


def test_schema_is_read_only(charge_schema):
    with pytest.raises(TypeError):
        charge_schema["amount"] = FieldDescriptor("amount", FieldType.STRING)


def test_descriptor_is_frozen():
    descriptor = FieldDescriptor("a", FieldType.STRING)
    with pytest.raises(AttributeError):
        descriptor.type = FieldType.INTEGER
