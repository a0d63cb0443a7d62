"""Core test fixtures — schemas and injectors shared by pure tests."""

import pytest

from faultapi.core.domain_types import IssueCategory
from faultapi.core.fault_injector import FaultInjector
from faultapi.core.resource_schema import ResourceSchema


CHARGE_FIELDS = {
    "amount": {"description": "The amount to be charged.", "type": "number"},
    "currency": {"description": "Three-letter ISO currency code.", "type": "string"},
    "credit_card_id": {"description": "The credit card to be charged.", "type": "integer"},
}


@pytest.fixture
def charge_schema() -> ResourceSchema:
    return ResourceSchema.from_dict(CHARGE_FIELDS)


@pytest.fixture
def strict_injector() -> FaultInjector:
    """Every check enforced, deletion works."""
    return FaultInjector(
        i for i in IssueCategory if i != IssueCategory.BROKEN_RECORD_DELETION
    )


@pytest.fixture
def lax_injector() -> FaultInjector:
    """No check enforced."""
    return FaultInjector()
