"""Resource Service — runs Parser → Sanitizer → Validator → Store for one resource.

Invariants:
    - Every write goes through the full pipeline; the injector alone decides
      which failed checks raise
    - A pipeline "no" without an enabled check becomes PayloadRejectedError (422)
    - Malformed and absent ids are both ResourceNotFoundError (404), never injected
    - update validates the payload before looking at the id

Design Decisions:
    - One service per resource definition, each with its own store, all sharing
      the process-wide injector
    - Identifier parsing lives here, not in routes, so the 404 rule has one home
"""

import logging

from faultapi.core.domain_types import Payload, Record, RecordId, ValidationMode
from faultapi.core.errors import (
    PayloadError, PayloadRejectedError, ResourceNotFoundError,
)
from faultapi.core.fault_injector import FaultInjector
from faultapi.core.field_validator import is_valid_payload
from faultapi.core.payload_parser import parse_payload
from faultapi.core.resource_schema import ResourceSchema
from faultapi.core.resource_store import ResourceStore
from faultapi.core.sanitizer import sanitize_payload
from faultapi.schemas.resource import ResourceCatalog, ResourceDefinition

logger = logging.getLogger(__name__)


def parse_record_id(raw_id: str, resource: str = "Record") -> RecordId:
    """Parse a path identifier; anything that is not an integer is not found."""
    try:
        return RecordId(int(raw_id))
    except ValueError:
        pass
    try:
        return RecordId(int(raw_id.strip(), 0))
    except ValueError:
        raise ResourceNotFoundError(resource, str(raw_id)) from None


class ResourceService:
    """CRUD over one resource kind, with fault-injectable validation."""

    def __init__(
        self,
        definition: ResourceDefinition,
        injector: FaultInjector,
        store: ResourceStore | None = None,
    ):
        self.definition = definition
        self.name = definition.name
        self.schema: ResourceSchema = definition.build_schema()
        self.injector = injector
        self.store = (
            store if store is not None
            else ResourceStore(injector, name=definition.name)
        )

    def _accept_payload(self, raw: bytes, mode: ValidationMode) -> Payload:
        try:
            acceptable, payload = parse_payload(raw, self.injector)
            if not acceptable:
                raise PayloadRejectedError("payload could not be decoded")

            sanitized = sanitize_payload(payload, self.schema, self.injector)
            if not is_valid_payload(sanitized, self.schema, self.injector, mode):
                raise PayloadRejectedError(
                    "payload does not satisfy the resource schema",
                )
        except PayloadError as e:
            e.context.resource = self.name
            raise
        return sanitized

    def create(self, raw: bytes) -> Record:
        payload = self._accept_payload(raw, ValidationMode.CREATE)
        _, record = self.store.create(payload)
        return record

    def read(self, raw_id: str) -> Record:
        record_id = parse_record_id(raw_id, self.name)
        found, record = self.store.read(record_id)
        if not found:
            raise ResourceNotFoundError(self.name, str(raw_id))
        return record

    def update(self, raw: bytes, raw_id: str) -> None:
        payload = self._accept_payload(raw, ValidationMode.UPDATE)
        record_id = parse_record_id(raw_id, self.name)
        if not self.store.update(record_id, payload):
            raise ResourceNotFoundError(self.name, str(raw_id))
        logger.info(
            f"Updated {self.name} {record_id}",
            extra={"resource": self.name, "record_id": record_id},
        )

    def delete(self, raw_id: str) -> None:
        record_id = parse_record_id(raw_id, self.name)
        if not self.store.delete(record_id):
            raise ResourceNotFoundError(self.name, str(raw_id))
        logger.info(
            f"Deleted {self.name} {record_id}",
            extra={"resource": self.name, "record_id": record_id},
        )


def build_services(
    catalog: ResourceCatalog, injector: FaultInjector,
) -> dict[str, ResourceService]:
    """One service per catalog entry, keyed by resource name."""
    return {
        definition.name: ResourceService(definition, injector)
        for definition in catalog.resources
    }
