"""Resource Store — in-memory keyed records for one resource kind.

Invariants:
    - ids start at 1, increase by one per create, and are never reused
    - Every operation runs under the store lock (id allocation included)
    - update merges fields shallowly: untouched fields survive, `id` is kept
    - With broken_record_deletion enabled, delete reports success and keeps the record
    - Callers only ever see deep copies; stored records (and nested values)
      are never handed out

Design Decisions:
    - Owned state object (one per resource), not module-level globals, so the
      app and each test build their own
    - threading.Lock: sync and async route handlers may share the store
"""

import copy
import logging
import threading

from faultapi.core.domain_types import Payload, Record, RecordId, RECORD_ID_FIELD
from faultapi.core.fault_injector import FaultInjector

logger = logging.getLogger(__name__)


class ResourceStore:
    """Process-lifetime record container with sequential ids."""

    def __init__(self, injector: FaultInjector, name: str = "resource"):
        self.name = name
        self._injector = injector
        self._lock = threading.Lock()
        self._last_id = 0
        self._records: dict[RecordId, Record] = {}

    @property
    def last_id(self) -> int:
        return self._last_id

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _next_id(self) -> RecordId:
        self._last_id += 1
        return RecordId(self._last_id)

    def create(self, payload: Payload) -> tuple[bool, Record]:
        with self._lock:
            record_id = self._next_id()
            record = copy.deepcopy({**payload, RECORD_ID_FIELD: record_id})
            self._records[record_id] = record
            created = copy.deepcopy(record)
        logger.info(
            f"Created {self.name} {record_id}",
            extra={"resource": self.name, "record_id": record_id},
        )
        return True, created

    def read(self, record_id: RecordId) -> tuple[bool, Record | None]:
        with self._lock:
            record = self._records.get(record_id)
            if record is None:
                return False, None
            return True, copy.deepcopy(record)

    def update(self, record_id: RecordId, payload: Payload) -> bool:
        with self._lock:
            record = self._records.get(record_id)
            if record is None:
                return False
            merged = {**record, **copy.deepcopy(payload)}
            merged[RECORD_ID_FIELD] = record[RECORD_ID_FIELD]
            self._records[record_id] = merged
        return True

    def delete(self, record_id: RecordId) -> bool:
        with self._lock:
            if record_id not in self._records:
                return False
            if self._injector.record_deletion_broken():
                logger.warning(
                    f"Issue injected: {self.name} {record_id} kept after delete",
                    extra={"resource": self.name, "record_id": record_id,
                           "issue": "broken_record_deletion"},
                )
                return True
            del self._records[record_id]
        return True
