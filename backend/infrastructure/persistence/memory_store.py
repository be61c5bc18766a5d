"""
In-memory Record Store.

Process-local fallback used for local development without a database
and in tests. Emulates the database's column defaults, NOT NULL
columns, the project foreign key of steps and the project->steps
cascade. It has no transactions: atomic() does not roll back.
"""

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence
from uuid import UUID, uuid4

from domain.shared.exceptions import EntityNotFoundException, RecordStoreError
from domain.shared.record_store import EntityKind, Record, RecordStore

logger = logging.getLogger(__name__)


# Column defaults per table; keys are the full column set
COLUMNS: Dict[EntityKind, Dict[str, Any]] = {
    EntityKind.PROJECTS: {
        "name": None, "client": None, "start_date": None, "end_date": None,
        "priority": "medium", "description": "",
    },
    EntityKind.PROJECT_STEPS: {
        "project_id": None, "name": None, "step_order": 0, "status": "pending",
        "assignee": None, "due_date": None, "estimated_days": 1,
    },
    EntityKind.TEAM_MEMBERS: {
        "name": None,
    },
    EntityKind.WORKFLOW_TEMPLATES: {
        "name": None, "step_order": 0, "estimated_days": 1,
    },
}

NOT_NULL: Dict[EntityKind, tuple] = {
    EntityKind.PROJECTS: ("name", "client", "start_date", "end_date", "priority"),
    EntityKind.PROJECT_STEPS: ("project_id", "name", "status"),
    EntityKind.TEAM_MEMBERS: ("name",),
    EntityKind.WORKFLOW_TEMPLATES: ("name",),
}


def _key(value: Any) -> str:
    return str(value)


def _sort_key(column: str):
    def key(record: Record):
        value = record.get(column)
        return (value is None, value if value is not None else 0)
    return key


class InMemoryRecordStore(RecordStore):
    """RecordStore keeping every table in a dict, in insertion order."""
    
    supports_transactions = False
    
    def __init__(self):
        self._tables: Dict[EntityKind, Dict[str, Record]] = {kind: {} for kind in EntityKind}
        self._lock = threading.RLock()
        self._last_created: Optional[datetime] = None
    
    # =========================================================================
    # READS
    # =========================================================================
    
    def select(
        self,
        kind: EntityKind,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Optional[Sequence[str]] = None
    ) -> List[Record]:
        with self._lock:
            for column in list(filters or {}) + [c.lstrip("-") for c in order_by or []]:
                self._check_column(kind, column, "select")
            
            rows = [
                dict(record) for record in self._tables[kind].values()
                if all(_key(record.get(col)) == _key(val) for col, val in (filters or {}).items())
            ]
        
        # Stable sorts applied from the last key to the first
        for column in reversed(list(order_by or [])):
            descending = column.startswith("-")
            rows.sort(key=_sort_key(column.lstrip("-")), reverse=descending)
        return rows
    
    # =========================================================================
    # WRITES
    # =========================================================================
    
    def insert(self, kind: EntityKind, record: Mapping[str, Any]) -> Record:
        with self._lock:
            row = self._build_row(kind, record)
            self._tables[kind][_key(row["id"])] = row
            return dict(row)
    
    def insert_many(self, kind: EntityKind, records: Sequence[Mapping[str, Any]]) -> List[Record]:
        with self._lock:
            # Validate everything first so a bad record inserts nothing
            rows = [self._build_row(kind, record) for record in records]
            for row in rows:
                self._tables[kind][_key(row["id"])] = row
            return [dict(row) for row in rows]
    
    def update(self, kind: EntityKind, record_id: UUID, fields: Mapping[str, Any]) -> None:
        with self._lock:
            row = self._tables[kind].get(_key(record_id))
            if row is None:
                raise EntityNotFoundException(kind.value, record_id)
            for column, value in fields.items():
                self._check_column(kind, column, "update")
                if value is None and column in NOT_NULL[kind]:
                    raise RecordStoreError(
                        f'null value in column "{column}" violates not-null constraint',
                        kind.value,
                        "update"
                    )
            row.update(fields)
            row["updated_at"] = self._now()
    
    def delete(self, kind: EntityKind, record_id: UUID) -> None:
        with self._lock:
            if self._tables[kind].pop(_key(record_id), None) is None:
                raise EntityNotFoundException(kind.value, record_id)
            if kind == EntityKind.PROJECTS:
                steps = self._tables[EntityKind.PROJECT_STEPS]
                orphaned = [k for k, v in steps.items() if _key(v["project_id"]) == _key(record_id)]
                for step_key in orphaned:
                    del steps[step_key]
                logger.debug("Cascade-deleted %d steps of project %s", len(orphaned), record_id)
    
    # =========================================================================
    # HELPERS
    # =========================================================================
    
    def _check_column(self, kind: EntityKind, column: str, operation: str) -> None:
        if column not in COLUMNS[kind] and column not in ("id", "created_at", "updated_at"):
            raise RecordStoreError(
                f'column "{column}" of relation "{kind.value}" does not exist',
                kind.value,
                operation
            )
    
    def _build_row(self, kind: EntityKind, record: Mapping[str, Any]) -> Record:
        for column in record:
            self._check_column(kind, column, "insert")
        
        now = self._now()
        row = {"id": uuid4(), **COLUMNS[kind], "created_at": now, "updated_at": now}
        row.update(record)
        
        for column in NOT_NULL[kind]:
            if row.get(column) is None:
                raise RecordStoreError(
                    f'null value in column "{column}" violates not-null constraint',
                    kind.value,
                    "insert"
                )
        
        if kind == EntityKind.PROJECT_STEPS:
            if _key(row["project_id"]) not in self._tables[EntityKind.PROJECTS]:
                raise RecordStoreError(
                    'insert on table "project_steps" violates foreign key constraint',
                    kind.value,
                    "insert"
                )
        return row
    
    def _now(self) -> datetime:
        """Strictly increasing timestamps so created_at ordering is deterministic."""
        now = datetime.now(timezone.utc)
        if self._last_created is not None and now <= self._last_created:
            now = self._last_created + timedelta(microseconds=1)
        self._last_created = now
        return now
