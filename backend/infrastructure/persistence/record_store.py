"""
Django ORM Record Store.

RecordStore backend over the persistence models. Writes made inside
atomic() share one database transaction.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence
from uuid import UUID

from django.core.exceptions import FieldError, ValidationError
from django.db import DatabaseError, transaction
from django.utils import timezone

from domain.shared.exceptions import EntityNotFoundException, RecordStoreError
from domain.shared.record_store import EntityKind, Record, RecordStore

from .models import Project, ProjectStep, TeamMember, WorkflowTemplate

logger = logging.getLogger(__name__)


MODELS = {
    EntityKind.PROJECTS: Project,
    EntityKind.PROJECT_STEPS: ProjectStep,
    EntityKind.TEAM_MEMBERS: TeamMember,
    EntityKind.WORKFLOW_TEMPLATES: WorkflowTemplate,
}

STORE_ERRORS = (DatabaseError, FieldError, ValidationError)


def _to_record(instance) -> Record:
    """Column values of a model instance, foreign keys as <name>_id."""
    return {
        field.attname: getattr(instance, field.attname)
        for field in instance._meta.concrete_fields
    }


def _check_columns(kind: EntityKind, operation: str, names: Iterable[str]) -> None:
    """Reject column names the table does not have."""
    fields = MODELS[kind]._meta.concrete_fields
    columns = {field.attname for field in fields} | {field.name for field in fields}
    unknown = sorted({name.lstrip("-").split("__")[0] for name in names} - columns)
    if unknown:
        raise RecordStoreError(
            f"Unknown column(s) for {kind.value}: {', '.join(unknown)}",
            kind.value,
            operation
        )


def _error_message(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        return "; ".join(exc.messages)
    return str(exc) or exc.__class__.__name__


@contextmanager
def _store_errors(kind: EntityKind, operation: str) -> Iterator[None]:
    """Translate ORM and database failures into RecordStoreError."""
    try:
        yield
    except STORE_ERRORS as exc:
        logger.warning("Record store %s on %s failed: %s", operation, kind.value, exc)
        raise RecordStoreError(_error_message(exc), kind.value, operation) from exc


class DjangoRecordStore(RecordStore):
    """RecordStore backed by the Django ORM."""
    
    supports_transactions = True
    
    def select(
        self,
        kind: EntityKind,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Optional[Sequence[str]] = None
    ) -> List[Record]:
        _check_columns(kind, "select", [*(filters or {}), *(order_by or [])])
        with _store_errors(kind, "select"):
            queryset = MODELS[kind].objects.filter(**(filters or {}))
            if order_by:
                queryset = queryset.order_by(*order_by)
            return [dict(row) for row in queryset.values()]
    
    def insert(self, kind: EntityKind, record: Mapping[str, Any]) -> Record:
        _check_columns(kind, "insert", record)
        with _store_errors(kind, "insert"):
            instance = MODELS[kind].objects.create(**record)
            return _to_record(instance)
    
    def insert_many(self, kind: EntityKind, records: Sequence[Mapping[str, Any]]) -> List[Record]:
        if not records:
            return []
        model = MODELS[kind]
        for record in records:
            _check_columns(kind, "insert_many", record)
        with _store_errors(kind, "insert_many"):
            instances = model.objects.bulk_create([model(**record) for record in records])
            return [_to_record(instance) for instance in instances]
    
    def update(self, kind: EntityKind, record_id: UUID, fields: Mapping[str, Any]) -> None:
        _check_columns(kind, "update", fields)
        with _store_errors(kind, "update"):
            values: Dict[str, Any] = dict(fields)
            values['updated_at'] = timezone.now()
            count = MODELS[kind].objects.filter(pk=record_id).update(**values)
        if not count:
            raise EntityNotFoundException(MODELS[kind].__name__, record_id)
    
    def delete(self, kind: EntityKind, record_id: UUID) -> None:
        with _store_errors(kind, "delete"):
            deleted, _ = MODELS[kind].objects.filter(pk=record_id).delete()
        if not deleted:
            raise EntityNotFoundException(MODELS[kind].__name__, record_id)
    
    @contextmanager
    def atomic(self) -> Iterator[None]:
        with transaction.atomic():
            yield
