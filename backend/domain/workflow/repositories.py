"""
Workflow Domain - Repository.
"""

from typing import Sequence
from uuid import UUID

from domain.shared.record_store import EntityKind, RecordStore

from .aggregates import WorkflowTemplate
from .entities import WorkflowStepTemplate
from .updates import TemplateUpdate


class WorkflowTemplateRepository:
    """Repository for the workflow template, backed by a RecordStore."""
    
    kind = EntityKind.WORKFLOW_TEMPLATES
    
    def __init__(self, store: RecordStore):
        self.store = store
    
    def load(self) -> WorkflowTemplate:
        """Load all step templates ordered by step order."""
        records = self.store.select(self.kind, order_by=["step_order"])
        return WorkflowTemplate([WorkflowStepTemplate.from_record(r) for r in records])
    
    def add(self, step: WorkflowStepTemplate) -> WorkflowStepTemplate:
        """Insert a step template and return it with its stored id."""
        record = self.store.insert(self.kind, step.to_record())
        return WorkflowStepTemplate.from_record(record)
    
    def update(self, template_id: UUID, updates: Sequence[TemplateUpdate]) -> None:
        """Write a set of typed updates in a single store call."""
        fields = {}
        for update in updates:
            fields.update(update.fields())
        if fields:
            self.store.update(self.kind, template_id, fields)
    
    def remove(self, template_id: UUID) -> None:
        self.store.delete(self.kind, template_id)
