"""
Workflow Template Manager.

Maintains the ordered list of step definitions used to instantiate
new projects' steps.
"""

import logging
from dataclasses import replace
from uuid import UUID

from domain.shared.record_store import RecordStore
from domain.workflow.aggregates import WorkflowTemplate, normalize_step_name
from domain.workflow.repositories import WorkflowTemplateRepository
from domain.workflow.updates import TemplateUpdate

from ..errors import surfaces_errors
from ..state import AppState

logger = logging.getLogger(__name__)


class WorkflowTemplateManager:
    """Add, update and remove workflow step templates."""
    
    def __init__(self, store: RecordStore):
        self.repository = WorkflowTemplateRepository(store)
    
    def reload(self, state: AppState) -> AppState:
        template = self.repository.load()
        return replace(state, workflow_templates=tuple(template.steps))
    
    @surfaces_errors("Failed to add workflow step")
    def add_step(self, state: AppState, name: str, estimated_days: int = 1) -> AppState:
        """
        Append a step after the current highest order.
        
        A blank name is a no-op.
        """
        if normalize_step_name(name) is None:
            return state
        
        template = WorkflowTemplate(list(state.workflow_templates))
        step = self.repository.add(template.new_step(name, estimated_days))
        logger.info("Workflow step '%s' added at order %s", step.name, step.order)
        return self.reload(state)
    
    @surfaces_errors("Failed to update workflow step")
    def update_step(self, state: AppState, template_id: UUID, *updates: TemplateUpdate) -> AppState:
        """Patch name, order or estimate. Existing projects are not touched."""
        if not updates:
            return state
        self.repository.update(template_id, updates)
        logger.info("Workflow step %s updated: %s", template_id, [type(u).__name__ for u in updates])
        return self.reload(state)
    
    @surfaces_errors("Failed to remove workflow step")
    def remove_step(self, state: AppState, template_id: UUID) -> AppState:
        """Delete a step template. Remaining orders are not renumbered."""
        self.repository.remove(template_id)
        logger.info("Workflow step %s removed", template_id)
        return self.reload(state)
