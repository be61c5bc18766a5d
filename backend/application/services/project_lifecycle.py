"""
Project Lifecycle Manager.

Creates projects from the current workflow template, applies step
updates (with completion auto-advance) and deletes projects.
"""

import copy
import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import List, Optional, Union
from uuid import UUID

from domain.project.aggregates import Project
from domain.project.repositories import ProjectRepository
from domain.project.updates import StepUpdate, StepWrite
from domain.shared.exceptions import DomainException
from domain.shared.record_store import RecordStore
from domain.workflow.aggregates import WorkflowTemplate

from ..errors import surfaces_errors
from ..events import dispatch_events
from ..state import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectInput:
    """User input for a new project."""
    
    name: str
    client: str
    start_date: Union[date, str, None]
    end_date: Union[date, str, None]
    priority: Optional[str] = "medium"
    description: Optional[str] = ""


class ProjectLifecycleManager:
    """Create, update and delete projects and their steps."""
    
    def __init__(self, store: RecordStore):
        self.store = store
        self.repository = ProjectRepository(store)
    
    def reload(self, state: AppState) -> AppState:
        return replace(state, projects=tuple(self.repository.list_all()))
    
    # =========================================================================
    # CREATE
    # =========================================================================
    
    @surfaces_errors("Failed to create project")
    def create_project(self, state: AppState, data: ProjectInput) -> AppState:
        """
        Insert the project, then its steps copied from the workflow template
        as loaded in the given state.
        
        Both inserts run in one store transaction. On a store without
        transactions, a failed step insert deletes the project again.
        """
        project = Project.create(
            name=data.name,
            client=data.client,
            start_date=data.start_date,
            end_date=data.end_date,
            priority=data.priority,
            description=data.description,
        )
        template = WorkflowTemplate(list(state.workflow_templates))
        
        with self.store.atomic():
            created = self.repository.add(project)
            steps = created.instantiate_steps(template.snapshot())
            try:
                self.repository.add_steps(steps)
            except DomainException:
                if not self.store.supports_transactions:
                    self._discard(created)
                raise
        
        created.record_creation()
        dispatch_events(created)
        return self.reload(state)
    
    def _discard(self, project: Project) -> None:
        logger.warning("Step insert failed, deleting project %s", project.id)
        try:
            self.repository.delete(project.id)
        except DomainException:
            logger.exception("Could not delete orphaned project %s", project.id)
    
    # =========================================================================
    # STEPS
    # =========================================================================
    
    @surfaces_errors("Failed to update step")
    def update_step(self, state: AppState, project_id: UUID, step_id: UUID, *updates: StepUpdate) -> AppState:
        """
        Apply typed updates to one step, then reload all projects.
        
        Completing a step also moves the next step from pending to
        in-progress, judged on the step order as currently loaded.
        """
        return self._update_step(state, project_id, step_id, list(updates))
    
    @surfaces_errors("Failed to update step")
    def toggle_step(self, state: AppState, project_id: UUID, step_id: UUID) -> AppState:
        """Mark a completed step pending again, any other step completed."""
        project = state.find_project(project_id)
        return self._update_step(state, project_id, step_id, [project.toggle_update(step_id)])
    
    def _update_step(self, state: AppState, project_id: UUID, step_id: UUID, updates: List[StepUpdate]) -> AppState:
        if not updates:
            return state
        
        # Work on a copy so the caller's state is left untouched
        project = copy.deepcopy(state.find_project(project_id))
        
        writes: List[StepWrite] = []
        for update in updates:
            writes.extend(project.apply_step_update(step_id, update))
        
        self.repository.write_steps(writes)
        dispatch_events(project)
        return self.reload(state)
    
    # =========================================================================
    # DELETE
    # =========================================================================
    
    @surfaces_errors("Failed to delete project")
    def delete_project(self, state: AppState, project_id: UUID) -> AppState:
        """Delete a project; its steps go with it."""
        self.repository.delete(project_id)
        logger.info("Project %s deleted", project_id)
        return self.reload(state)
