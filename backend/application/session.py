"""
Tracker Session.

The facade the presentation layer talks to: a read-only snapshot of
the application state plus every mutation operation. Each operation
replaces the snapshot with the state returned by its manager.
"""

from __future__ import annotations
import logging
from dataclasses import replace
from typing import List, Optional
from uuid import UUID

from domain.project.aggregates import Project
from domain.project.services import filter_projects
from domain.project.updates import StepUpdate
from domain.shared.exceptions import DomainException
from domain.shared.record_store import RecordStore
from domain.shared.value_objects import STATUS_FILTER_ALL
from domain.workflow.updates import TemplateUpdate

from .services import (
    ProjectInput,
    ProjectLifecycleManager,
    TeamRosterManager,
    WorkflowTemplateManager,
)
from .state import AppState

logger = logging.getLogger(__name__)


class TrackerSession:
    """Application state plus the operations that change it."""
    
    def __init__(self, store: RecordStore):
        self.store = store
        self.projects = ProjectLifecycleManager(store)
        self.team = TeamRosterManager(store)
        self.workflow = WorkflowTemplateManager(store)
        self._state = AppState(loading=True)
    
    @classmethod
    def open(cls, store: RecordStore) -> TrackerSession:
        """Create a session and load the initial data."""
        session = cls(store)
        session.load_initial_data()
        return session
    
    @property
    def snapshot(self) -> AppState:
        return self._state
    
    # =========================================================================
    # LOADING
    # =========================================================================
    
    def load_initial_data(self) -> AppState:
        """Load projects, team members and workflow template in full."""
        state = replace(self._state, loading=True)
        try:
            state = self.projects.reload(state)
            state = self.team.reload(state)
            state = self.workflow.reload(state)
        except DomainException as exc:
            logger.exception("Initial data load failed")
            state = state.with_error(f"Failed to load data: {exc.message}")
        self._state = replace(state, loading=False)
        return self._state
    
    def reload(self) -> AppState:
        """Recover from any error by reloading everything."""
        self._state = self._state.without_error()
        return self.load_initial_data()
    
    # =========================================================================
    # PROJECTS
    # =========================================================================
    
    def create_project(self, data: ProjectInput) -> AppState:
        self._state = self.projects.create_project(self._state, data)
        return self._state
    
    def update_step(self, project_id: UUID, step_id: UUID, *updates: StepUpdate) -> AppState:
        self._state = self.projects.update_step(self._state, project_id, step_id, *updates)
        return self._state
    
    def toggle_step(self, project_id: UUID, step_id: UUID) -> AppState:
        self._state = self.projects.toggle_step(self._state, project_id, step_id)
        return self._state
    
    def delete_project(self, project_id: UUID) -> AppState:
        self._state = self.projects.delete_project(self._state, project_id)
        return self._state
    
    def filtered_projects(
        self,
        search_term: Optional[str] = "",
        status_filter: Optional[str] = STATUS_FILTER_ALL
    ) -> List[Project]:
        return filter_projects(self._state.projects, search_term, status_filter)
    
    # =========================================================================
    # TEAM
    # =========================================================================
    
    def add_member(self, name: str) -> AppState:
        self._state = self.team.add_member(self._state, name)
        return self._state
    
    def remove_member(self, member_id: UUID) -> AppState:
        self._state = self.team.remove_member(self._state, member_id)
        return self._state
    
    # =========================================================================
    # WORKFLOW TEMPLATE
    # =========================================================================
    
    def add_workflow_step(self, name: str, estimated_days: int = 1) -> AppState:
        self._state = self.workflow.add_step(self._state, name, estimated_days)
        return self._state
    
    def update_workflow_step(self, template_id: UUID, *updates: TemplateUpdate) -> AppState:
        self._state = self.workflow.update_step(self._state, template_id, *updates)
        return self._state
    
    def remove_workflow_step(self, template_id: UUID) -> AppState:
        self._state = self.workflow.remove_step(self._state, template_id)
        return self._state
