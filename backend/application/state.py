"""
Application State.

Immutable snapshot of everything the presentation layer renders.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple

from domain.project.aggregates import Project
from domain.shared.exceptions import EntityNotFoundException
from domain.team.entities import TeamMember
from domain.workflow.entities import WorkflowStepTemplate


@dataclass(frozen=True)
class AppState:
    """
    Projects, roster and workflow template as last loaded from the store,
    plus the loading flag and the last error message.
    
    The error stays set until a full reload.
    """
    
    projects: Tuple[Project, ...] = ()
    team_members: Tuple[TeamMember, ...] = ()
    workflow_templates: Tuple[WorkflowStepTemplate, ...] = ()
    loading: bool = False
    error: Optional[str] = None
    
    @property
    def has_error(self) -> bool:
        return self.error is not None
    
    def find_project(self, project_id: Any) -> Project:
        for project in self.projects:
            if project.has_id(project_id):
                return project
        raise EntityNotFoundException("Project", project_id)
    
    def with_error(self, message: str) -> AppState:
        return replace(self, error=message)
    
    def without_error(self) -> AppState:
        return replace(self, error=None)
