"""
Project Domain - Entities.

Entities for project steps.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, Mapping, Optional
from uuid import UUID

from domain.shared.base_entity import Entity, as_date, as_uuid
from domain.shared.value_objects import StepStatus
from domain.team.entities import TeamMember
from domain.workflow.entities import WorkflowStepTemplate


@dataclass(eq=False)
class ProjectStep(Entity):
    """
    One unit of work within a project.
    
    Instantiated from a workflow step template when the project is
    created, then edited independently of the template.
    
    The assignee is a team member's name, not a reference: removing
    the member leaves the name in place.
    """
    
    project_id: Optional[UUID] = None
    name: str = ""
    order: int = 0
    status: StepStatus = StepStatus.PENDING
    assignee: Optional[str] = None
    due_date: Optional[date] = None
    estimated_days: int = 1
    
    @property
    def is_completed(self) -> bool:
        return self.status == StepStatus.COMPLETED
    
    @property
    def is_pending(self) -> bool:
        return self.status == StepStatus.PENDING
    
    # =========================================================================
    # ASSIGNEE RESOLUTION
    # =========================================================================
    
    def resolve_assignee(self, members: Iterable[TeamMember]) -> Optional[TeamMember]:
        """Find the roster member whose name matches the assignee."""
        if not self.assignee:
            return None
        for member in members:
            if member.name == self.assignee:
                return member
        return None
    
    def has_dangling_assignee(self, members: Iterable[TeamMember]) -> bool:
        """Check if the assignee name no longer matches anyone on the roster."""
        return bool(self.assignee) and self.resolve_assignee(members) is None
    
    # =========================================================================
    # MAPPING
    # =========================================================================
    
    @classmethod
    def from_template(cls, template: WorkflowStepTemplate, project_id: UUID) -> ProjectStep:
        """Instantiate a pending step from a template."""
        return cls(
            project_id=project_id,
            name=template.name,
            order=template.order,
            status=StepStatus.PENDING,
            estimated_days=template.estimated_days,
        )
    
    def to_record(self) -> Dict[str, Any]:
        return {
            "project_id": self.project_id,
            "name": self.name,
            "step_order": self.order,
            "status": self.status.value,
            "assignee": self.assignee,
            "due_date": self.due_date,
            "estimated_days": self.estimated_days,
        }
    
    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> ProjectStep:
        return cls(
            id=as_uuid(record["id"]),
            project_id=as_uuid(record["project_id"]),
            name=record["name"],
            order=record["step_order"],
            status=StepStatus.parse(record["status"]),
            assignee=record.get("assignee") or None,
            due_date=as_date(record.get("due_date")),
            estimated_days=record.get("estimated_days") or 1,
        )
