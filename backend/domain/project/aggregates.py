"""
Project Domain - Aggregates.

Project is the aggregate root owning its ordered steps.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from domain.shared.base_aggregate import AggregateRoot
from domain.shared.base_entity import as_date, as_uuid
from domain.shared.events import (
    ProjectCreated,
    StepAssigned,
    StepAutoAdvanced,
    StepStatusChanged,
)
from domain.shared.exceptions import EntityNotFoundException, ValidationException
from domain.shared.value_objects import Priority, Progress, ProjectStatus, StepStatus
from domain.workflow.entities import WorkflowStepTemplate

from .entities import ProjectStep
from .updates import AssignStep, SetStepStatus, StepUpdate, StepWrite


REQUIRED_FIELDS = ("name", "client", "start_date", "end_date")


@dataclass(eq=False)
class Project(AggregateRoot):
    """
    Project - the aggregate root for a piece of video-production work.
    
    A project owns the steps snapshotted from the workflow template at
    creation time. Its progress and status are never stored; they are
    derived from the steps every time they are read.
    
    Key responsibilities:
    - Instantiate steps from a template snapshot
    - Derive progress and status
    - Apply step updates, promoting the next pending step on completion
    """
    
    name: str = ""
    client: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    priority: Priority = Priority.MEDIUM
    description: str = ""
    
    _steps: List[ProjectStep] = field(default_factory=list, repr=False)
    
    # =========================================================================
    # PROPERTIES
    # =========================================================================
    
    @property
    def steps(self) -> List[ProjectStep]:
        """Steps in workflow order."""
        return sorted(self._steps, key=lambda step: step.order)
    
    @property
    def completed_steps_count(self) -> int:
        return len([step for step in self._steps if step.is_completed])
    
    @property
    def progress(self) -> Progress:
        """Percentage of completed steps; 0 when there are no steps."""
        return Progress.from_counts(self.completed_steps_count, len(self._steps))
    
    @property
    def status(self) -> ProjectStatus:
        return ProjectStatus.from_progress(self.progress)
    
    # =========================================================================
    # STEP LOOKUP
    # =========================================================================
    
    def get_step(self, step_id: Any) -> ProjectStep:
        for step in self._steps:
            if step.has_id(step_id):
                return step
        raise EntityNotFoundException("ProjectStep", step_id)
    
    def step_after(self, step_id: Any) -> Optional[ProjectStep]:
        """The step immediately following the given one, if any."""
        ordered = self.steps
        for index, step in enumerate(ordered):
            if step.has_id(step_id):
                if index + 1 < len(ordered):
                    return ordered[index + 1]
                return None
        raise EntityNotFoundException("ProjectStep", step_id)
    
    # =========================================================================
    # STEP MANAGEMENT
    # =========================================================================
    
    def instantiate_steps(self, templates: Iterable[WorkflowStepTemplate]) -> List[ProjectStep]:
        """Replace the steps with pending copies of the given templates."""
        self._steps = [ProjectStep.from_template(t, self.id) for t in templates]
        return self.steps
    
    def apply_step_update(self, step_id: Any, update: StepUpdate) -> List[StepWrite]:
        """
        Apply an update to one step and return the writes to persist.
        
        Setting a step to completed also promotes the step right after it
        to in-progress, but only when that step is pending. The promotion
        does not cascade any further.
        """
        step = self.get_step(step_id)
        old_status = step.status
        
        update.apply(step)
        writes = [StepWrite(step.id, update)]
        
        if isinstance(update, SetStepStatus):
            if old_status != update.status:
                self.add_domain_event(StepStatusChanged(
                    project_id=self.id,
                    step_id=step.id,
                    old_status=old_status.value,
                    new_status=update.status.value
                ))
            if update.status.advances_workflow:
                writes.extend(self._advance_after(step))
        elif isinstance(update, AssignStep):
            self.add_domain_event(StepAssigned(
                project_id=self.id,
                step_id=step.id,
                assignee=update.assignee
            ))
        
        return writes
    
    def _advance_after(self, step: ProjectStep) -> List[StepWrite]:
        next_step = self.step_after(step.id)
        if next_step is None or not next_step.is_pending:
            return []
        
        promotion = SetStepStatus(StepStatus.IN_PROGRESS)
        promotion.apply(next_step)
        self.add_domain_event(StepAutoAdvanced(
            project_id=self.id,
            step_id=next_step.id,
            completed_step_id=step.id
        ))
        return [StepWrite(next_step.id, promotion)]
    
    def toggle_update(self, step_id: Any) -> SetStepStatus:
        """Update that flips a step between completed and pending."""
        step = self.get_step(step_id)
        if step.is_completed:
            return SetStepStatus(StepStatus.PENDING)
        return SetStepStatus(StepStatus.COMPLETED)
    
    # =========================================================================
    # SEARCH
    # =========================================================================
    
    def matches_search(self, search_term: Optional[str]) -> bool:
        """Case-insensitive substring match on name or client."""
        if not search_term:
            return True
        term = search_term.lower()
        return term in self.name.lower() or term in self.client.lower()
    
    # =========================================================================
    # VALIDATION
    # =========================================================================
    
    def validate(self) -> None:
        """Validate aggregate invariants."""
        for field_name in REQUIRED_FIELDS:
            value = getattr(self, field_name)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValidationException(
                    f"Project {field_name.replace('_', ' ')} is required",
                    field_name
                )
    
    # =========================================================================
    # MAPPING
    # =========================================================================
    
    def to_record(self) -> dict:
        """Column values for the projects table (id and created_at are store-generated)."""
        return {
            "name": self.name,
            "client": self.client,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "priority": self.priority.value,
            "description": self.description,
        }
    
    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any],
        step_records: Sequence[Mapping[str, Any]] = ()
    ) -> Project:
        project = cls(
            id=as_uuid(record["id"]),
            created_at=record.get("created_at"),
            name=record["name"],
            client=record["client"],
            start_date=as_date(record.get("start_date")),
            end_date=as_date(record.get("end_date")),
            priority=Priority.parse(record.get("priority")),
            description=record.get("description") or "",
        )
        project._steps = [ProjectStep.from_record(r) for r in step_records]
        return project
    
    # =========================================================================
    # FACTORY METHODS
    # =========================================================================
    
    @classmethod
    def create(
        cls,
        name: str,
        client: str,
        start_date: Any,
        end_date: Any,
        priority: Any = None,
        description: Optional[str] = None,
    ) -> Project:
        """Factory method to create a new, validated project without steps."""
        try:
            start, end = as_date(start_date), as_date(end_date)
        except (TypeError, ValueError) as exc:
            raise ValidationException(f"Invalid project date: {exc}") from None
        
        project = cls(
            name=(name or "").strip(),
            client=(client or "").strip(),
            start_date=start,
            end_date=end,
            priority=Priority.parse(priority),
            description=description or "",
        )
        project.validate()
        return project
    
    def record_creation(self) -> None:
        """Raise ProjectCreated once the project and its steps are stored."""
        self.add_domain_event(ProjectCreated(
            project_id=self.id,
            name=self.name,
            step_count=len(self._steps)
        ))
