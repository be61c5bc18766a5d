"""
Project Domain - Typed step updates.

Each variant patches exactly one column of a project step.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, NamedTuple, Optional
from uuid import UUID

from domain.shared.base_entity import as_date
from domain.shared.exceptions import ValidationException
from domain.shared.value_objects import StepStatus
from domain.team.entities import normalize_member_name
from domain.workflow.aggregates import validate_estimated_days

from .entities import ProjectStep


class StepUpdate(ABC):
    """Base class for project step updates."""
    
    @abstractmethod
    def fields(self) -> Dict[str, Any]:
        """Column values written to the record store."""
        pass
    
    @abstractmethod
    def apply(self, step: ProjectStep) -> None:
        """Apply the update to an in-memory step."""
        pass


class StepWrite(NamedTuple):
    """A pending write of one update to one step."""
    
    step_id: UUID
    update: StepUpdate


@dataclass(frozen=True)
class SetStepStatus(StepUpdate):
    status: StepStatus
    
    def __post_init__(self):
        object.__setattr__(self, "status", StepStatus.parse(self.status))
    
    def fields(self) -> Dict[str, Any]:
        return {"status": self.status.value}
    
    def apply(self, step: ProjectStep) -> None:
        step.status = self.status


@dataclass(frozen=True)
class AssignStep(StepUpdate):
    """Assign a step by member name; an empty name unassigns it."""
    
    assignee: Optional[str] = None
    
    def __post_init__(self):
        object.__setattr__(self, "assignee", normalize_member_name(self.assignee))
    
    def fields(self) -> Dict[str, Any]:
        return {"assignee": self.assignee}
    
    def apply(self, step: ProjectStep) -> None:
        step.assignee = self.assignee


@dataclass(frozen=True)
class ScheduleStep(StepUpdate):
    """Set or clear the step's due date."""
    
    due_date: Optional[date] = None
    
    def __post_init__(self):
        try:
            object.__setattr__(self, "due_date", as_date(self.due_date))
        except (TypeError, ValueError):
            raise ValidationException("Invalid due date", "due_date", self.due_date) from None
    
    def fields(self) -> Dict[str, Any]:
        return {"due_date": self.due_date}
    
    def apply(self, step: ProjectStep) -> None:
        step.due_date = self.due_date


@dataclass(frozen=True)
class EstimateStep(StepUpdate):
    estimated_days: int
    
    def __post_init__(self):
        validate_estimated_days(self.estimated_days)
    
    def fields(self) -> Dict[str, Any]:
        return {"estimated_days": self.estimated_days}
    
    def apply(self, step: ProjectStep) -> None:
        step.estimated_days = self.estimated_days
