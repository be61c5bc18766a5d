"""
Workflow Domain - Aggregates.

WorkflowTemplate is the ordered collection of step templates.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from domain.shared.exceptions import ValidationException

from .entities import WorkflowStepTemplate


def normalize_step_name(name: Optional[str]) -> Optional[str]:
    """Trim a step name; None when nothing is left."""
    if name is None:
        return None
    name = name.strip()
    return name or None


def validate_estimated_days(value: object) -> int:
    """Estimated duration must be a positive whole number of days."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationException(
            "Estimated days must be a positive integer",
            "estimated_days",
            value
        )
    return value


@dataclass
class WorkflowTemplate:
    """
    The workflow template used to instantiate new projects' steps.
    
    Orders are ascending but not renumbered on removal, so gaps are
    allowed. New steps are always appended after the current maximum.
    """
    
    _steps: List[WorkflowStepTemplate] = field(default_factory=list)
    
    @property
    def steps(self) -> List[WorkflowStepTemplate]:
        """Step templates in workflow order."""
        return sorted(self._steps, key=lambda step: step.order)
    
    def next_order(self) -> int:
        """Order for an appended step: max existing order + 1, starting at 1."""
        return max((step.order for step in self._steps), default=0) + 1
    
    def new_step(self, name: str, estimated_days: int = 1) -> WorkflowStepTemplate:
        """Build (but do not store) a step appended at the end of the workflow."""
        clean_name = normalize_step_name(name)
        if clean_name is None:
            raise ValidationException("Workflow step name is required", "name")
        return WorkflowStepTemplate(
            name=clean_name,
            order=self.next_order(),
            estimated_days=validate_estimated_days(estimated_days),
        )
    
    def snapshot(self) -> Tuple[WorkflowStepTemplate, ...]:
        """Immutable copy of the ordered steps, taken at project creation time."""
        return tuple(self.steps)
