"""
Workflow Domain - Typed template updates.

Each variant patches exactly one column of a workflow template.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict

from domain.shared.exceptions import ValidationException

from .aggregates import normalize_step_name, validate_estimated_days


class TemplateUpdate(ABC):
    """Base class for workflow template updates."""
    
    @abstractmethod
    def fields(self) -> Dict[str, Any]:
        """Column values written to the record store."""
        pass


@dataclass(frozen=True)
class RenameStepTemplate(TemplateUpdate):
    name: str
    
    def __post_init__(self):
        clean_name = normalize_step_name(self.name)
        if clean_name is None:
            raise ValidationException("Workflow step name is required", "name")
        object.__setattr__(self, "name", clean_name)
    
    def fields(self) -> Dict[str, Any]:
        return {"name": self.name}


@dataclass(frozen=True)
class ReorderStepTemplate(TemplateUpdate):
    order: int
    
    def __post_init__(self):
        if isinstance(self.order, bool) or not isinstance(self.order, int) or self.order < 0:
            raise ValidationException(
                "Step order must be a non-negative integer",
                "order",
                self.order
            )
    
    def fields(self) -> Dict[str, Any]:
        return {"step_order": self.order}


@dataclass(frozen=True)
class ChangeStepTemplateEstimate(TemplateUpdate):
    estimated_days: int
    
    def __post_init__(self):
        validate_estimated_days(self.estimated_days)
    
    def fields(self) -> Dict[str, Any]:
        return {"estimated_days": self.estimated_days}
