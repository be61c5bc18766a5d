"""
Shared Value Objects used across multiple domains.

Value Objects are immutable objects that describe characteristics of a thing.
Two value objects are equal if all their properties are equal.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum

from .exceptions import ValidationException


# =============================================================================
# ENUMERATIONS
# =============================================================================

class StepStatus(str, Enum):
    """
    Status of a project step.
    
    Any status may follow any other; COMPLETED is the only status
    with an automatic side effect (promoting the next pending step).
    """
    
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    BLOCKED = "blocked"
    
    @property
    def advances_workflow(self) -> bool:
        """Check if entering this status promotes the following step."""
        return self is StepStatus.COMPLETED
    
    @classmethod
    def parse(cls, value: object) -> StepStatus:
        """Parse a raw value, raising ValidationException for unknown statuses."""
        try:
            return cls(value)
        except ValueError:
            raise ValidationException(
                f"Unknown step status '{value}'",
                "status",
                value
            ) from None


class Priority(str, Enum):
    """Project priority."""
    
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    
    @classmethod
    def parse(cls, value: object) -> Priority:
        """Parse a raw value; empty means the default (medium)."""
        if value in (None, ""):
            return cls.MEDIUM
        try:
            return cls(value)
        except ValueError:
            raise ValidationException(
                f"Unknown priority '{value}'",
                "priority",
                value
            ) from None


class ProjectStatus(str, Enum):
    """Status of a project, derived from its progress."""
    
    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    
    @classmethod
    def from_progress(cls, progress: Progress) -> ProjectStatus:
        """Derive project status from a progress value."""
        if progress.is_complete:
            return cls.COMPLETED
        if not progress.is_started:
            return cls.NOT_STARTED
        return cls.IN_PROGRESS


# Status filter value that lets every project through
STATUS_FILTER_ALL = "all"


# =============================================================================
# VALUE OBJECTS
# =============================================================================

@dataclass(frozen=True)
class Progress:
    """
    Completion percentage in the range 0..100.
    
    Computed as round(100 * completed / total), rounding halves up,
    and 0 when there is nothing to complete.
    """
    
    percent: int = 0
    
    def __post_init__(self):
        if not 0 <= self.percent <= 100:
            raise ValidationException(
                "Progress must be between 0 and 100",
                "percent",
                self.percent
            )
    
    @classmethod
    def from_counts(cls, completed: int, total: int) -> Progress:
        """Build progress from completed/total counts."""
        if total <= 0:
            return cls(0)
        ratio = Decimal(100 * completed) / Decimal(total)
        return cls(int(ratio.quantize(Decimal('1'), rounding=ROUND_HALF_UP)))
    
    @property
    def is_complete(self) -> bool:
        return self.percent == 100
    
    @property
    def is_started(self) -> bool:
        return self.percent > 0
    
    def __int__(self) -> int:
        return self.percent
    
    def __str__(self) -> str:
        return f"{self.percent}%"
