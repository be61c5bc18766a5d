"""
Domain Events.

Domain events are records of significant business occurrences.
They are dispatched to the application log after the write that
produced them has been accepted by the record store.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import UUID, uuid4


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """
    Base class for all domain events.
    
    Domain events are immutable records of something that happened in the domain.
    They are used for:
    - Decoupling the domain from side effects (logging, notifications)
    - Audit trail in the application log
    """
    
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=_utcnow)
    
    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__
    
    def payload(self) -> Dict[str, Any]:
        """Event fields without the envelope, stringified for logging."""
        data = asdict(self)
        data.pop("event_id", None)
        data.pop("occurred_at", None)
        return {key: str(value) if value is not None else None for key, value in data.items()}


# =============================================================================
# PROJECT EVENTS
# =============================================================================

@dataclass(frozen=True)
class ProjectCreated(DomainEvent):
    """Event raised when a new project is created from the workflow template."""
    
    project_id: UUID
    name: str
    step_count: int = 0


@dataclass(frozen=True)
class StepStatusChanged(DomainEvent):
    """Event raised when a project step changes status."""
    
    project_id: UUID
    step_id: UUID
    old_status: str
    new_status: str


@dataclass(frozen=True)
class StepAutoAdvanced(DomainEvent):
    """Event raised when completing a step promotes the next pending step."""
    
    project_id: UUID
    step_id: UUID
    completed_step_id: UUID


@dataclass(frozen=True)
class StepAssigned(DomainEvent):
    """Event raised when a step assignee changes."""
    
    project_id: UUID
    step_id: UUID
    assignee: Optional[str] = None
