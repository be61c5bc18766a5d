"""
Base Entity class for all domain entities.

Entities have identity and lifecycle.
Two entities are equal if they have the same ID.
"""

from __future__ import annotations
from abc import ABC
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional
from uuid import UUID, uuid4


@dataclass(kw_only=True)
class Entity(ABC):
    """
    Base class for all domain entities.
    
    Entities are objects that have a distinct identity that runs through time
    and different representations. They are defined by their identity, not their attributes.
    
    Identity fields are keyword-only so subclasses can declare their own
    fields in any order.
    """
    
    id: UUID = field(default_factory=uuid4)
    created_at: Optional[datetime] = None
    
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Entity):
            return False
        return self.id == other.id
    
    def __hash__(self) -> int:
        return hash(self.id)
    
    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id}>"
    
    def has_id(self, entity_id: Any) -> bool:
        """Check identity against a UUID or its string form."""
        return str(self.id) == str(entity_id)


def as_uuid(value: Any) -> UUID:
    """Coerce a record value into a UUID."""
    if isinstance(value, UUID):
        return value
    return UUID(str(value))


def as_date(value: Any) -> Optional[date]:
    """Coerce a record value (date, datetime or ISO string) into a date."""
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))
