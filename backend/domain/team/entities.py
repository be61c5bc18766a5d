"""
Team Domain - Entities.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from domain.shared.base_entity import Entity, as_uuid


def normalize_member_name(name: Optional[str]) -> Optional[str]:
    """Trim a member name; None when nothing is left."""
    if name is None:
        return None
    name = name.strip()
    return name or None


@dataclass(eq=False)
class TeamMember(Entity):
    """A team member. Names are unique in practice, not enforced."""
    
    name: str = ""
    
    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> TeamMember:
        return cls(
            id=as_uuid(record["id"]),
            created_at=record.get("created_at"),
            name=record["name"],
        )
