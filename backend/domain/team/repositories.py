"""
Team Domain - Repository.
"""

from typing import List
from uuid import UUID

from domain.shared.record_store import EntityKind, RecordStore

from .entities import TeamMember


class TeamMemberRepository:
    """Repository for team members, backed by a RecordStore."""
    
    kind = EntityKind.TEAM_MEMBERS
    
    def __init__(self, store: RecordStore):
        self.store = store
    
    def list_all(self) -> List[TeamMember]:
        """All members ordered by name."""
        records = self.store.select(self.kind, order_by=["name"])
        return [TeamMember.from_record(r) for r in records]
    
    def add(self, name: str) -> TeamMember:
        record = self.store.insert(self.kind, {"name": name})
        return TeamMember.from_record(record)
    
    def remove(self, member_id: UUID) -> None:
        self.store.delete(self.kind, member_id)
