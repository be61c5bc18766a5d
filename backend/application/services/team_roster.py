"""
Team Roster Manager.
"""

import logging
from dataclasses import replace
from uuid import UUID

from domain.shared.record_store import RecordStore
from domain.team.entities import normalize_member_name
from domain.team.repositories import TeamMemberRepository

from ..errors import surfaces_errors
from ..state import AppState

logger = logging.getLogger(__name__)


class TeamRosterManager:
    """Add and remove team members."""
    
    def __init__(self, store: RecordStore):
        self.repository = TeamMemberRepository(store)
    
    def reload(self, state: AppState) -> AppState:
        return replace(state, team_members=tuple(self.repository.list_all()))
    
    @surfaces_errors("Failed to add team member")
    def add_member(self, state: AppState, name: str) -> AppState:
        """Add a member by trimmed name; a blank name is a no-op."""
        clean_name = normalize_member_name(name)
        if clean_name is None:
            return state
        member = self.repository.add(clean_name)
        logger.info("Team member '%s' added", member.name)
        return self.reload(state)
    
    @surfaces_errors("Failed to remove team member")
    def remove_member(self, state: AppState, member_id: UUID) -> AppState:
        # Steps assigned to this member keep the name
        self.repository.remove(member_id)
        logger.info("Team member %s removed", member_id)
        return self.reload(state)
