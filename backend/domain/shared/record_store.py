"""
Record Store contract.

The persistent, table-oriented store every repository talks to.
Records are plain dicts keyed by column name. Implementations live in
infrastructure.persistence and must raise RecordStoreError for any
transport or database failure.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence
from uuid import UUID


Record = Dict[str, Any]


class EntityKind(str, Enum):
    """Tables held by the record store."""
    
    PROJECTS = "projects"
    PROJECT_STEPS = "project_steps"
    TEAM_MEMBERS = "team_members"
    WORKFLOW_TEMPLATES = "workflow_templates"


class RecordStore(ABC):
    """
    Abstract record store.
    
    Supports insert, update-by-id, delete-by-id and ordered/filtered select
    per entity kind. Deleting a project removes its steps.
    """
    
    # True when atomic() rolls back every write made inside it on error
    supports_transactions: bool = False
    
    @abstractmethod
    def select(
        self,
        kind: EntityKind,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Optional[Sequence[str]] = None
    ) -> List[Record]:
        """
        Select records matching equality filters.
        
        order_by holds column names; a leading '-' sorts descending.
        """
        pass
    
    @abstractmethod
    def insert(self, kind: EntityKind, record: Mapping[str, Any]) -> Record:
        """Insert a record and return it with its generated id."""
        pass
    
    @abstractmethod
    def insert_many(self, kind: EntityKind, records: Sequence[Mapping[str, Any]]) -> List[Record]:
        """Insert several records in one call."""
        pass
    
    @abstractmethod
    def update(self, kind: EntityKind, record_id: UUID, fields: Mapping[str, Any]) -> None:
        """Patch the record with the given id."""
        pass
    
    @abstractmethod
    def delete(self, kind: EntityKind, record_id: UUID) -> None:
        """Delete the record with the given id."""
        pass
    
    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Group writes; a no-op unless the backend supports transactions."""
        yield
