"""
Project Domain - Repository.
"""

from collections import defaultdict
from typing import Dict, List, Sequence
from uuid import UUID

from domain.shared.record_store import EntityKind, RecordStore

from .aggregates import Project
from .entities import ProjectStep
from .updates import StepWrite


class ProjectRepository:
    """Repository for the Project aggregate, backed by a RecordStore."""
    
    def __init__(self, store: RecordStore):
        self.store = store
    
    def list_all(self) -> List[Project]:
        """All projects, newest first, each with its steps in order."""
        project_records = self.store.select(EntityKind.PROJECTS, order_by=["-created_at"])
        step_records = self.store.select(EntityKind.PROJECT_STEPS, order_by=["step_order"])
        
        steps_by_project: Dict[str, list] = defaultdict(list)
        for record in step_records:
            steps_by_project[str(record["project_id"])].append(record)
        
        return [
            Project.from_record(record, steps_by_project.get(str(record["id"]), []))
            for record in project_records
        ]
    
    def add(self, project: Project) -> Project:
        """Insert the project row only and return it with its stored id."""
        record = self.store.insert(EntityKind.PROJECTS, project.to_record())
        return Project.from_record(record)
    
    def add_steps(self, steps: Sequence[ProjectStep]) -> None:
        self.store.insert_many(EntityKind.PROJECT_STEPS, [step.to_record() for step in steps])
    
    def write_steps(self, writes: Sequence[StepWrite]) -> None:
        """Persist step updates one store call at a time, in order."""
        for write in writes:
            self.store.update(EntityKind.PROJECT_STEPS, write.step_id, write.update.fields())
    
    def delete(self, project_id: UUID) -> None:
        """Delete a project; the store removes its steps."""
        self.store.delete(EntityKind.PROJECTS, project_id)
