"""
Workflow Domain - Entities.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from domain.shared.base_entity import Entity, as_uuid


@dataclass(eq=False)
class WorkflowStepTemplate(Entity):
    """
    A single step definition of the workflow template.
    
    Templates are independent of projects: changing or removing one
    never touches steps already instantiated in a project.
    """
    
    name: str = ""
    order: int = 0
    estimated_days: int = 1
    
    def to_record(self) -> Dict[str, Any]:
        """Column values for the workflow_templates table (id is store-generated)."""
        return {
            "name": self.name,
            "step_order": self.order,
            "estimated_days": self.estimated_days,
        }
    
    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> WorkflowStepTemplate:
        return cls(
            id=as_uuid(record["id"]),
            created_at=record.get("created_at"),
            name=record["name"],
            order=record["step_order"],
            estimated_days=record.get("estimated_days") or 1,
        )
