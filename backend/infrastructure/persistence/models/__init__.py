"""
Persistence Models Package.

All Django ORM models for the production tracker.
"""

# Base mixins
from .base import (
    TimeStampedMixin,
    BaseModel,
)

# Project models
from .project import (
    Project,
    ProjectStep,
    PriorityChoices,
    StepStatusChoices,
)

# Team models
from .team import TeamMember

# Workflow models
from .workflow import WorkflowTemplate


__all__ = [
    # Base
    'TimeStampedMixin',
    'BaseModel',
    
    # Project
    'Project',
    'ProjectStep',
    'PriorityChoices',
    'StepStatusChoices',
    
    # Team
    'TeamMember',
    
    # Workflow
    'WorkflowTemplate',
]
