"""
Serializers Package.

All API serializers for the tracker.
"""

from .base import EntitySerializer, PartialUpdateSerializer

from .project import (
    ProjectStepSerializer,
    ProjectListSerializer,
    ProjectDetailSerializer,
    ProjectCreateSerializer,
    StepUpdateSerializer,
)

from .team import (
    TeamMemberSerializer,
    TeamMemberCreateSerializer,
)

from .workflow import (
    WorkflowStepSerializer,
    WorkflowStepCreateSerializer,
    WorkflowStepUpdateSerializer,
)

from .state import AppStateSerializer


__all__ = [
    # Base
    'EntitySerializer',
    'PartialUpdateSerializer',

    # Project
    'ProjectStepSerializer',
    'ProjectListSerializer',
    'ProjectDetailSerializer',
    'ProjectCreateSerializer',
    'StepUpdateSerializer',

    # Team
    'TeamMemberSerializer',
    'TeamMemberCreateSerializer',

    # Workflow
    'WorkflowStepSerializer',
    'WorkflowStepCreateSerializer',
    'WorkflowStepUpdateSerializer',

    # State
    'AppStateSerializer',
]
