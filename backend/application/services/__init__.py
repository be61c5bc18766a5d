"""
Application Services - the managers behind every user action.
"""

from .project_lifecycle import ProjectInput, ProjectLifecycleManager
from .team_roster import TeamRosterManager
from .workflow_templates import WorkflowTemplateManager


__all__ = [
    'ProjectInput',
    'ProjectLifecycleManager',
    'TeamRosterManager',
    'WorkflowTemplateManager',
]
