"""
Project Domain - Services.

Pure derivations over projects.
"""

from typing import Iterable, List, Optional

from domain.shared.value_objects import STATUS_FILTER_ALL, ProjectStatus

from .aggregates import Project


def compute_progress(project: Project) -> int:
    """Completion percentage of a project (0 when it has no steps)."""
    return project.progress.percent


def compute_status(project: Project) -> ProjectStatus:
    """'completed' at 100%, 'not-started' at 0%, 'in-progress' otherwise."""
    return project.status


def filter_projects(
    projects: Iterable[Project],
    search_term: Optional[str] = "",
    status_filter: Optional[str] = STATUS_FILTER_ALL,
) -> List[Project]:
    """
    Filter projects by search term and derived status, keeping order.
    
    The search term matches name or client, case-insensitively.
    A status filter of 'all' (or empty) passes every project; any other
    value must equal the derived status exactly.
    """
    status_filter = status_filter or STATUS_FILTER_ALL
    return [
        project for project in projects
        if project.matches_search(search_term)
        and (status_filter == STATUS_FILTER_ALL or compute_status(project).value == status_filter)
    ]
