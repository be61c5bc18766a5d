import pytest

from domain.project.aggregates import Project
from domain.project.services import compute_progress, compute_status, filter_projects
from domain.shared.value_objects import ProjectStatus, StepStatus
from domain.workflow.entities import WorkflowStepTemplate


def project(name, client, completed, total):
    result = Project.create(name, client, "2024-01-01", "2024-02-01")
    result.instantiate_steps([WorkflowStepTemplate(name=f"S{i}", order=i) for i in range(total)])
    for step in result.steps[:completed]:
        step.status = StepStatus.COMPLETED
    return result


@pytest.fixture
def projects():
    return [
        project("Wedding Film", "Miller Family", 0, 4),
        project("Product Launch", "Acme", 2, 4),
        project("Documentary", "Acme Foundation", 4, 4),
        project("Music Video", "Indie Label", 0, 0),
    ]


def test_compute_progress_and_status(projects):
    assert [compute_progress(p) for p in projects] == [0, 50, 100, 0]
    assert [compute_status(p) for p in projects] == [
        ProjectStatus.NOT_STARTED,
        ProjectStatus.IN_PROGRESS,
        ProjectStatus.COMPLETED,
        ProjectStatus.NOT_STARTED,
    ]


def test_empty_search_and_all_status_keep_everything_in_order(projects):
    assert filter_projects(projects, "", "all") == projects
    assert filter_projects(projects) == projects


def test_search_matches_name_or_client_case_insensitively(projects):
    result = filter_projects(projects, "acme")
    assert [p.name for p in result] == ["Product Launch", "Documentary"]

    result = filter_projects(projects, "VIDEO")
    assert [p.name for p in result] == ["Music Video"]


@pytest.mark.parametrize("status,names", [
    ("not-started", ["Wedding Film", "Music Video"]),
    ("in-progress", ["Product Launch"]),
    ("completed", ["Documentary"]),
    ("archived", []),
])
def test_status_filter(projects, status, names):
    assert [p.name for p in filter_projects(projects, "", status)] == names


def test_search_and_status_combine(projects):
    result = filter_projects(projects, "acme", "completed")
    assert [p.name for p in result] == ["Documentary"]
