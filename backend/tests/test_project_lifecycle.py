"""
Project lifecycle manager: creation, step updates and deletion.
"""

import logging

import pytest

from application.services import ProjectInput
from application.session import TrackerSession
from domain.project.updates import AssignStep, ScheduleStep, SetStepStatus
from domain.shared.exceptions import RecordStoreError
from domain.shared.record_store import EntityKind
from infrastructure.persistence.memory_store import InMemoryRecordStore


def step_statuses(project):
    return [step.status.value for step in project.steps]


class StepInsertFailingStore(InMemoryRecordStore):
    """Accepts the project row, then rejects its steps."""

    def insert_many(self, kind, records):
        if kind == EntityKind.PROJECT_STEPS:
            raise RecordStoreError("connection reset", kind.value, "insert_many")
        return super().insert_many(kind, records)


class StepUpdateFailingStore(InMemoryRecordStore):

    def update(self, kind, record_id, fields):
        if kind == EntityKind.PROJECT_STEPS:
            raise RecordStoreError("permission denied", kind.value, "update")
        return super().update(kind, record_id, fields)


class TestCreateProject:

    def test_steps_snapshot_the_template(self, session, project_input):
        state = session.create_project(project_input)

        assert state.error is None
        project = state.projects[0]
        assert project.name == "Spring Campaign"
        assert project.priority.value == "high"
        assert [(s.name, s.order, s.estimated_days) for s in project.steps] == [
            ("Script", 1, 1), ("Edit", 2, 2), ("Review", 3, 1),
        ]
        assert step_statuses(project) == ["pending"] * 3
        assert project.progress.percent == 0

    def test_without_template_has_no_steps(self, store, project_input):
        session = TrackerSession.open(store)
        project = session.create_project(project_input).projects[0]
        assert project.steps == []
        assert project.status.value == "not-started"

    def test_newest_first(self, session, project_input):
        session.create_project(project_input)
        state = session.create_project(ProjectInput("Teaser", "Acme", "2024-04-01", "2024-04-05"))
        assert [p.name for p in state.projects] == ["Teaser", "Spring Campaign"]

    def test_missing_field_surfaces_error(self, session):
        state = session.create_project(ProjectInput("", "Acme", "2024-04-01", "2024-04-05"))
        assert state.error == "Failed to create project: Project name is required"
        assert state.projects == ()

    def test_failed_step_insert_removes_project(self, open_session, project_input):
        store = StepInsertFailingStore()
        session = open_session(store)

        state = session.create_project(project_input)

        assert state.error == "Failed to create project: connection reset"
        assert store.select(EntityKind.PROJECTS) == []
        assert session.reload().projects == ()

    def test_creation_is_logged(self, session, project_input, caplog):
        with caplog.at_level(logging.INFO, logger="application"):
            session.create_project(project_input)
        assert "ProjectCreated" in caplog.text


class TestUpdateStep:

    def test_progress_scenario(self, session, project_input):
        project = session.create_project(project_input).projects[0]
        script, edit, review = project.steps

        state = session.update_step(project.id, script.id, SetStepStatus("completed"))
        project = state.find_project(project.id)
        assert step_statuses(project) == ["completed", "in-progress", "pending"]
        assert project.progress.percent == 33
        assert project.status.value == "in-progress"

        state = session.update_step(project.id, edit.id, SetStepStatus("completed"))
        project = state.find_project(project.id)
        assert step_statuses(project) == ["completed", "completed", "in-progress"]
        assert project.progress.percent == 67

        state = session.update_step(project.id, review.id, SetStepStatus("completed"))
        project = state.find_project(project.id)
        assert project.progress.percent == 100
        assert project.status.value == "completed"

    def test_several_fields_at_once(self, session, project_input):
        project = session.create_project(project_input).projects[0]
        step = project.steps[1]

        state = session.update_step(
            project.id, step.id,
            AssignStep("Dana"), ScheduleStep("2024-03-15"), SetStepStatus("blocked"),
        )

        updated = state.find_project(project.id).get_step(step.id)
        assert updated.assignee == "Dana"
        assert updated.due_date.isoformat() == "2024-03-15"
        assert updated.status.value == "blocked"

    def test_does_not_change_callers_state(self, session, project_input):
        before = session.create_project(project_input)
        project = before.projects[0]
        session.update_step(project.id, project.steps[0].id, SetStepStatus("completed"))
        assert step_statuses(before.projects[0]) == ["pending"] * 3

    def test_toggle(self, session, project_input):
        project = session.create_project(project_input).projects[0]
        first = project.steps[0]

        state = session.toggle_step(project.id, first.id)
        assert step_statuses(state.find_project(project.id)) == ["completed", "in-progress", "pending"]

        state = session.toggle_step(project.id, first.id)
        assert step_statuses(state.find_project(project.id)) == ["pending", "in-progress", "pending"]

    def test_unknown_project(self, session):
        state = session.update_step(
            "00000000-0000-0000-0000-000000000000",
            "00000000-0000-0000-0000-000000000001",
            SetStepStatus("completed"),
        )
        assert state.error.startswith("Failed to update step: Project with id")

    def test_store_failure_keeps_error_until_reload(self, open_session, project_input):
        session = open_session(StepUpdateFailingStore())
        project = session.create_project(project_input).projects[0]

        state = session.update_step(project.id, project.steps[0].id, SetStepStatus("completed"))
        assert state.error == "Failed to update step: permission denied"

        # A later success does not clear the message
        state = session.add_member("Dana")
        assert state.error == "Failed to update step: permission denied"

        state = session.reload()
        assert state.error is None
        assert step_statuses(state.projects[0]) == ["pending"] * 3


class TestDeleteProject:

    def test_delete_cascades_to_steps(self, session, project_input, seeded_store):
        project = session.create_project(project_input).projects[0]

        state = session.delete_project(project.id)

        assert state.projects == ()
        assert seeded_store.select(EntityKind.PROJECT_STEPS) == []

    def test_delete_unknown_project(self, session):
        state = session.delete_project("00000000-0000-0000-0000-000000000000")
        assert state.error.startswith("Failed to delete project: ")


@pytest.mark.parametrize("search,status,expected", [
    ("", "all", ["Teaser", "Spring Campaign"]),
    ("spring", "all", ["Spring Campaign"]),
    ("", "in-progress", ["Spring Campaign"]),
    ("", "not-started", ["Teaser"]),
])
def test_filtered_projects(session, project_input, search, status, expected):
    project = session.create_project(project_input).projects[0]
    session.update_step(project.id, project.steps[0].id, SetStepStatus("completed"))
    session.create_project(ProjectInput("Teaser", "Globex", "2024-04-01", "2024-04-05"))

    assert [p.name for p in session.filtered_projects(search, status)] == expected
