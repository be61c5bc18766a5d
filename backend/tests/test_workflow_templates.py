"""
Workflow template manager against the in-memory record store.
"""

from application.session import TrackerSession
from domain.workflow.aggregates import WorkflowTemplate
from domain.workflow.entities import WorkflowStepTemplate
from domain.workflow.updates import (
    ChangeStepTemplateEstimate,
    RenameStepTemplate,
    ReorderStepTemplate,
)


def names(state):
    return [t.name for t in state.workflow_templates]


def test_next_order_starts_at_one():
    assert WorkflowTemplate().next_order() == 1
    template = WorkflowTemplate([
        WorkflowStepTemplate(name="A", order=2),
        WorkflowStepTemplate(name="B", order=7),
    ])
    assert template.next_order() == 8


def test_first_step_gets_order_one(store):
    session = TrackerSession.open(store)
    state = session.add_workflow_step("Script", 2)
    assert [(t.name, t.order, t.estimated_days) for t in state.workflow_templates] == [("Script", 1, 2)]


def test_add_appends_after_max_order(session):
    state = session.add_workflow_step("  Delivery  ")
    assert names(state) == ["Script", "Edit", "Review", "Delivery"]
    assert state.workflow_templates[-1].order == 4
    assert state.workflow_templates[-1].estimated_days == 1


def test_blank_name_is_noop(session):
    before = session.snapshot
    state = session.add_workflow_step("   ", 3)
    assert state is before
    assert state.error is None


def test_invalid_estimate_surfaces_error(session):
    state = session.add_workflow_step("Delivery", 0)
    assert state.error.startswith("Failed to add workflow step: ")
    assert len(state.workflow_templates) == 3


def test_update_patches_fields(session):
    edit = session.snapshot.workflow_templates[1]
    state = session.update_workflow_step(
        edit.id,
        RenameStepTemplate("Offline Edit"),
        ReorderStepTemplate(10),
        ChangeStepTemplateEstimate(4),
    )
    assert state.error is None
    assert names(state) == ["Script", "Review", "Offline Edit"]
    assert state.workflow_templates[-1].estimated_days == 4


def test_updates_are_column_patches():
    assert RenameStepTemplate("  Grade ").fields() == {"name": "Grade"}
    assert ReorderStepTemplate(0).fields() == {"step_order": 0}
    assert ChangeStepTemplateEstimate(3).fields() == {"estimated_days": 3}


def test_update_unknown_step_surfaces_error(session):
    state = session.update_workflow_step(
        "00000000-0000-0000-0000-000000000000",
        RenameStepTemplate("Ghost"),
    )
    assert state.error.startswith("Failed to update workflow step: ")


def test_remove_leaves_gaps(session):
    edit = session.snapshot.workflow_templates[1]
    state = session.remove_workflow_step(edit.id)
    assert [(t.name, t.order) for t in state.workflow_templates] == [("Script", 1), ("Review", 3)]

    state = session.add_workflow_step("Delivery")
    assert state.workflow_templates[-1].order == 4


def test_template_changes_do_not_touch_existing_projects(session, project_input):
    state = session.create_project(project_input)
    project = state.projects[0]

    script = state.workflow_templates[0]
    session.update_workflow_step(script.id, RenameStepTemplate("Treatment"))
    session.remove_workflow_step(state.workflow_templates[2].id)
    state = session.reload()

    assert [t.name for t in state.workflow_templates] == ["Treatment", "Edit"]
    reloaded = state.find_project(project.id)
    assert [s.name for s in reloaded.steps] == ["Script", "Edit", "Review"]
