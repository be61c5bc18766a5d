"""
In-memory record store behaviour that the repositories rely on.
"""

import uuid

import pytest

from domain.shared.exceptions import EntityNotFoundException, RecordStoreError
from domain.shared.record_store import EntityKind


@pytest.fixture
def project_row(store):
    return store.insert(EntityKind.PROJECTS, {
        "name": "Promo",
        "client": "Acme",
        "start_date": "2024-01-01",
        "end_date": "2024-01-31",
    })


def test_insert_fills_defaults(store, project_row):
    assert isinstance(project_row["id"], uuid.UUID)
    assert project_row["priority"] == "medium"
    assert project_row["description"] == ""
    assert project_row["created_at"] is not None


def test_select_filters_and_orders(store):
    for name, order in [("Edit", 2), ("Script", 1), ("Review", 3)]:
        store.insert(EntityKind.WORKFLOW_TEMPLATES, {"name": name, "step_order": order})

    rows = store.select(EntityKind.WORKFLOW_TEMPLATES, order_by=["step_order"])
    assert [r["name"] for r in rows] == ["Script", "Edit", "Review"]

    rows = store.select(EntityKind.WORKFLOW_TEMPLATES, order_by=["-step_order"])
    assert [r["name"] for r in rows] == ["Review", "Edit", "Script"]

    rows = store.select(EntityKind.WORKFLOW_TEMPLATES, filters={"name": "Edit"})
    assert len(rows) == 1


def test_newest_first_by_created_at(store):
    for name in ["A", "B", "C"]:
        store.insert(EntityKind.TEAM_MEMBERS, {"name": name})
    rows = store.select(EntityKind.TEAM_MEMBERS, order_by=["-created_at"])
    assert [r["name"] for r in rows] == ["C", "B", "A"]


def test_returned_records_are_copies(store, project_row):
    project_row["name"] = "Changed"
    assert store.select(EntityKind.PROJECTS)[0]["name"] == "Promo"


def test_unknown_column(store):
    with pytest.raises(RecordStoreError):
        store.insert(EntityKind.TEAM_MEMBERS, {"nickname": "D"})
    with pytest.raises(RecordStoreError):
        store.select(EntityKind.TEAM_MEMBERS, order_by=["age"])


def test_not_null(store, project_row):
    with pytest.raises(RecordStoreError):
        store.insert(EntityKind.TEAM_MEMBERS, {})
    with pytest.raises(RecordStoreError):
        store.update(EntityKind.PROJECTS, project_row["id"], {"name": None})


def test_step_needs_existing_project(store):
    with pytest.raises(RecordStoreError):
        store.insert(EntityKind.PROJECT_STEPS, {"project_id": uuid.uuid4(), "name": "Edit"})


def test_insert_many_is_all_or_nothing(store, project_row):
    with pytest.raises(RecordStoreError):
        store.insert_many(EntityKind.PROJECT_STEPS, [
            {"project_id": project_row["id"], "name": "Script"},
            {"project_id": project_row["id"], "name": None},
        ])
    assert store.select(EntityKind.PROJECT_STEPS) == []


def test_update_and_delete_missing_ids(store):
    with pytest.raises(EntityNotFoundException):
        store.update(EntityKind.TEAM_MEMBERS, uuid.uuid4(), {"name": "X"})
    with pytest.raises(EntityNotFoundException):
        store.delete(EntityKind.TEAM_MEMBERS, uuid.uuid4())


def test_delete_project_cascades(store, project_row):
    other = store.insert(EntityKind.PROJECTS, {
        "name": "Teaser",
        "client": "Acme",
        "start_date": "2024-02-01",
        "end_date": "2024-02-10",
    })
    for project_id in (project_row["id"], other["id"]):
        store.insert(EntityKind.PROJECT_STEPS, {"project_id": project_id, "name": "Edit"})

    store.delete(EntityKind.PROJECTS, project_row["id"])

    steps = store.select(EntityKind.PROJECT_STEPS)
    assert [s["project_id"] for s in steps] == [other["id"]]
