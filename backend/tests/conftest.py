"""
Shared fixtures.

Domain and application tests run against the in-memory record store;
persistence and API tests use the Django test database.
"""

import pytest
from rest_framework.test import APIClient

from application.services import ProjectInput
from application.session import TrackerSession
from domain.shared.record_store import EntityKind
from infrastructure.persistence.memory_store import InMemoryRecordStore


VIDEO_WORKFLOW = [("Script", 1), ("Edit", 2), ("Review", 1)]


def seed_templates(store, steps=VIDEO_WORKFLOW):
    for order, (name, days) in enumerate(steps, start=1):
        store.insert(EntityKind.WORKFLOW_TEMPLATES, {
            "name": name,
            "step_order": order,
            "estimated_days": days,
        })
    return store


@pytest.fixture
def store():
    return InMemoryRecordStore()


@pytest.fixture
def seeded_store(store):
    return seed_templates(store)


@pytest.fixture
def session(seeded_store):
    return TrackerSession.open(seeded_store)


@pytest.fixture
def open_session():
    """Seed the default templates into a given store and open a session on it."""
    def _open(store, templates=VIDEO_WORKFLOW):
        return TrackerSession.open(seed_templates(store, templates))
    return _open


@pytest.fixture
def project_input():
    return ProjectInput(
        name="Spring Campaign",
        client="Acme Studios",
        start_date="2024-03-01",
        end_date="2024-03-31",
        priority="high",
        description="30s spot",
    )


@pytest.fixture
def api_client():
    return APIClient()
