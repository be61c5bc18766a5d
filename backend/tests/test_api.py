"""
REST API, end to end through the Django record store.
"""

import uuid

import pytest

from domain.shared.exceptions import RecordStoreError
from domain.shared.record_store import EntityKind
from infrastructure.persistence.memory_store import InMemoryRecordStore

pytestmark = pytest.mark.django_db

API = '/api/v1'


@pytest.fixture
def workflow(api_client):
    for name, days in [('Script', 1), ('Edit', 2), ('Review', 1)]:
        api_client.post(f'{API}/workflow-steps/', {'name': name, 'estimated_days': days}, format='json')
    return api_client.get(f'{API}/workflow-steps/').data


@pytest.fixture
def project(api_client, workflow):
    response = api_client.post(f'{API}/projects/', {
        'name': 'Spring Campaign',
        'client': 'Acme Studios',
        'start_date': '2024-03-01',
        'end_date': '2024-03-31',
    }, format='json')
    assert response.status_code == 201
    return response.data


def step_url(project, index, suffix=''):
    return f"{API}/projects/{project['id']}/steps/{project['steps'][index]['id']}/{suffix}"


def statuses(data):
    return [step['status'] for step in data['steps']]


class TestState:

    def test_empty_state(self, api_client):
        response = api_client.get(f'{API}/state/')
        assert response.status_code == 200
        assert response.data['projects'] == []
        assert response.data['team_members'] == []
        assert response.data['workflow_templates'] == []
        assert response.data['loading'] is False
        assert response.data['error'] is None

    def test_state_includes_projects(self, api_client, project):
        response = api_client.post(f'{API}/state/reload/')
        assert response.status_code == 200
        assert [p['name'] for p in response.data['projects']] == ['Spring Campaign']
        assert len(response.data['workflow_templates']) == 3


class TestWorkflowSteps:

    def test_append_in_order(self, workflow):
        assert [(s['name'], s['order'], s['estimated_days']) for s in workflow] == [
            ('Script', 1, 1), ('Edit', 2, 2), ('Review', 3, 1),
        ]

    def test_blank_name_is_ignored(self, api_client, workflow):
        response = api_client.post(f'{API}/workflow-steps/', {'name': '   '}, format='json')
        assert response.status_code == 200
        assert len(response.data) == 3

    def test_estimate_must_be_positive(self, api_client):
        response = api_client.post(f'{API}/workflow-steps/', {'name': 'Edit', 'estimated_days': 0}, format='json')
        assert response.status_code == 400

    def test_patch_and_delete(self, api_client, workflow):
        edit_id = workflow[1]['id']
        response = api_client.patch(
            f'{API}/workflow-steps/{edit_id}/',
            {'name': 'Offline Edit', 'order': 9},
            format='json'
        )
        assert response.status_code == 200
        assert [s['name'] for s in response.data] == ['Script', 'Review', 'Offline Edit']

        response = api_client.delete(f'{API}/workflow-steps/{edit_id}/')
        assert response.status_code == 204
        assert len(api_client.get(f'{API}/workflow-steps/').data) == 2

    def test_empty_patch(self, api_client, workflow):
        response = api_client.patch(f"{API}/workflow-steps/{workflow[0]['id']}/", {}, format='json')
        assert response.status_code == 400

    def test_unknown_step(self, api_client):
        response = api_client.delete(f'{API}/workflow-steps/{uuid.uuid4()}/')
        assert response.status_code == 404


class TestProjects:

    def test_create(self, project):
        assert project['priority'] == 'medium'
        assert project['description'] == ''
        assert project['progress'] == 0
        assert project['status'] == 'not-started'
        assert project['steps_total'] == 3
        assert [s['name'] for s in project['steps']] == ['Script', 'Edit', 'Review']
        assert statuses(project) == ['pending'] * 3

    def test_create_requires_fields(self, api_client):
        response = api_client.post(f'{API}/projects/', {'name': 'No client'}, format='json')
        assert response.status_code == 400
        assert 'client' in response.data

    def test_unknown_priority(self, api_client):
        response = api_client.post(f'{API}/projects/', {
            'name': 'Promo',
            'client': 'Acme',
            'start_date': '2024-03-01',
            'end_date': '2024-03-31',
            'priority': 'urgent',
        }, format='json')
        assert response.status_code == 400
        assert 'priority' in response.data

    def test_progress_through_the_workflow(self, api_client, project):
        response = api_client.patch(step_url(project, 0), {'status': 'completed'}, format='json')
        assert response.status_code == 200
        assert statuses(response.data) == ['completed', 'in-progress', 'pending']
        assert response.data['progress'] == 33
        assert response.data['status'] == 'in-progress'

        response = api_client.patch(step_url(project, 1), {'status': 'completed'}, format='json')
        assert statuses(response.data) == ['completed', 'completed', 'in-progress']
        assert response.data['progress'] == 67

        response = api_client.post(step_url(project, 2, 'toggle/'))
        assert response.status_code == 200
        assert response.data['progress'] == 100
        assert response.data['status'] == 'completed'

    def test_step_fields(self, api_client, project):
        api_client.post(f'{API}/team-members/', {'name': 'Dana'}, format='json')
        response = api_client.patch(step_url(project, 1), {
            'assignee': 'Dana',
            'due_date': '2024-03-15',
            'estimated_days': 4,
        }, format='json')

        step = response.data['steps'][1]
        assert step['assignee'] == 'Dana'
        assert step['assignee_known'] is True
        assert step['due_date'] == '2024-03-15'
        assert step['estimated_days'] == 4

        response = api_client.patch(step_url(project, 1), {'assignee': '', 'due_date': None}, format='json')
        step = response.data['steps'][1]
        assert step['assignee'] is None
        assert step['assignee_known'] is None
        assert step['due_date'] is None

    def test_invalid_step_patch(self, api_client, project):
        assert api_client.patch(step_url(project, 0), {}, format='json').status_code == 400
        assert api_client.patch(step_url(project, 0), {'status': 'done'}, format='json').status_code == 400

    def test_unknown_ids(self, api_client, project):
        assert api_client.get(f'{API}/projects/{uuid.uuid4()}/').status_code == 404
        assert api_client.get(f'{API}/projects/not-a-uuid/').status_code == 404

        url = f"{API}/projects/{project['id']}/steps/{uuid.uuid4()}/"
        response = api_client.patch(url, {'status': 'completed'}, format='json')
        assert response.status_code == 404
        assert response.data['error'] == 'ENTITY_NOT_FOUND'

    def test_list_filters(self, api_client, project):
        api_client.post(f'{API}/projects/', {
            'name': 'Teaser',
            'client': 'Globex',
            'start_date': '2024-04-01',
            'end_date': '2024-04-05',
            'priority': 'low',
        }, format='json')
        api_client.patch(step_url(project, 0), {'status': 'completed'}, format='json')

        def names(query=''):
            return [p['name'] for p in api_client.get(f'{API}/projects/{query}').data]

        assert names() == ['Teaser', 'Spring Campaign']
        assert names('?search=ACME') == ['Spring Campaign']
        assert names('?status=not-started') == ['Teaser']
        assert names('?status=in-progress&search=spring') == ['Spring Campaign']
        assert names('?status=completed') == []

    def test_delete(self, api_client, project):
        response = api_client.delete(f"{API}/projects/{project['id']}/")
        assert response.status_code == 204
        assert api_client.get(f"{API}/projects/{project['id']}/").status_code == 404


class TestTeamMembers:

    def test_add_list_remove(self, api_client):
        response = api_client.post(f'{API}/team-members/', {'name': ' Zoe '}, format='json')
        assert response.status_code == 201
        api_client.post(f'{API}/team-members/', {'name': 'Adam'}, format='json')

        members = api_client.get(f'{API}/team-members/').data
        assert [m['name'] for m in members] == ['Adam', 'Zoe']

        response = api_client.delete(f"{API}/team-members/{members[0]['id']}/")
        assert response.status_code == 204
        assert [m['name'] for m in api_client.get(f'{API}/team-members/').data] == ['Zoe']

    def test_blank_name_is_ignored(self, api_client):
        response = api_client.post(f'{API}/team-members/', {'name': ''}, format='json')
        assert response.status_code == 200
        assert response.data == []

    def test_removed_member_leaves_dangling_assignee(self, api_client, project):
        member = api_client.post(f'{API}/team-members/', {'name': 'Dana'}, format='json').data[0]
        api_client.patch(step_url(project, 0), {'assignee': 'Dana'}, format='json')

        api_client.delete(f"{API}/team-members/{member['id']}/")

        step = api_client.get(f"{API}/projects/{project['id']}/").data['steps'][0]
        assert step['assignee'] == 'Dana'
        assert step['assignee_known'] is False

    def test_unknown_member(self, api_client):
        assert api_client.delete(f'{API}/team-members/{uuid.uuid4()}/').status_code == 404


class TestStoreFailures:

    def test_manager_error_is_returned(self, api_client, monkeypatch):
        class FailingStore(InMemoryRecordStore):
            def update(self, kind, record_id, fields):
                raise RecordStoreError('permission denied', kind.value, 'update')

        store = FailingStore()
        store.insert(EntityKind.WORKFLOW_TEMPLATES, {'name': 'Script', 'step_order': 1})
        monkeypatch.setattr('presentation.api.v1.views.base.get_record_store', lambda: store)

        project = api_client.post(f'{API}/projects/', {
            'name': 'Promo',
            'client': 'Acme',
            'start_date': '2024-03-01',
            'end_date': '2024-03-31',
        }, format='json').data

        response = api_client.patch(step_url(project, 0), {'status': 'completed'}, format='json')
        assert response.status_code == 400
        assert response.data == {'error': 'Failed to update step: permission denied'}

    def test_failed_load(self, api_client, monkeypatch):
        class DownStore(InMemoryRecordStore):
            def select(self, kind, filters=None, order_by=None):
                raise RecordStoreError('could not connect to server', kind.value, 'select')

        monkeypatch.setattr('presentation.api.v1.views.base.get_record_store', DownStore)

        assert api_client.get(f'{API}/projects/').status_code == 503

        response = api_client.get(f'{API}/state/')
        assert response.status_code == 200
        assert response.data['error'] == 'Failed to load data: could not connect to server'
