"""
Project Views.

API views for projects and their steps.
"""

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from domain.shared.value_objects import STATUS_FILTER_ALL
from ..serializers.project import (
    ProjectListSerializer,
    ProjectDetailSerializer,
    ProjectCreateSerializer,
    StepUpdateSerializer,
)
from .base import BaseSessionViewSet

STEP_PATH = r'steps/(?P<step_id>[^/.]+)'


class ProjectViewSet(BaseSessionViewSet):
    """
    ViewSet for projects.

    Endpoints:
    - GET /projects/ - list projects (?search=, ?status=)
    - POST /projects/ - create project with steps from the workflow template
    - GET /projects/{id}/ - get project details with steps
    - DELETE /projects/{id}/ - delete project and its steps
    - PATCH /projects/{id}/steps/{step_id}/ - update a step
    - POST /projects/{id}/steps/{step_id}/toggle/ - toggle a step completed/pending
    """

    def list(self, request):
        """
        Newest projects first.

        `search` matches name or client, case-insensitively; `status`
        is one of not-started, in-progress, completed or all.
        """
        projects = self.get_session().filtered_projects(
            request.query_params.get('search', ''),
            request.query_params.get('status', STATUS_FILTER_ALL),
        )
        serializer = ProjectListSerializer(projects, many=True, context=self.get_serializer_context())
        return Response(serializer.data)

    def create(self, request):
        serializer = ProjectCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        session = self.get_session()
        known_ids = {project.id for project in session.snapshot.projects}
        state = session.create_project(serializer.to_input())
        if state.has_error:
            return self.error_response(state)

        created = [project for project in state.projects if project.id not in known_ids]
        if not created:
            # Stored, but removed again before the reload
            return Response(status=status.HTTP_201_CREATED)
        return Response(
            ProjectDetailSerializer(created[0], context=self.get_serializer_context()).data,
            status=status.HTTP_201_CREATED
        )

    def retrieve(self, request, pk=None):
        project = self.get_project(pk)
        return Response(ProjectDetailSerializer(project, context=self.get_serializer_context()).data)

    def destroy(self, request, pk=None):
        project = self.get_project(pk)
        state = self.get_session().delete_project(project.id)
        if state.has_error:
            return self.error_response(state)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['patch'], url_path=STEP_PATH, url_name='step')
    def update_step(self, request, pk=None, step_id=None):
        """
        Update a step's status, assignee, due date or estimate.

        Completing a step moves the next pending step to in-progress.
        """
        project = self.get_project(pk)
        step = project.get_step(self.parse_id(step_id, 'ProjectStep'))

        serializer = StepUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        state = self.get_session().update_step(project.id, step.id, *serializer.to_updates())
        return self._project_response(state, project.id)

    @action(detail=True, methods=['post'], url_path=STEP_PATH + '/toggle', url_name='step-toggle')
    def toggle_step(self, request, pk=None, step_id=None):
        """Completed steps go back to pending; any other step is completed."""
        project = self.get_project(pk)
        step = project.get_step(self.parse_id(step_id, 'ProjectStep'))

        state = self.get_session().toggle_step(project.id, step.id)
        return self._project_response(state, project.id)

    def get_project(self, pk):
        return self.get_session().snapshot.find_project(self.parse_id(pk, 'Project'))

    def _project_response(self, state, project_id):
        if state.has_error:
            return self.error_response(state)
        project = state.find_project(project_id)
        return Response(ProjectDetailSerializer(project, context=self.get_serializer_context()).data)
