"""
Workflow Views.

API views for the workflow template that new projects copy.
"""

from rest_framework import status
from rest_framework.response import Response

from domain.shared.exceptions import EntityNotFoundException
from ..serializers.workflow import (
    WorkflowStepSerializer,
    WorkflowStepCreateSerializer,
    WorkflowStepUpdateSerializer,
)
from .base import BaseSessionViewSet


class WorkflowStepViewSet(BaseSessionViewSet):
    """
    ViewSet for workflow template steps.

    Endpoints:
    - GET /workflow-steps/ - list steps in order
    - POST /workflow-steps/ - append a step (blank names are ignored)
    - PATCH /workflow-steps/{id}/ - rename, reorder or re-estimate a step
    - DELETE /workflow-steps/{id}/ - remove a step

    Changes never touch steps of existing projects.
    """

    def list(self, request):
        return self._template_response(self.get_session().snapshot)

    def create(self, request):
        serializer = WorkflowStepCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        session = self.get_session()
        before = len(session.snapshot.workflow_templates)
        state = session.add_workflow_step(
            serializer.validated_data['name'],
            serializer.validated_data['estimated_days']
        )
        if state.has_error:
            return self.error_response(state)

        added = len(state.workflow_templates) > before
        return self._template_response(
            state,
            status.HTTP_201_CREATED if added else status.HTTP_200_OK
        )

    def partial_update(self, request, pk=None):
        template_id = self._existing_id(pk)
        serializer = WorkflowStepUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        state = self.get_session().update_workflow_step(template_id, *serializer.to_updates())
        if state.has_error:
            return self.error_response(state)
        return self._template_response(state)

    def destroy(self, request, pk=None):
        template_id = self._existing_id(pk)
        state = self.get_session().remove_workflow_step(template_id)
        if state.has_error:
            return self.error_response(state)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _existing_id(self, pk):
        template_id = self.parse_id(pk, 'WorkflowStepTemplate')
        templates = self.get_session().snapshot.workflow_templates
        if not any(template.has_id(template_id) for template in templates):
            raise EntityNotFoundException('WorkflowStepTemplate', pk)
        return template_id

    def _template_response(self, state, status_code=status.HTTP_200_OK):
        return Response(
            WorkflowStepSerializer(state.workflow_templates, many=True).data,
            status=status_code
        )
