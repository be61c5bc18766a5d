"""
State Views.

The full application snapshot, and the reload that clears errors.
"""

from rest_framework.decorators import action
from rest_framework.response import Response

from ..serializers.state import AppStateSerializer
from .base import BaseSessionViewSet


class StateViewSet(BaseSessionViewSet):
    """
    Endpoints:
    - GET /state/ - projects, team members, workflow template, loading and error
    - POST /state/reload/ - reload everything from the store

    A failed load is reported in the `error` field, not as an HTTP error.
    """
    serve_failed_load = True

    def list(self, request):
        return self._state_response(self.get_session().snapshot)

    @action(detail=False, methods=['post'])
    def reload(self, request):
        return self._state_response(self.get_session().reload())

    def _state_response(self, state):
        return Response(AppStateSerializer(state, context=self.get_serializer_context()).data)
