"""
Base Views.

Common view mixins and base classes.
"""

import logging
from uuid import UUID

from rest_framework import viewsets, status
from rest_framework.exceptions import APIException, NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from application.session import TrackerSession
from application.state import AppState
from infrastructure.persistence.stores import get_record_store

logger = logging.getLogger('presentation')


class StoreUnavailable(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Record store unavailable."
    default_code = "store_unavailable"


class SessionViewMixin:
    """
    Mixin that opens a tracker session per request.

    The session loads the full state from the record store, so every
    request sees fresh data.
    """

    _session = None

    def get_session(self) -> TrackerSession:
        if self._session is None:
            self._session = TrackerSession.open(get_record_store())
        return self._session

    def get_serializer_context(self):
        return {
            'request': self.request,
            'view': self,
            'team_members': self.get_session().snapshot.team_members,
        }

    def parse_id(self, value, label: str = 'Object') -> UUID:
        """Path ids that are not UUIDs cannot exist."""
        try:
            return UUID(str(value))
        except ValueError:
            raise NotFound(f"{label} with id '{value}' not found")

    def error_response(self, state: AppState) -> Response:
        logger.warning("Operation failed: %s", state.error)
        return Response({'error': state.error}, status=status.HTTP_400_BAD_REQUEST)


class BaseSessionViewSet(SessionViewMixin, viewsets.ViewSet):
    """
    Base viewset over a tracker session.

    There is no authentication: everyone may read and write.
    """
    permission_classes = [AllowAny]
    # Views that render the error themselves set this
    serve_failed_load = False

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        state = self.get_session().snapshot
        if state.has_error and not self.serve_failed_load:
            logger.error("Session load failed: %s", state.error)
            raise StoreUnavailable(state.error)
