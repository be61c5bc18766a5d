"""
Team Views.
"""

from rest_framework import status
from rest_framework.response import Response

from domain.shared.exceptions import EntityNotFoundException
from ..serializers.team import TeamMemberSerializer, TeamMemberCreateSerializer
from .base import BaseSessionViewSet


class TeamMemberViewSet(BaseSessionViewSet):
    """
    ViewSet for the team roster.

    Endpoints:
    - GET /team-members/ - list members by name
    - POST /team-members/ - add a member (blank names are ignored)
    - DELETE /team-members/{id}/ - remove a member

    Create answers with the whole roster: 201 when a member was added,
    200 when the name was blank.
    """

    def list(self, request):
        members = self.get_session().snapshot.team_members
        return Response(TeamMemberSerializer(members, many=True).data)

    def create(self, request):
        serializer = TeamMemberCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        session = self.get_session()
        before = len(session.snapshot.team_members)
        state = session.add_member(serializer.validated_data['name'])
        if state.has_error:
            return self.error_response(state)

        added = len(state.team_members) > before
        return Response(
            TeamMemberSerializer(state.team_members, many=True).data,
            status=status.HTTP_201_CREATED if added else status.HTTP_200_OK
        )

    def destroy(self, request, pk=None):
        member_id = self.parse_id(pk, 'TeamMember')
        session = self.get_session()
        if not any(member.has_id(member_id) for member in session.snapshot.team_members):
            raise EntityNotFoundException('TeamMember', pk)

        state = session.remove_member(member_id)
        if state.has_error:
            return self.error_response(state)
        return Response(status=status.HTTP_204_NO_CONTENT)
