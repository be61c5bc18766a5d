"""
State Serializer.

The whole application snapshot in one payload.
"""

from rest_framework import serializers

from .project import ProjectDetailSerializer
from .team import TeamMemberSerializer
from .workflow import WorkflowStepSerializer


class AppStateSerializer(serializers.Serializer):
    projects = ProjectDetailSerializer(many=True, read_only=True)
    team_members = TeamMemberSerializer(many=True, read_only=True)
    workflow_templates = WorkflowStepSerializer(many=True, read_only=True)
    loading = serializers.BooleanField(read_only=True)
    error = serializers.CharField(read_only=True, allow_null=True)
