"""
Project Serializers.

Serializers for projects and their steps. Progress and status are
derived from the steps on every read.
"""

from typing import List

from rest_framework import serializers

from application.services import ProjectInput
from domain.project.services import compute_progress, compute_status
from domain.project.updates import (
    AssignStep,
    EstimateStep,
    ScheduleStep,
    SetStepStatus,
    StepUpdate,
)
from domain.shared.value_objects import Priority, StepStatus
from .base import EntitySerializer, PartialUpdateSerializer


class ProjectStepSerializer(EntitySerializer):
    """
    Step of a project.

    `assignee_known` tells whether the assignee name still matches a
    team member; it is null for unassigned steps or when the roster is
    not in the serializer context.
    """

    project_id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    order = serializers.IntegerField(read_only=True)
    status = serializers.CharField(source='status.value', read_only=True)
    assignee = serializers.CharField(read_only=True, allow_null=True)
    assignee_known = serializers.SerializerMethodField()
    due_date = serializers.DateField(read_only=True, allow_null=True)
    estimated_days = serializers.IntegerField(read_only=True)

    def get_assignee_known(self, obj):
        members = self.context.get('team_members')
        if members is None or not obj.assignee:
            return None
        return not obj.has_dangling_assignee(members)


class ProjectListSerializer(EntitySerializer):
    """List serializer for projects."""

    name = serializers.CharField(read_only=True)
    client = serializers.CharField(read_only=True)
    start_date = serializers.DateField(read_only=True)
    end_date = serializers.DateField(read_only=True)
    priority = serializers.CharField(source='priority.value', read_only=True)
    description = serializers.CharField(read_only=True)
    progress = serializers.SerializerMethodField()
    status = serializers.SerializerMethodField()
    steps_total = serializers.SerializerMethodField()
    steps_completed = serializers.IntegerField(source='completed_steps_count', read_only=True)

    def get_progress(self, obj) -> int:
        return compute_progress(obj)

    def get_status(self, obj) -> str:
        return compute_status(obj).value

    def get_steps_total(self, obj) -> int:
        return len(obj.steps)


class ProjectDetailSerializer(ProjectListSerializer):
    """Detail serializer with the ordered steps."""

    steps = ProjectStepSerializer(many=True, read_only=True)


class ProjectCreateSerializer(serializers.Serializer):
    """Input for a new project; steps come from the workflow template."""

    name = serializers.CharField(max_length=500)
    client = serializers.CharField(max_length=500)
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    priority = serializers.ChoiceField(
        choices=[p.value for p in Priority],
        default=Priority.MEDIUM.value
    )
    description = serializers.CharField(required=False, allow_blank=True, default='')

    def to_input(self) -> ProjectInput:
        return ProjectInput(**self.validated_data)


class StepUpdateSerializer(PartialUpdateSerializer):
    """
    Partial update of a project step.

    An empty or null assignee unassigns the step; a null due date
    clears it. The status is applied last so that a completion in the
    same request still advances the workflow.
    """

    assignee = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    due_date = serializers.DateField(required=False, allow_null=True)
    estimated_days = serializers.IntegerField(min_value=1, required=False)
    status = serializers.ChoiceField(choices=[s.value for s in StepStatus], required=False)

    def to_updates(self) -> List[StepUpdate]:
        data = self.validated_data
        updates: List[StepUpdate] = []
        if 'assignee' in data:
            updates.append(AssignStep(data['assignee']))
        if 'due_date' in data:
            updates.append(ScheduleStep(data['due_date']))
        if 'estimated_days' in data:
            updates.append(EstimateStep(data['estimated_days']))
        if 'status' in data:
            updates.append(SetStepStatus(data['status']))
        return updates
