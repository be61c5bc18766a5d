"""
Workflow Serializers.

Serializers for the workflow template steps.
"""

from typing import List

from rest_framework import serializers

from domain.workflow.updates import (
    ChangeStepTemplateEstimate,
    RenameStepTemplate,
    ReorderStepTemplate,
    TemplateUpdate,
)
from .base import EntitySerializer, PartialUpdateSerializer


class WorkflowStepSerializer(EntitySerializer):
    name = serializers.CharField(read_only=True)
    order = serializers.IntegerField(read_only=True)
    estimated_days = serializers.IntegerField(read_only=True)


class WorkflowStepCreateSerializer(serializers.Serializer):
    """A blank name is a no-op, not an error."""

    name = serializers.CharField(max_length=255, allow_blank=True)
    estimated_days = serializers.IntegerField(min_value=1, default=1)


class WorkflowStepUpdateSerializer(PartialUpdateSerializer):
    name = serializers.CharField(max_length=255, required=False)
    order = serializers.IntegerField(min_value=0, required=False)
    estimated_days = serializers.IntegerField(min_value=1, required=False)

    def to_updates(self) -> List[TemplateUpdate]:
        data = self.validated_data
        updates: List[TemplateUpdate] = []
        if 'name' in data:
            updates.append(RenameStepTemplate(data['name']))
        if 'order' in data:
            updates.append(ReorderStepTemplate(data['order']))
        if 'estimated_days' in data:
            updates.append(ChangeStepTemplateEstimate(data['estimated_days']))
        return updates
