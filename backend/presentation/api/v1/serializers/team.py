"""
Team Serializers.
"""

from rest_framework import serializers

from .base import EntitySerializer


class TeamMemberSerializer(EntitySerializer):
    name = serializers.CharField(read_only=True)


class TeamMemberCreateSerializer(serializers.Serializer):
    # Blank names are accepted here and ignored by the roster
    name = serializers.CharField(max_length=255, allow_blank=True)
