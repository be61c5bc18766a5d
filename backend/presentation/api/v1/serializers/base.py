"""
Base Serializers.

Common serializer mixins and base classes.
"""

from rest_framework import serializers


class EntitySerializer(serializers.Serializer):
    """Read-only identity fields shared by every domain entity."""

    id = serializers.UUIDField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class PartialUpdateSerializer(serializers.Serializer):
    """
    Input serializer for PATCH bodies that map to typed updates.

    Every field is optional, but at least one must be given.
    """

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError(
                f"Provide at least one of: {', '.join(self.fields)}"
            )
        return attrs

    def to_updates(self):
        raise NotImplementedError
