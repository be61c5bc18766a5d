"""
Base ORM Models and Mixins.

Provides common functionality for all models:
- UUID primary keys
- Timestamps (created_at, updated_at)
"""

import uuid
from django.db import models


class TimeStampedMixin(models.Model):
    """Mixin for created_at and updated_at timestamps."""
    
    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        verbose_name="Created at"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name="Updated at"
    )
    
    class Meta:
        abstract = True


class BaseModel(TimeStampedMixin):
    """
    Base model with all common functionality.
    
    Includes:
    - UUID primary key
    - Timestamps (created_at, updated_at)
    """
    
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        verbose_name="ID"
    )
    
    class Meta:
        abstract = True
    
    def __str__(self):
        return str(self.id)
