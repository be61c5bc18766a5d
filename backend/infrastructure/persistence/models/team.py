"""
Team ORM Models.
"""

from django.db import models

from .base import BaseModel


class TeamMember(BaseModel):
    """A member of the shared team roster. Names are not unique-constrained."""
    
    name = models.CharField(
        max_length=200,
        verbose_name="Name"
    )
    
    class Meta:
        db_table = 'team_members'
        verbose_name = 'Team member'
        verbose_name_plural = 'Team members'
        ordering = ['name']
    
    def __str__(self):
        return self.name
