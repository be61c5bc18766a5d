"""
Project ORM Models.

Models for projects and their workflow steps.
"""

from django.core.validators import MinValueValidator
from django.db import models

from .base import BaseModel


class PriorityChoices(models.TextChoices):
    """Project priority choices."""
    
    LOW = 'low', 'Low'
    MEDIUM = 'medium', 'Medium'
    HIGH = 'high', 'High'


class StepStatusChoices(models.TextChoices):
    """Project step status choices. Any status may follow any other."""
    
    PENDING = 'pending', 'Pending'
    IN_PROGRESS = 'in-progress', 'In progress'
    COMPLETED = 'completed', 'Completed'
    BLOCKED = 'blocked', 'Blocked'


class Project(BaseModel):
    """
    Project - a piece of video-production work for a client.
    
    Steps are a SNAPSHOT of the workflow template at creation time;
    template changes never reach existing projects.
    """
    
    name = models.CharField(
        max_length=500,
        verbose_name="Name"
    )
    client = models.CharField(
        max_length=500,
        verbose_name="Client"
    )
    start_date = models.DateField(
        verbose_name="Start date"
    )
    end_date = models.DateField(
        verbose_name="Target end date"
    )
    priority = models.CharField(
        max_length=10,
        choices=PriorityChoices.choices,
        default=PriorityChoices.MEDIUM,
        verbose_name="Priority"
    )
    description = models.TextField(
        blank=True,
        default='',
        verbose_name="Description"
    )
    
    class Meta:
        db_table = 'projects'
        verbose_name = 'Project'
        verbose_name_plural = 'Projects'
        ordering = ['-created_at']
    
    def __str__(self):
        return f"{self.name} ({self.client})"


class ProjectStep(BaseModel):
    """
    A workflow step instantiated for one project.
    
    assignee holds a team member's NAME, not a foreign key, so removing
    a member leaves the name on the steps it was assigned to.
    """
    
    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='project_steps',
        verbose_name="Project"
    )
    name = models.CharField(
        max_length=200,
        verbose_name="Name"
    )
    step_order = models.PositiveIntegerField(
        default=0,
        verbose_name="Step order"
    )
    status = models.CharField(
        max_length=20,
        choices=StepStatusChoices.choices,
        default=StepStatusChoices.PENDING,
        db_index=True,
        verbose_name="Status"
    )
    assignee = models.CharField(
        max_length=200,
        null=True,
        blank=True,
        verbose_name="Assignee"
    )
    due_date = models.DateField(
        null=True,
        blank=True,
        verbose_name="Due date"
    )
    estimated_days = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
        verbose_name="Estimated days"
    )
    
    class Meta:
        db_table = 'project_steps'
        verbose_name = 'Project step'
        verbose_name_plural = 'Project steps'
        ordering = ['project', 'step_order']
    
    def __str__(self):
        return f"{self.project_id}: {self.step_order}. {self.name}"
