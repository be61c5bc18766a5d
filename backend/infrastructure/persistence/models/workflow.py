"""
Workflow ORM Models.

The workflow template used to seed new projects' steps.
"""

from django.core.validators import MinValueValidator
from django.db import models

from .base import BaseModel


class WorkflowTemplate(BaseModel):
    """
    One step definition of the workflow template.
    
    step_order is ascending; gaps are allowed after deletions.
    """
    
    name = models.CharField(
        max_length=200,
        verbose_name="Name"
    )
    step_order = models.PositiveIntegerField(
        default=0,
        db_index=True,
        verbose_name="Step order"
    )
    estimated_days = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
        verbose_name="Estimated days"
    )
    
    class Meta:
        db_table = 'workflow_templates'
        verbose_name = 'Workflow step template'
        verbose_name_plural = 'Workflow step templates'
        ordering = ['step_order']
    
    def __str__(self):
        return f"{self.step_order}. {self.name}"
