"""
API v1 URL Configuration.

All API endpoints for version 1.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views.project import ProjectViewSet
from .views.state import StateViewSet
from .views.team import TeamMemberViewSet
from .views.workflow import WorkflowStepViewSet

# Create router
router = DefaultRouter()

# Application snapshot
router.register(r'state', StateViewSet, basename='state')

# Projects
router.register(r'projects', ProjectViewSet, basename='projects')

# Team & workflow template
router.register(r'team-members', TeamMemberViewSet, basename='team-members')
router.register(r'workflow-steps', WorkflowStepViewSet, basename='workflow-steps')

app_name = 'api_v1'

urlpatterns = [
    path('', include(router.urls)),
]
