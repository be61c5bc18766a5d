"""
Project Domain - Projects and their workflow steps.

This domain handles the execution of projects:
- Creating projects with steps snapshotted from the workflow template
- Tracking step status, assignee, due date and estimate
- Deriving completion percentage and project status
- Advancing the next pending step when a step completes
"""
