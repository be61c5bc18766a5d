"""
Workflow Domain - the configurable workflow template.

The template is the ordered list of step definitions that seeds
every new project's steps:
- Appending steps at the end of the order
- Renaming, reordering and re-estimating steps
- Removing steps without touching existing projects
"""
