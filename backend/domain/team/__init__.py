"""
Team Domain - the shared roster of team members.

Steps reference members by name only, so removing a member
leaves the name on any step it was assigned to.
"""
