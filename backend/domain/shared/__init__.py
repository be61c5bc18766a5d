"""
Shared Kernel - building blocks used by every domain.
"""
