"""
API Views.
"""
