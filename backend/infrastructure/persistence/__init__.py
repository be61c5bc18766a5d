"""
Persistence - Django ORM models and record store backends.
"""
