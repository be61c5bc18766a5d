"""
Django project configuration.
"""
