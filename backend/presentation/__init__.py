"""
Presentation layer: the REST API.
"""
