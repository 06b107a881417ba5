"""
Question and answer service.

A CRUD service for questions stored in memory or in PostgreSQL, with
cached answer generation in front of a downstream answer service.
"""

__version__ = "0.1.0"
