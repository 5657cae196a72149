"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .note_provider import NoteProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "NoteProvider",
]
