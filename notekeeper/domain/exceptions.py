"""
Note Store Errors
=================

Domain-level error taxonomy raised by note repositories.
Callers map these to their own representation (HTTP status codes, exit codes).
"""


class NoteError(Exception):
    """Base class for all note store errors."""


class NotFoundError(NoteError):
    """The identifier is malformed or no note matches it."""
    
    def __init__(self, note_id: object):
        super().__init__(f"Note '{note_id}' not found")
        self.note_id = note_id


class ConflictError(NoteError):
    """A note with the same title already exists."""
    
    def __init__(self, title: str):
        super().__init__(f"Note with title '{title}' already exists")
        self.title = title


class StoreError(NoteError):
    """Any other failure talking to the backing store."""


class InvalidCursorError(NoteError, ValueError):
    """The pagination cursor is not a valid note identifier."""
    
    def __init__(self, cursor: object):
        super().__init__(f"Invalid pagination cursor '{cursor}'")
        self.cursor = cursor
