from .note import Note, NoteStats

__all__ = ["Note", "NoteStats"]
