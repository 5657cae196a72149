"""
Note Model
==========

Domain models for the note store.
These are pure domain objects with no infrastructure dependencies.
"""
from datetime import datetime
from typing import Any, Dict
from dataclasses import dataclass

from notekeeper.domain.constants.note_fields import NoteFields
from notekeeper.utils.datetime_utils import to_iso


@dataclass
class Note:
    """
    Note domain model.
    
    `id` is the hex form of the store-assigned identifier. `title` is unique
    across the collection. `created_at` never changes after creation;
    `updated_at` is refreshed on every update.
    """
    id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    
    def to_dict(self) -> Dict[str, Any]:
        """External representation with ISO 8601 timestamps."""
        return {
            "id": self.id,
            NoteFields.TITLE: self.title,
            NoteFields.CONTENT: self.content,
            NoteFields.CREATED_AT: to_iso(self.created_at),
            NoteFields.UPDATED_AT: to_iso(self.updated_at),
        }


@dataclass(frozen=True)
class NoteStats:
    """Aggregate statistics over the whole notes collection."""
    total_notes: int = 0
    avg_content_length: float = 0.0
