"""
Note DTO
========

Pydantic models for note requests and responses.
Field aliases match the document field names used by the store.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from notekeeper.domain.models.note import Note, NoteStats


class NoteCreateRequest(BaseModel):
    """DTO for creating a note."""
    title: str = Field(..., min_length=1, description="Unique note title")
    content: str = Field("", description="Note body")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Shopping list",
                "content": "milk, bread",
            }
        }
    )


class NoteUpdateRequest(BaseModel):
    """DTO for a partial update. Omitted fields are left unchanged."""
    title: Optional[str] = Field(None, min_length=1, description="New title")
    content: Optional[str] = Field(None, description="New content")


class NoteResponse(BaseModel):
    """DTO for note data."""
    id: str
    title: str
    content: str
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, note: Note) -> "NoteResponse":
        return cls(
            id=note.id,
            title=note.title,
            content=note.content,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )


class NoteListResponse(BaseModel):
    """DTO for one page of notes."""
    items: List[NoteResponse]
    next_cursor: Optional[str] = Field(
        None,
        alias="nextCursor",
        description="Pass as cursor to fetch the next page; null when the page was not full",
    )

    model_config = ConfigDict(populate_by_name=True)


class NoteStatsResponse(BaseModel):
    """DTO for collection statistics."""
    total_notes: int = Field(..., alias="totalNotes")
    avg_content_length: float = Field(..., alias="avgContentLength")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_entity(cls, stats: NoteStats) -> "NoteStatsResponse":
        return cls(
            total_notes=stats.total_notes,
            avg_content_length=stats.avg_content_length,
        )
