"""
Note Service
============

Application service that exposes note operations to a request-handling layer.
"""
from typing import Optional

from notekeeper.application.dto.note_dto import (
    NoteCreateRequest,
    NoteListResponse,
    NoteResponse,
    NoteStatsResponse,
    NoteUpdateRequest,
)
from notekeeper.domain.repositories.note_repository import NoteRepository


class NoteService:
    """
    Application service for note operations.

    Translates DTOs to repository calls. Domain errors from the repository
    propagate unchanged.
    """

    def __init__(self, note_repository: NoteRepository, page_size: int = 20):
        """
        Initialize service with repository.

        Args:
            note_repository: Repository for note persistence
            page_size: Default number of notes per listing page
        """
        self._repository = note_repository
        self._page_size = page_size

    def create_note(self, request: NoteCreateRequest) -> NoteResponse:
        """Create a note."""
        note = self._repository.create(request.title, request.content)
        return NoteResponse.from_entity(note)

    def get_note(self, note_id: str) -> NoteResponse:
        """Get a note by ID."""
        return NoteResponse.from_entity(self._repository.find_by_id(note_id))

    def list_notes(
        self,
        query: str = "",
        limit: Optional[int] = None,
        cursor: str = "",
    ) -> NoteListResponse:
        """
        List one page of notes, newest first.

        Args:
            query: Case-insensitive title pattern
            limit: Page size (defaults to the configured page size)
            cursor: next_cursor from the previous page

        Returns:
            Page of notes and the cursor for the following page
        """
        page_size = limit if limit is not None else self._page_size
        notes = self._repository.list(query=query, limit=page_size, cursor=cursor)
        next_cursor = notes[-1].id if len(notes) == page_size else None
        return NoteListResponse(
            items=[NoteResponse.from_entity(note) for note in notes],
            next_cursor=next_cursor,
        )

    def update_note(self, note_id: str, request: NoteUpdateRequest) -> NoteResponse:
        """Apply a partial update."""
        note = self._repository.update(
            note_id,
            title=request.title,
            content=request.content,
        )
        return NoteResponse.from_entity(note)

    def delete_note(self, note_id: str) -> None:
        """Delete a note."""
        self._repository.delete(note_id)

    def get_stats(self) -> NoteStatsResponse:
        """Collection statistics."""
        return NoteStatsResponse.from_entity(self._repository.stats())
