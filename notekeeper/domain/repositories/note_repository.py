"""
Note Repository Interface
=========================

Abstract interface for note data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from notekeeper.domain.models.note import Note, NoteStats


class NoteRepository(ABC):
    """
    Abstract repository for note persistence operations.

    Every operation accepts an optional ``timeout`` in seconds that bounds
    the time spent waiting on the store.
    """

    @abstractmethod
    def create(self, title: str, content: str, *, timeout: Optional[float] = None) -> Note:
        """
        Create a new note.

        Args:
            title: Unique note title
            content: Note body

        Returns:
            Persisted note including its store-assigned ID

        Raises:
            ConflictError: If a note with this title already exists
            StoreError: On any other persistence failure
        """
        pass

    @abstractmethod
    def find_by_id(self, note_id: str, *, timeout: Optional[float] = None) -> Note:
        """
        Find a note by its ID.

        Raises:
            NotFoundError: If the ID is malformed or no note matches
        """
        pass

    @abstractmethod
    def list(
        self,
        query: str = "",
        limit: int = 20,
        cursor: str = "",
        *,
        timeout: Optional[float] = None,
    ) -> List[Note]:
        """
        List notes, newest first.

        Args:
            query: Case-insensitive pattern matched against the title (empty = all)
            limit: Maximum number of notes to return
            cursor: ID of the last note of the previous page (empty = first page)

        Returns:
            Notes ordered by ID descending; empty list when nothing matches

        Raises:
            InvalidCursorError: If the cursor is not a valid note ID
        """
        pass

    @abstractmethod
    def update(
        self,
        note_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Note:
        """
        Partially update a note. ``None`` leaves a field unchanged.

        Returns:
            The note as stored after the update

        Raises:
            NotFoundError: If the ID is malformed or no note matches
            ConflictError: If the new title belongs to another note
        """
        pass

    @abstractmethod
    def delete(self, note_id: str, *, timeout: Optional[float] = None) -> None:
        """
        Delete a note.

        Raises:
            NotFoundError: If the ID is malformed or nothing was removed
        """
        pass

    @abstractmethod
    def stats(self, *, timeout: Optional[float] = None) -> NoteStats:
        """Count notes and average their content length."""
        pass
