from typing import TYPE_CHECKING

from ...core.config import Settings
from ...domain.repositories.note_repository import NoteRepository
from ...application.services.note_service import NoteService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class NoteProvider:
    """Note service provider - registers note-related services"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register note service.
        Service is created with repository from container.
        """
        container.register_factory(
            NoteService,
            lambda: NoteService(
                note_repository=container.get(NoteRepository),
                page_size=container.get(Settings).notes_page_size,
            ),
        )
