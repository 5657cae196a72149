from typing import TYPE_CHECKING

from ...core.config import Settings
from ...domain.repositories.note_repository import NoteRepository
from ...infrastructure.db.mongo_note_repository import MongoNoteRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Each repository receives the database handle from the database provider.
        """
        def build_note_repository() -> NoteRepository:
            settings = container.get(Settings)
            database = container.get("mongo_client").get_database()
            return MongoNoteRepository(database, collection_name=settings.notes_collection)
        
        container.register_factory(NoteRepository, build_note_repository)
