from typing import TYPE_CHECKING

from ...core.config import Settings
from ...infrastructure.db.mongo_connection import MongoClientManager

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB client manager.
        
        The connection itself is opened lazily, the first time a repository
        asks for the database.
        """
        if "mongo_client" in container.instances:
            return
        settings = container.get(Settings)
        container.register_factory("mongo_client", lambda: MongoClientManager(settings))
