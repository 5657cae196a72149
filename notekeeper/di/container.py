# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from ..infrastructure.db.mongo_connection import MongoClientManager
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    NoteProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (NoteProvider) - depend on repositories
    """
    
    def __init__(
        self,
        settings: Optional[Settings] = None,
        mongo_client: Optional[MongoClientManager] = None,
    ) -> None:
        super().__init__()
        self.register_singleton(Settings, settings or get_settings())
        if mongo_client is not None:
            self.register_singleton("mongo_client", mongo_client)
        self.setup()
    
    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        NoteProvider.register(self)
    
    def close(self) -> None:
        """Close the MongoDB connection if one was opened."""
        client = self.instances.get("mongo_client")
        if client is not None:
            client.close()


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)
    
    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
