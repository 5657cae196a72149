import mongomock

from notekeeper.application.services.note_service import NoteService
from notekeeper.core.config import Settings
from notekeeper.di.container import DIContainer
from notekeeper.domain.repositories.note_repository import NoteRepository
from notekeeper.infrastructure.db.mongo_connection import MongoClientManager
from notekeeper.infrastructure.db.mongo_note_repository import MongoNoteRepository


def container(monkeypatch, client=None):
    monkeypatch.setenv('NOTES_COLLECTION', 'my_notes')
    monkeypatch.setenv('NOTES_PAGE_SIZE', '7')
    settings = Settings()
    manager = MongoClientManager(settings, client=client or mongomock.MongoClient())
    return DIContainer(settings=settings, mongo_client=manager)


def test_wires_repository_and_service(monkeypatch):
    client = mongomock.MongoClient()
    c = container(monkeypatch, client)

    repository = c.get(NoteRepository)
    assert isinstance(repository, MongoNoteRepository)
    assert c.get(NoteRepository) is repository

    service = c.get(NoteService)
    assert c.get(NoteService) is service

    repository.create('T', 'C')
    assert client['notekeeper_test']['my_notes'].count_documents({}) == 1
    assert len(service.list_notes().items) == 1


def test_lookup_is_lazy(monkeypatch):
    c = container(monkeypatch)
    assert NoteRepository not in c.instances
    assert NoteService not in c.instances


def test_close(monkeypatch):
    c = container(monkeypatch)
    manager = c.get('mongo_client')
    manager.get_database()
    c.close()
    assert manager._client is None
