from unittest.mock import MagicMock

import mongomock
import pytest

from notekeeper.core import config
from notekeeper.infrastructure.db.mongo_note_repository import MongoNoteRepository


@pytest.fixture(autouse=True)
def settings_env(monkeypatch):
    monkeypatch.setenv('TIMEZONE', 'UTC')
    monkeypatch.setenv('DB_NAME', 'notekeeper_test')
    config.reset_settings()
    yield
    config.reset_settings()


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture
def database(mongo_client):
    return mongo_client['notekeeper_test']


@pytest.fixture
def repo(database):
    return MongoNoteRepository(database)


@pytest.fixture
def collection():
    """A collection double for asserting exactly which store calls are issued."""
    return MagicMock()


@pytest.fixture
def mock_repo(collection):
    database = MagicMock()
    database.get_collection.return_value = collection
    return MongoNoteRepository(database)
