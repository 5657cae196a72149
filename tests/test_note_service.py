from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from notekeeper.application.dto.note_dto import NoteCreateRequest, NoteUpdateRequest
from notekeeper.application.services.note_service import NoteService
from notekeeper.domain.exceptions import ConflictError, NotFoundError
from notekeeper.domain.models.note import NoteStats
from notekeeper.domain.repositories.note_repository import NoteRepository


@pytest.fixture
def service(repo):
    return NoteService(repo, page_size=2)


def test_create_and_get(service):
    created = service.create_note(NoteCreateRequest(title='T1', content='C1'))
    got = service.get_note(created.id)
    assert got == created
    assert got.model_dump(by_alias=True)['createdAt'] == created.created_at


def test_create_conflict_propagates(service):
    service.create_note(NoteCreateRequest(title='T1'))
    with pytest.raises(ConflictError):
        service.create_note(NoteCreateRequest(title='T1', content='other'))


def test_create_request_requires_title():
    with pytest.raises(ValidationError):
        NoteCreateRequest(title='')


def test_update_leaves_unset_fields(service):
    created = service.create_note(NoteCreateRequest(title='T1', content='C1'))
    updated = service.update_note(created.id, NoteUpdateRequest(content='C2'))
    assert updated.title == 'T1'
    assert updated.content == 'C2'


def test_list_pages(service):
    ids = [service.create_note(NoteCreateRequest(title=f'N{i}')).id for i in range(3)]

    first = service.list_notes()
    assert [item.id for item in first.items] == [ids[2], ids[1]]
    assert first.next_cursor == ids[1]

    second = service.list_notes(cursor=first.next_cursor)
    assert [item.id for item in second.items] == [ids[0]]
    assert second.next_cursor is None


def test_list_explicit_limit(service):
    for i in range(3):
        service.create_note(NoteCreateRequest(title=f'N{i}'))
    page = service.list_notes(limit=3)
    assert len(page.items) == 3
    assert page.model_dump(by_alias=True)['nextCursor'] == page.items[-1].id


def test_delete(service):
    created = service.create_note(NoteCreateRequest(title='T1'))
    service.delete_note(created.id)
    with pytest.raises(NotFoundError):
        service.get_note(created.id)


def test_stats_aliases():
    repository = MagicMock(spec=NoteRepository)
    repository.stats.return_value = NoteStats(total_notes=2, avg_content_length=4.0)
    stats = NoteService(repository).get_stats()
    assert stats.model_dump(by_alias=True) == {'totalNotes': 2, 'avgContentLength': 4.0}
