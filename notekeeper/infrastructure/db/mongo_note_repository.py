"""
MongoDB Note Repository
=======================

Concrete implementation of NoteRepository using MongoDB.
"""
import logging
import math
from contextlib import nullcontext
from typing import Any, ContextManager, Dict, List, Optional

import pymongo
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from notekeeper.domain.constants.note_fields import NoteFields
from notekeeper.domain.exceptions import (
    ConflictError,
    InvalidCursorError,
    NotFoundError,
    StoreError,
)
from notekeeper.domain.models.note import Note, NoteStats
from notekeeper.domain.repositories.note_repository import NoteRepository
from notekeeper.utils.datetime_utils import as_aware, now, to_store_precision

logger = logging.getLogger(__name__)


def _parse_id(token: Any) -> Optional[ObjectId]:
    """Parse a 24-char hex token into an ObjectId, or None if malformed."""
    if not isinstance(token, str):
        return None
    try:
        return ObjectId(token)
    except (InvalidId, TypeError):
        return None


def _deadline(timeout: Optional[float]) -> ContextManager:
    """Bound every store call made inside the block by ``timeout`` seconds."""
    if timeout is None:
        return nullcontext()
    return pymongo.timeout(timeout)


def _round_half_up(value: float, digits: int = 2) -> float:
    ratio = 10 ** digits
    return math.floor(value * ratio + 0.5) / ratio


class MongoNoteRepository(NoteRepository):
    """
    MongoDB implementation of NoteRepository.

    The database handle is owned by the caller; the repository only binds
    the notes collection and makes sure the unique title index exists.
    """

    COLLECTION_NAME = "notes"

    def __init__(self, database: Database, collection_name: str = COLLECTION_NAME):
        """
        Bind the collection and create the unique index on title.

        Raises:
            StoreError: If the index cannot be created
        """
        self._collection: Collection = database.get_collection(collection_name)
        try:
            self._collection.create_index([(NoteFields.TITLE, ASCENDING)], unique=True)
        except PyMongoError as e:
            raise StoreError(f"Failed to create unique index on '{NoteFields.TITLE}': {e}") from e
        logger.info("Note repository bound to collection %s", collection_name)

    def _to_entity(self, doc: dict) -> Note:
        """Convert MongoDB document to Note entity."""
        return Note(
            id=str(doc[NoteFields.MONGO_ID]),
            title=doc[NoteFields.TITLE],
            content=doc[NoteFields.CONTENT],
            created_at=as_aware(doc[NoteFields.CREATED_AT]),
            updated_at=as_aware(doc[NoteFields.UPDATED_AT]),
        )

    def create(self, title: str, content: str, *, timeout: Optional[float] = None) -> Note:
        """Create a new note."""
        timestamp = to_store_precision(now())
        doc = {
            NoteFields.TITLE: title,
            NoteFields.CONTENT: content,
            NoteFields.CREATED_AT: timestamp,
            NoteFields.UPDATED_AT: timestamp,
        }
        try:
            with _deadline(timeout):
                result = self._collection.insert_one(doc)
        except DuplicateKeyError as e:
            logger.debug("Duplicate note title %r", title)
            raise ConflictError(title) from e
        except PyMongoError as e:
            logger.warning("Failed to create note %r: %s", title, e)
            raise StoreError(f"Failed to create note: {e}") from e

        return Note(
            id=str(result.inserted_id),
            title=title,
            content=content,
            created_at=timestamp,
            updated_at=timestamp,
        )

    def find_by_id(self, note_id: str, *, timeout: Optional[float] = None) -> Note:
        """Find a note by its ID."""
        oid = _parse_id(note_id)
        if oid is None:
            raise NotFoundError(note_id)

        try:
            with _deadline(timeout):
                doc = self._collection.find_one({NoteFields.MONGO_ID: oid})
        except PyMongoError as e:
            logger.warning("Failed to fetch note %s: %s", note_id, e)
            raise StoreError(f"Failed to fetch note: {e}") from e

        if not doc:
            raise NotFoundError(note_id)
        return self._to_entity(doc)

    def list(
        self,
        query: str = "",
        limit: int = 20,
        cursor: str = "",
        *,
        timeout: Optional[float] = None,
    ) -> List[Note]:
        """List notes newest first, optionally filtered by title and paged by cursor."""
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")

        filter_doc: Dict[str, Any] = {}
        if query:
            filter_doc[NoteFields.TITLE] = {"$regex": query, "$options": "i"}

        if cursor:
            after = _parse_id(cursor)
            if after is None:
                raise InvalidCursorError(cursor)
            filter_doc[NoteFields.MONGO_ID] = {"$lt": after}

        try:
            with _deadline(timeout):
                docs = (
                    self._collection.find(filter_doc)
                    .sort(NoteFields.MONGO_ID, DESCENDING)
                    .limit(limit)
                )
                return [self._to_entity(doc) for doc in docs]
        except PyMongoError as e:
            logger.warning("Failed to list notes: %s", e)
            raise StoreError(f"Failed to list notes: {e}") from e

    def update(
        self,
        note_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
    ) -> Note:
        """Partially update a note and return it as stored afterwards."""
        oid = _parse_id(note_id)
        if oid is None:
            raise NotFoundError(note_id)

        changes: Dict[str, Any] = {NoteFields.UPDATED_AT: to_store_precision(now())}
        if title is not None:
            changes[NoteFields.TITLE] = title
        if content is not None:
            changes[NoteFields.CONTENT] = content

        try:
            with _deadline(timeout):
                result = self._collection.find_one_and_update(
                    {NoteFields.MONGO_ID: oid},
                    {"$set": changes},
                    return_document=ReturnDocument.AFTER,
                )
        except DuplicateKeyError as e:
            logger.debug("Duplicate note title %r on update of %s", title, note_id)
            raise ConflictError(title) from e
        except PyMongoError as e:
            logger.warning("Failed to update note %s: %s", note_id, e)
            raise StoreError(f"Failed to update note: {e}") from e

        if not result:
            raise NotFoundError(note_id)
        return self._to_entity(result)

    def delete(self, note_id: str, *, timeout: Optional[float] = None) -> None:
        """Hard-delete a note."""
        oid = _parse_id(note_id)
        if oid is None:
            raise NotFoundError(note_id)

        try:
            with _deadline(timeout):
                result = self._collection.delete_one({NoteFields.MONGO_ID: oid})
        except PyMongoError as e:
            logger.warning("Failed to delete note %s: %s", note_id, e)
            raise StoreError(f"Failed to delete note: {e}") from e

        if result.deleted_count == 0:
            raise NotFoundError(note_id)

    def stats(self, *, timeout: Optional[float] = None) -> NoteStats:
        """Count notes and average content length in one aggregate pass."""
        pipeline = [
            {
                "$group": {
                    NoteFields.MONGO_ID: None,
                    NoteFields.TOTAL_NOTES: {"$sum": 1},
                    NoteFields.AVG_CONTENT_LENGTH: {
                        "$avg": {"$strLenCP": f"${NoteFields.CONTENT}"}
                    },
                }
            }
        ]
        try:
            with _deadline(timeout):
                results = list(self._collection.aggregate(pipeline))
        except PyMongoError as e:
            logger.warning("Failed to aggregate note stats: %s", e)
            raise StoreError(f"Failed to aggregate note stats: {e}") from e

        if not results:
            return NoteStats(total_notes=0, avg_content_length=0.0)

        row = results[0]
        avg = row.get(NoteFields.AVG_CONTENT_LENGTH) or 0.0
        return NoteStats(
            total_notes=int(row.get(NoteFields.TOTAL_NOTES, 0)),
            avg_content_length=_round_half_up(float(avg)),
        )
