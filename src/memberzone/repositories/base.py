"""Base repository class for MongoDB data access."""

from typing import Any, ClassVar, Generic, Optional, TypeVar

from pymongo.database import Database

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """Base class for collection-backed repositories.

    Subclasses must set:
        COLLECTION: MongoDB collection name
        MODEL_CLASS: Model class with from_dict()/to_dict() methods

    Override _to_key() for collections whose ``_id`` is not the plain string
    the application passes around.
    """

    COLLECTION: ClassVar[str]
    MODEL_CLASS: ClassVar[type]

    def __init__(self, db: Database):
        self.collection = db[self.COLLECTION]

    def _to_key(self, item_id: str) -> Optional[Any]:
        """Map an application-side id to the stored ``_id`` (None if invalid)."""
        return item_id

    def ensure_indexes(self) -> None:
        """Create the indexes this collection relies on."""

    def list_all(self) -> list[T]:
        """Get all documents."""
        return [self.MODEL_CLASS.from_dict(doc) for doc in self.collection.find()]

    def get_by_id(self, item_id: str) -> Optional[T]:
        """Get a document by ID."""
        key = self._to_key(item_id)
        if key is None:
            return None
        doc = self.collection.find_one({"_id": key})
        if doc:
            return self.MODEL_CLASS.from_dict(doc)
        return None

    def delete(self, item_id: str) -> bool:
        """Delete a document by ID."""
        key = self._to_key(item_id)
        if key is None:
            return False
        result = self.collection.delete_one({"_id": key})
        return result.deleted_count > 0
