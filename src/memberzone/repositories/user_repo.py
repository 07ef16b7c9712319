"""Repository for user accounts."""

from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING

from ..models.user import User, UserRole
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for managing users in MongoDB."""

    COLLECTION = "users"
    MODEL_CLASS = User

    def _to_key(self, item_id: str) -> Optional[ObjectId]:
        """Users are keyed by ObjectId; malformed ids match nothing."""
        if not item_id:
            return None
        try:
            return ObjectId(item_id)
        except (InvalidId, TypeError):
            return None

    def ensure_indexes(self) -> None:
        self.collection.create_index([("email", ASCENDING)], unique=True)

    def create(self, user: User) -> User:
        """Insert a new user and record the assigned id on it.

        Raises:
            pymongo.errors.DuplicateKeyError: if the email is already taken
        """
        result = self.collection.insert_one(user.to_dict())
        user.id = str(result.inserted_id)
        return user

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by (lowercased) email."""
        doc = self.collection.find_one({"email": email})
        if doc:
            return User.from_dict(doc)
        return None

    def set_role(self, user_id: str, role: UserRole) -> bool:
        """Set a user's role. Returns False if no user has this id."""
        key = self._to_key(user_id)
        if key is None:
            return False
        result = self.collection.update_one(
            {"_id": key},
            {"$set": {"role": role.value, "updated_at": datetime.now(timezone.utc)}},
        )
        return result.matched_count > 0

    def count_admins(self) -> int:
        """Count the number of admin users."""
        return self.collection.count_documents({"role": UserRole.ADMIN.value})
