"""User-related data models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

import bcrypt

# bcrypt work factor
BCRYPT_ROUNDS = 10


class UserRole(Enum):
    """User authorization roles."""

    USER = "user"
    ADMIN = "admin"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """A registered user stored in MongoDB."""

    name: str
    email: str
    role: UserRole = UserRole.USER
    password_hash: str = ""
    id: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @property
    def is_admin(self) -> bool:
        """Check if user has admin privileges."""
        return self.role == UserRole.ADMIN

    def set_password(self, plaintext: str) -> None:
        """Hash and store a plaintext password."""
        self.password_hash = bcrypt.hashpw(
            plaintext.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
        ).decode("utf-8")
        self.updated_at = _utcnow()

    def verify_password(self, plaintext: str) -> bool:
        """Verify a plaintext password against the stored hash."""
        if not self.password_hash:
            return False
        try:
            return bcrypt.checkpw(
                plaintext.encode("utf-8"), self.password_hash.encode("utf-8")
            )
        except (ValueError, TypeError):
            return False

    def to_dict(self) -> dict:
        """Convert to dictionary for MongoDB storage.

        The ``_id`` is left out; MongoDB assigns it on insert.
        """
        return {
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "password_hash": self.password_hash,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Create from a MongoDB document."""
        doc_id = data.get("_id")
        return cls(
            name=data.get("name", ""),
            email=data.get("email", ""),
            role=UserRole(data.get("role", UserRole.USER.value)),
            password_hash=data.get("password_hash", ""),
            id=str(doc_id) if doc_id is not None else None,
            created_at=data.get("created_at") or _utcnow(),
            updated_at=data.get("updated_at") or _utcnow(),
        )
