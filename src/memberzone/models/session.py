"""Server-side session models."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from .user import User, UserRole

# Sessions expire this long after they are issued
SESSION_TTL = timedelta(hours=1)


@dataclass(frozen=True)
class SessionUser:
    """Point-in-time copy of a user taken when the session was issued.

    Not refreshed from the users collection: a role change only shows up
    after the user authenticates again.
    """

    name: str
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @classmethod
    def from_user(cls, user: User) -> "SessionUser":
        return cls(name=user.name, email=user.email, role=user.role)

    def to_dict(self) -> dict:
        """Convert to the stored session payload."""
        return {
            "name": self.name,
            "email": self.email,
            "user_type": self.role.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SessionUser":
        """Create from a stored session payload."""
        return cls(
            name=data["name"],
            email=data["email"],
            role=UserRole(data["user_type"]),
        )


@dataclass
class Session:
    """A session record keyed by an opaque token."""

    id: str
    user: SessionUser
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    def to_dict(self) -> dict:
        """Convert to dictionary for MongoDB storage."""
        return {
            "_id": self.id,
            "user": self.user.to_dict(),
            "created_at": self.created_at,
            "expires_at": self.expires_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        return cls(
            id=data["_id"],
            user=SessionUser.from_dict(data["user"]),
            created_at=data["created_at"],
            expires_at=data["expires_at"],
        )
