"""Repository layer for database operations."""

from .base import BaseRepository
from .session_repo import SessionRepository
from .user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "SessionRepository",
    "UserRepository",
]
