"""Data models for the members site."""

from .user import User, UserRole
from .session import Session, SessionUser, SESSION_TTL

__all__ = [
    "User",
    "UserRole",
    "Session",
    "SessionUser",
    "SESSION_TTL",
]
