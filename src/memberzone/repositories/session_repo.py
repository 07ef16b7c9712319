"""Repository for server-side sessions."""

import logging
import secrets
from datetime import datetime, timezone
from typing import Optional

from ..models.session import SESSION_TTL, Session, SessionUser
from .base import BaseRepository

logger = logging.getLogger(__name__)


class SessionRepository(BaseRepository[Session]):
    """Session records keyed by an opaque token.

    MongoDB's TTL monitor purges expired documents about once a minute, so
    get() checks the expiry itself as well.
    """

    COLLECTION = "sessions"
    MODEL_CLASS = Session

    def ensure_indexes(self) -> None:
        self.collection.create_index("expires_at", expireAfterSeconds=0)

    def create(self, user: SessionUser) -> Session:
        """Issue a new session for a user snapshot."""
        now = datetime.now(timezone.utc)
        session = Session(
            id=secrets.token_urlsafe(32),
            user=user,
            created_at=now,
            expires_at=now + SESSION_TTL,
        )
        self.collection.insert_one(session.to_dict())
        return session

    def get(self, session_id: str) -> Optional[Session]:
        """Get a live session, or None if unknown or expired."""
        if not session_id:
            return None
        doc = self.collection.find_one({"_id": session_id})
        if not doc:
            return None
        try:
            session = Session.from_dict(doc)
        except (KeyError, ValueError) as e:
            logger.warning("Discarding malformed session document: %s", e)
            self.delete(session_id)
            return None
        if session.is_expired(datetime.now(timezone.utc)):
            self.delete(session_id)
            return None
        return session
