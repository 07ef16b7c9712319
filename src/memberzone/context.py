"""Application context for dependency injection."""

from dataclasses import dataclass

from .repositories.session_repo import SessionRepository
from .repositories.user_repo import UserRepository
from .services.auth import AuthService


@dataclass
class AppContext:
    """
    Central context object handed to every route module at registration.

    Usage:
        ctx = AppContext.from_db(init_db())
        # In routes:
        users = ctx.user_repo.list_all()
    """

    user_repo: UserRepository
    session_repo: SessionRepository
    auth_service: AuthService

    @classmethod
    def from_db(cls, db) -> "AppContext":
        """Build repositories and services on top of a database handle."""
        user_repo = UserRepository(db)
        session_repo = SessionRepository(db)
        return cls(
            user_repo=user_repo,
            session_repo=session_repo,
            auth_service=AuthService(user_repo, session_repo),
        )
