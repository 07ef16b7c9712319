"""Authentication service for signup, login and session management."""

import logging
from typing import Optional

from ..models.session import Session, SessionUser
from ..models.user import User, UserRole
from ..repositories.session_repo import SessionRepository
from ..repositories.user_repo import UserRepository
from .validation import LoginForm, SignupForm, parse_form

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class AuthenticationError(Exception):
    """Raised when authentication fails."""

    pass


class AuthService:
    """Service for registering users and issuing sessions."""

    def __init__(self, user_repo: UserRepository, session_repo: SessionRepository):
        self.user_repo = user_repo
        self.session_repo = session_repo

    def signup(self, name: str, email: str, password: str) -> Session:
        """
        Register a new user and open a session for them.

        Args:
            name: Display name
            email: Email address, used as the login key
            password: Plain-text password (at least 5 characters)

        Returns:
            The new session

        Raises:
            FormValidationError: If the fields are malformed (nothing is stored)
            pymongo.errors.DuplicateKeyError: If the email is already registered
        """
        form = parse_form(SignupForm, name=name, email=email, password=password)

        user = User(name=form.name, email=form.email, role=UserRole.USER)
        user.set_password(form.password)
        self.user_repo.create(user)
        logger.info("New user signed up: %s", user.email)

        return self.session_repo.create(SessionUser.from_user(user))

    def login(self, email: str, password: str) -> Session:
        """
        Authenticate with email and password and open a session.

        Unknown email and wrong password raise the same error.

        Raises:
            FormValidationError: If the fields are malformed
            AuthenticationError: If credentials are invalid
        """
        form = parse_form(LoginForm, email=email, password=password)

        user = self.user_repo.get_by_email(form.email)
        if user is None or not user.verify_password(form.password):
            logger.info("Failed login attempt for %s", form.email)
            raise AuthenticationError(INVALID_CREDENTIALS)

        return self.session_repo.create(SessionUser.from_user(user))

    def resolve(self, session_id: Optional[str]) -> Optional[SessionUser]:
        """Look up the user snapshot for a session id (None if anonymous)."""
        if not session_id:
            return None
        session = self.session_repo.get(session_id)
        return session.user if session else None

    def logout(self, session_id: Optional[str]) -> None:
        """Destroy a session. Unknown ids are ignored."""
        if session_id:
            self.session_repo.delete(session_id)
