"""Error pages."""

from typing import Optional

from fasthtml.common import *

from ..models.session import SessionUser
from .layout import Document


def ForbiddenPage(user: SessionUser):
    """403 page for signed-in users lacking the admin role."""
    return Document(
        user,
        Div(
            H2("403 - Forbidden"),
            P(
                f"You are logged in as {user.name} ({user.email}), "
                "but this page requires administrator access."
            ),
            A("Back to home", href="/"),
            cls="error-page",
        ),
        title="Forbidden",
    )


def NotFoundPage(user: Optional[SessionUser]):
    """404 page; keeps the session state in the header."""
    return Document(
        user,
        Div(
            H2("404 - Page not found"),
            P("The page you are looking for does not exist."),
            A("Back to home", href="/"),
            cls="error-page",
        ),
        title="Not Found",
    )


def ServerErrorPage():
    """Generic 500 page. Never shows exception details."""
    return Document(
        None,
        Div(
            H2("Something went wrong"),
            P("The server could not complete your request. Please try again later."),
            A("Back to home", href="/"),
            cls="error-page",
        ),
        title="Server Error",
    )
