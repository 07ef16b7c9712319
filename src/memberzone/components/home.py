"""Landing page."""

from typing import Optional

from fasthtml.common import *

from ..models.session import SessionUser


def HomePage(user: Optional[SessionUser]):
    """Landing page reflecting the current session state."""
    if user is None:
        return Div(
            H2("Welcome"),
            P("Sign up for an account or log in to see the members area.", cls="page-description"),
            Div(
                A("Sign up", href="/signup", cls="btn btn-primary"),
                A("Log in", href="/login", cls="btn btn-secondary"),
                cls="form-actions",
            ),
            cls="home-page",
        )

    return Div(
        H2(f"Hello, {user.name}!"),
        P(f"You are signed in as {user.email}.", cls="page-description"),
        Div(
            A("Go to members area", href="/members", cls="btn btn-primary"),
            A("Admin panel", href="/admin", cls="btn btn-secondary") if user.is_admin else None,
            A("Log out", href="/logout", cls="btn btn-secondary"),
            cls="form-actions",
        ),
        cls="home-page",
    )
