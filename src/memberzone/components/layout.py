"""Layout components for the application shell."""

from typing import Optional

from fasthtml.common import *

from ..models.session import SessionUser

APP_NAME = "MemberZone"


def AppShell(user: Optional[SessionUser], content, title: str = APP_NAME):
    """
    Main application shell with header navigation.

    Args:
        user: The session snapshot, or None for anonymous visitors
        content: The main content to display
        title: Page title
    """
    return (
        Title(f"{title} - {APP_NAME}"),
        Main(
            AppHeader(user),
            Div(content, cls="main-content"),
            cls="app-container",
        ),
    )


def Document(user: Optional[SessionUser], content, title: str = APP_NAME):
    """Standalone HTML document, for responses built outside a route's normal rendering."""
    page_title, body = AppShell(user, content, title)
    return Html(
        Head(
            page_title,
            Meta(charset="utf-8"),
            Link(rel="stylesheet", href="/css/app.css"),
        ),
        Body(body),
    )


def AppHeader(user: Optional[SessionUser]):
    """Application header with brand, navigation and session info."""
    return Header(
        A(
            Img(src="/img/logo.svg", alt=APP_NAME, width="32", height="32", cls="app-logo"),
            Span(APP_NAME, cls="app-brand-text"),
            href="/",
            cls="app-brand",
        ),
        Nav(
            A("Home", href="/", cls="nav-item"),
            A("Members", href="/members", cls="nav-item") if user else None,
            A("Admin", href="/admin", cls="nav-item") if user and user.is_admin else None,
            cls="app-nav",
        ),
        UserInfo(user),
        cls="app-header",
    )


def UserInfo(user: Optional[SessionUser]):
    """Signed-in identity with logout link, or login/signup links."""
    if user is None:
        return Div(
            A("Log in", href="/login"),
            A("Sign up", href="/signup", cls="btn btn-primary btn-small"),
            cls="user-info",
        )
    return Div(
        Span(f"Logged in as: {user.name}", cls="username"),
        A("Logout", href="/logout"),
        cls="user-info",
    )
