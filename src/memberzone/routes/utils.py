"""Shared utilities for route handlers: session access and access guards."""

from typing import Optional

from fasthtml.common import to_xml
from starlette.responses import HTMLResponse, RedirectResponse, Response

from ..components.errors import ForbiddenPage
from ..middleware import SESSION_KEY
from ..models.session import Session, SessionUser
from ..models.user import UserRole


def get_session_user(req) -> Optional[SessionUser]:
    """Get the session snapshot the beforeware placed on the request scope."""
    return req.scope.get("auth")


def start_session(sess, session: Session) -> None:
    """Bind a freshly issued server-side session to the cookie session."""
    sess.clear()
    sess[SESSION_KEY] = session.id


def page_response(page, status_code: int) -> HTMLResponse:
    """Render a full page with a non-200 status code."""
    return HTMLResponse(to_xml(page), status_code=status_code)


def require_authenticated(req) -> Response | None:
    """Redirect anonymous callers to the login page.

    Returns the redirect Response, or None if a session is present.
    """
    if get_session_user(req) is None:
        return RedirectResponse("/login", status_code=303)
    return None


def require_admin(req) -> Response | None:
    """Check that the caller is an admin.

    Anonymous callers are redirected to /login; signed-in users without the
    admin role get a 403 page naming who they are signed in as.
    """
    redirect = require_authenticated(req)
    if redirect:
        return redirect

    user = get_session_user(req)
    if user.role == UserRole.ADMIN:
        return None
    if user.role == UserRole.USER:
        return page_response(ForbiddenPage(user), status_code=403)
    raise ValueError(f"Unhandled role: {user.role!r}")
