"""Authentication routes for signup, login and logout."""

from fasthtml.common import *
from starlette.responses import RedirectResponse

from .utils import get_session_user, start_session
from ..components.auth_forms import LoginPage, SignupPage
from ..components.layout import AppShell
from ..middleware import SESSION_KEY
from ..services.auth import AuthenticationError
from ..services.validation import FormValidationError


def register(app, rt, ctx):
    """Register authentication routes."""
    auth_service = ctx.auth_service

    @app.get("/signup")
    def signup_page(req):
        """Display signup form."""
        return AppShell(user=get_session_user(req), content=SignupPage(), title="Sign up")

    @app.post("/signup")
    def signup_submit(req, sess, name: str = "", email: str = "", password: str = ""):
        """Create an account and sign the new user in."""
        try:
            session = auth_service.signup(name, email, password)
        except FormValidationError as e:
            return AppShell(
                user=get_session_user(req),
                content=SignupPage(error_message=str(e), name=name, email=email),
                title="Sign up",
            )

        auth_service.logout(sess.get(SESSION_KEY))
        start_session(sess, session)
        return RedirectResponse("/members", status_code=303)

    @app.get("/login")
    def login_page(req):
        """Display login form."""
        return AppShell(user=get_session_user(req), content=LoginPage(), title="Log in")

    @app.post("/login")
    def login_submit(req, sess, email: str = "", password: str = ""):
        """Process login form submission."""
        try:
            session = auth_service.login(email, password)
        except (FormValidationError, AuthenticationError) as e:
            return AppShell(
                user=get_session_user(req),
                content=LoginPage(error_message=str(e), email=email),
                title="Log in",
            )

        auth_service.logout(sess.get(SESSION_KEY))
        start_session(sess, session)
        return RedirectResponse("/members", status_code=303)

    @app.get("/logout")
    def logout(sess):
        """Destroy the session and return to the landing page."""
        auth_service.logout(sess.get(SESSION_KEY))
        sess.clear()
        return RedirectResponse("/", status_code=303)
