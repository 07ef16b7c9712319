"""Landing page and members area routes."""

import random

from fasthtml.common import *
from starlette.responses import RedirectResponse

from .utils import get_session_user
from ..components.home import HomePage
from ..components.layout import AppShell
from ..components.members import MEMBER_IMAGES, MembersPage


def register(app, rt, ctx):
    """Register landing page and members routes."""

    @app.get("/")
    def home(req):
        user = get_session_user(req)
        return AppShell(user=user, content=HomePage(user), title="Home")

    @app.get("/members")
    def members(req):
        """Members-only page.

        Anonymous visitors go back to the landing page rather than the
        login form (the admin guard sends them to /login instead).
        """
        user = get_session_user(req)
        if user is None:
            return RedirectResponse("/", status_code=303)

        image = random.choice(MEMBER_IMAGES)
        return AppShell(user=user, content=MembersPage(user, image), title="Members")
