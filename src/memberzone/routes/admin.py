"""Admin routes for promoting and demoting users."""

import logging

from fasthtml.common import *
from starlette.responses import RedirectResponse

from .utils import get_session_user, require_admin
from ..components.admin import AdminUsersPage
from ..components.layout import AppShell
from ..models.user import UserRole

logger = logging.getLogger("memberzone")

# Notices passed back to the user list through the redirect
NOTICES = {
    "last-admin": "Cannot demote the last admin user.",
}


def register(app, rt, ctx):
    """Register user administration routes."""
    user_repo = ctx.user_repo

    @app.get("/admin")
    def admin_users(req, notice: str = ""):
        """List all users."""
        error = require_admin(req)
        if error:
            return error

        return AppShell(
            user=get_session_user(req),
            content=AdminUsersPage(
                user_repo.list_all(),
                get_session_user(req),
                notice=NOTICES.get(notice),
            ),
            title="Admin",
        )

    @app.post("/admin/promote/{user_id}")
    def promote_user(req, user_id: str):
        """Give a user the admin role. Unknown ids are ignored."""
        error = require_admin(req)
        if error:
            return error

        if user_repo.set_role(user_id, UserRole.ADMIN):
            logger.info(
                "%s promoted user %s to admin", get_session_user(req).email, user_id
            )
        return RedirectResponse("/admin", status_code=303)

    @app.post("/admin/demote/{user_id}")
    def demote_user(req, user_id: str):
        """Set a user's role back to user. Unknown ids are ignored."""
        error = require_admin(req)
        if error:
            return error

        target = user_repo.get_by_id(user_id)
        if target is None:
            return RedirectResponse("/admin", status_code=303)

        # Prevent demoting the last admin
        if target.role == UserRole.ADMIN and user_repo.count_admins() <= 1:
            logger.warning(
                "%s tried to demote the last admin %s",
                get_session_user(req).email,
                target.email,
            )
            return RedirectResponse("/admin?notice=last-admin", status_code=303)

        user_repo.set_role(user_id, UserRole.USER)
        logger.info(
            "%s demoted user %s", get_session_user(req).email, target.email
        )
        return RedirectResponse("/admin", status_code=303)
