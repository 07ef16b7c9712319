"""Admin user management page components."""

from typing import Optional

from fasthtml.common import *

from ..models.session import SessionUser
from ..models.user import User, UserRole


def AdminUsersPage(
    users: list[User],
    current_user: SessionUser,
    notice: Optional[str] = None,
):
    """User administration page.

    Args:
        users: All registered users.
        current_user: The admin viewing the page.
        notice: Optional message shown above the table.
    """
    return Div(
        H2("Users"),
        P(
            "Promote members to administrators or demote them back to regular users. "
            "Role changes apply the next time the user logs in.",
            cls="page-description",
        ),
        Div(notice, cls="error-message") if notice else None,
        UserTable(users, current_user),
        cls="admin-settings-page",
        id="admin-users-page",
    )


def UserTable(users: list[User], current_user: SessionUser):
    """Table listing every user with role actions."""
    if not users:
        return Div(
            P("No users have signed up yet.", cls="empty-message"),
            style="margin-top: 1rem;",
        )

    rows = [UserRow(user, is_self=(user.email == current_user.email)) for user in users]
    return Table(
        Thead(Tr(Th("Name"), Th("Email"), Th("Role"), Th("Joined"), Th("Actions"))),
        Tbody(*rows),
        cls="data-table",
    )


def UserRow(user: User, is_self: bool = False):
    """A single user row with a promote or demote button."""
    if user.role == UserRole.ADMIN:
        action = Form(
            Button("Demote", type="submit", cls="btn-secondary btn-small"),
            action=f"/admin/demote/{user.id}",
            method="post",
        )
    else:
        action = Form(
            Button("Promote", type="submit", cls="btn-primary btn-small"),
            action=f"/admin/promote/{user.id}",
            method="post",
        )

    return Tr(
        Td(user.name, " (you)" if is_self else ""),
        Td(user.email),
        Td(user.role.value, cls=f"role role-{user.role.value}"),
        Td(user.created_at.strftime("%Y-%m-%d %H:%M") if user.created_at else "-"),
        Td(action, cls="actions"),
        id=f"user-row-{user.id}",
    )
