"""Members area components."""

from fasthtml.common import *

from ..models.session import SessionUser

# Pictures shown on the members page, served from /img/
MEMBER_IMAGES = ["duck.svg", "minecraft_house.svg", "snowmen.svg"]


def MembersPage(user: SessionUser, image: str):
    """Members-only page with one of the member pictures."""
    return Div(
        H2(f"Hello, {user.name}."),
        P("Welcome to the members area. Here is a picture for you:", cls="page-description"),
        Img(src=f"/img/{image}", alt=image.rsplit(".", 1)[0].replace("_", " "), cls="member-image"),
        cls="members-page",
    )
