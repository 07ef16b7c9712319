"""Main FastHTML application."""

import logging
import os
from pathlib import Path

from fasthtml.common import *

from .components.errors import NotFoundPage, ServerErrorPage
from .context import AppContext
from .middleware import SESSION_KEY, make_session_beforeware
from .models.session import SESSION_TTL
from .routes import admin, auth, main
from .routes.utils import page_response

logger = logging.getLogger("memberzone")

# Static files directory
static_dir = Path(__file__).parent / "static"

SESSION_COOKIE = "memberzone_session"


def create_app(ctx: AppContext, session_secret: str):
    """Build the FastHTML app around an AppContext.

    Args:
        ctx: Repositories and services shared by all routes.
        session_secret: Key used to sign the session cookie.
    """

    def not_found(req, exc):
        """404 page carrying the current session state."""
        user = ctx.auth_service.resolve(req.session.get(SESSION_KEY))
        return page_response(NotFoundPage(user), status_code=404)

    def server_error(req, exc):
        """Log unexpected failures and answer with a generic page."""
        logger.error(
            "Unhandled error on %s %s", req.method, req.url.path, exc_info=exc
        )
        return page_response(ServerErrorPage(), status_code=500)

    app, rt = fast_app(
        hdrs=[
            Link(rel="icon", type="image/svg+xml", href="/img/logo.svg"),
            Link(rel="stylesheet", href="/css/app.css"),
        ],
        pico=False,  # Use custom CSS instead of Pico
        secret_key=session_secret,
        session_cookie=SESSION_COOKIE,
        max_age=int(SESSION_TTL.total_seconds()),
        before=make_session_beforeware(ctx),
        static_path=str(static_dir),
        exception_handlers={404: not_found, 500: server_error},
    )

    # Register routes
    auth.register(app, rt, ctx)
    admin.register(app, rt, ctx)
    main.register(app, rt, ctx)

    return app


def main_func():
    """Entry point for running the application."""
    import uvicorn

    from .startup import init_context, resolve_session_secret

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(init_context(), resolve_session_secret())
    uvicorn.run(
        app,
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "5001")),
    )


if __name__ == "__main__":
    main_func()
