"""Session middleware for the FastHTML application."""

from fasthtml.common import Beforeware

# Key in the signed cookie session holding the server-side session id
SESSION_KEY = "sid"


def make_session_beforeware(ctx):
    """Create session-resolving beforeware.

    Args:
        ctx: AppContext whose auth service resolves session ids.

    Returns:
        Beforeware instance for FastHTML app.
    """

    def session_beforeware(req, sess):
        """
        Resolve the cookie's session id to a user snapshot.

        Sets `auth` on the request scope to a SessionUser, or None for
        anonymous requests. Never redirects; guards live on the routes.
        """
        user = ctx.auth_service.resolve(sess.get(SESSION_KEY))
        if user is None and SESSION_KEY in sess:
            # Expired or destroyed server-side
            sess.pop(SESSION_KEY, None)
        req.scope["auth"] = user

    return Beforeware(
        session_beforeware,
        skip=[r"/favicon\.ico", r"/css/.*", r"/img/.*"],
    )
