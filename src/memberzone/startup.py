"""Application startup: configuration, repository initialization and admin bootstrap."""

import logging
import os
import secrets
from pathlib import Path

import yaml

from .context import AppContext
from .models.user import UserRole
from .services.database import init_db

logger = logging.getLogger(__name__)

# Configuration paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
APP_CONFIG_PATH = PROJECT_ROOT / "config" / "app.yaml"
SESSKEY_PATH = PROJECT_ROOT / ".sesskey"


def resolve_session_secret() -> str:
    """Resolve session secret from environment or file.

    Priority: MEMBERZONE_SESSION_SECRET env var > .sesskey file > auto-generate.
    """
    secret = os.environ.get("MEMBERZONE_SESSION_SECRET")
    if secret:
        return secret
    if SESSKEY_PATH.exists():
        return SESSKEY_PATH.read_text().strip()
    secret = secrets.token_hex(32)
    SESSKEY_PATH.write_text(secret)
    return secret


def load_app_config(path: Path = APP_CONFIG_PATH) -> dict:
    """Load optional application settings from config/app.yaml."""
    if not path.exists():
        return {}
    with open(path) as f:
        return yaml.safe_load(f) or {}


def resolve_admin_emails(config: dict) -> list[str]:
    """Emails to promote at startup.

    Priority: MEMBERZONE_ADMIN_EMAILS env var (comma separated) > admin_emails in app.yaml.
    """
    raw = os.environ.get("MEMBERZONE_ADMIN_EMAILS")
    if raw is not None:
        emails = raw.split(",")
    else:
        emails = config.get("admin_emails") or []
    return [e.strip().lower() for e in emails if e and e.strip()]


def bootstrap_admins(ctx: AppContext, emails: list[str]) -> int:
    """Promote the listed users to admin. Returns how many were found."""
    promoted = 0
    for email in emails:
        user = ctx.user_repo.get_by_email(email)
        if user is None:
            logger.warning("Admin bootstrap: no user registered with %s", email)
            continue
        if user.role != UserRole.ADMIN:
            ctx.user_repo.set_role(user.id, UserRole.ADMIN)
            logger.info("Admin bootstrap: promoted %s", email)
        promoted += 1
    return promoted


def init_context() -> AppContext:
    """Connect to MongoDB, create indexes and build the AppContext."""
    ctx = AppContext.from_db(init_db())
    ctx.user_repo.ensure_indexes()
    ctx.session_repo.ensure_indexes()
    bootstrap_admins(ctx, resolve_admin_emails(load_app_config()))
    return ctx
