"""MongoDB connection setup."""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConnectionFailure

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
CONFIG_PATH = PROJECT_ROOT / "config" / "mongodb.yaml"

DEFAULT_URI = "mongodb://localhost:27017"
DEFAULT_DATABASE = "memberzone"

# Milliseconds to wait for the server before a request fails
CONNECT_TIMEOUT_MS = 5000

_db: Optional[Database] = None


def _load_config() -> dict:
    """Resolve connection settings.

    Priority: MONGODB_URI / MONGODB_DATABASE env vars > config/mongodb.yaml > defaults.
    """
    mongo_uri = os.environ.get("MONGODB_URI")
    if mongo_uri:
        return {
            "uri": mongo_uri,
            "database": os.environ.get("MONGODB_DATABASE", DEFAULT_DATABASE),
        }

    if CONFIG_PATH.exists():
        with open(CONFIG_PATH) as f:
            return (yaml.safe_load(f) or {}).get("mongodb", {})

    return {"uri": DEFAULT_URI, "database": DEFAULT_DATABASE}


def init_db() -> Database:
    """Connect once and return the application database.

    Session expiry compares timezone-aware datetimes, so the client is
    created with ``tz_aware=True``.

    Raises:
        ConnectionFailure: if the server does not answer a ping
    """
    global _db

    if _db is not None:
        return _db

    config = _load_config()
    database_name = config.get("database", DEFAULT_DATABASE)
    client = MongoClient(
        config.get("uri", DEFAULT_URI),
        serverSelectionTimeoutMS=CONNECT_TIMEOUT_MS,
        connectTimeoutMS=CONNECT_TIMEOUT_MS,
        tz_aware=True,
    )
    try:
        client.admin.command("ping")
    except ConnectionFailure as e:
        logger.error("Failed to connect to MongoDB: %s", e)
        client.close()
        raise

    _db = client[database_name]
    logger.info("Connected to MongoDB database '%s'", database_name)
    return _db
