# Seeder/db.py
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConfigurationError

from .config import settings


def get_client(uri: Optional[str] = None) -> MongoClient:
    try:
        timeout_ms = int(settings.MONGO_TIMEOUT_MS)
    except (TypeError, ValueError):
        raise ConfigurationError(f"MONGO_TIMEOUT_MS must be an integer, got {settings.MONGO_TIMEOUT_MS!r}")
    # MongoClient connects lazily; the first real operation surfaces connection errors
    return MongoClient(uri or settings.MONGODB_URI, serverSelectionTimeoutMS=timeout_ms)


def connect(db_name: Optional[str] = None, client: Optional[MongoClient] = None) -> Database:
    """Return the handle for ``db_name`` (defaults to settings.DB_NAME)."""
    if client is None:
        client = get_client()
    return client[db_name or settings.DB_NAME]
