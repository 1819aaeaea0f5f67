"""Database and storage connections package."""

from newshub.db.postgres import engine, get_session, init_db
from newshub.db.storage import ObjectStorage, get_storage

__all__ = ["get_session", "init_db", "engine", "ObjectStorage", "get_storage"]
