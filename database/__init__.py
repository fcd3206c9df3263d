"""
Database package: SQLite connection management, the storage schema and seed documents.
"""

from database.connection import get_db, close_db, init_db  # noqa: F401
