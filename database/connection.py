"""
SQLite connection handling.
One connection per application context, kept on flask.g and closed on teardown.
"""

import logging
import os
import sqlite3
from flask import g, current_app

from database.schema import ensure_schema, reset_schema
from database.seed import seed_database

logger = logging.getLogger(__name__)

IN_MEMORY = ':memory:'


def _open_connection(db_path: str) -> sqlite3.Connection:
    if db_path != IN_MEMORY:
        directory = os.path.dirname(db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

    connection = sqlite3.connect(db_path, timeout=current_app.config.get('DATABASE_TIMEOUT', 5.0))
    connection.row_factory = sqlite3.Row
    if db_path != IN_MEMORY:
        # WAL lets readers proceed while a collection is being rewritten
        connection.execute('PRAGMA journal_mode = WAL')
    ensure_schema(connection)
    return connection


def get_db():
    """
    Get the connection of the current application context.

    The storage table is created on first use, so a fresh database file
    works without running init-db.

    Returns:
        sqlite3.Connection: Connection with sqlite3.Row rows
    """
    if 'db' not in g:
        g.db = _open_connection(current_app.config['DATABASE_PATH'])
    return g.db


def close_db(e=None):
    """Close the context's connection, if one was opened."""
    db = g.pop('db', None)
    if db is not None:
        db.close()


def init_db():
    """
    Reset the storage table and write the seed documents.
    WARNING: every stored document is deleted.
    """
    db = get_db()
    reset_schema(db)
    seed_database(db)
    db.commit()
    logger.info('Storage reset at %s', current_app.config['DATABASE_PATH'])
