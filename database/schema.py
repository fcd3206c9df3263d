"""
Storage schema.

The application keeps every module's data in one key-value table, so the
schema is a single table plus its index.
"""

STORAGE_TABLE = 'app_storage'

SCHEMA_STATEMENTS = [
    # One JSON document per storage key; collections are replaced wholesale.
    f'''
    CREATE TABLE IF NOT EXISTS {STORAGE_TABLE} (
        storage_key TEXT PRIMARY KEY,
        payload TEXT NOT NULL,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    ''',
    f'CREATE INDEX IF NOT EXISTS idx_app_storage_updated ON {STORAGE_TABLE}(updated_at)',
]


def ensure_schema(db):
    """Create the storage table and index if they are missing."""
    for statement in SCHEMA_STATEMENTS:
        db.execute(statement)


def reset_schema(db):
    """Drop and recreate the storage table. All stored documents are lost."""
    db.execute(f'DROP TABLE IF EXISTS {STORAGE_TABLE}')
    ensure_schema(db)
