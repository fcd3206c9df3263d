"""
Key-value document storage.

Every module persists its records as one JSON document per storage key,
mirroring the browser-local storage the academy screens were built on.
Collections are always replaced wholesale.
"""

import json

from database import get_db

# Storage keys
RESERVATIONS_KEY = 'psp_reservations'
APPLICATIONS_KEY = 'psp_applications'
REGISTRATIONS_KEY = 'psp_user_registrations'
APPLICATION_DRAFT_KEY = 'psp_application_draft'
REGISTRATION_DRAFT_KEY = 'psp_registration_draft'
TRAINING_CLASSES_KEY = 'training_classes'
SCHEDULED_CLASSES_KEY = 'scheduled_classes'
USERS_KEY = 'admin_users'
ROLES_KEY = 'admin_roles'
PERSONNEL_KEY = 'psp_profiles'


def _read_payload(key: str):
    cursor = get_db().cursor()
    cursor.execute('SELECT payload FROM app_storage WHERE storage_key = ?', (key,))
    row = cursor.fetchone()
    return json.loads(row['payload']) if row else None


def _write_payload(key: str, value) -> None:
    db = get_db()
    db.execute('''
        INSERT INTO app_storage (storage_key, payload, updated_at)
        VALUES (?, ?, CURRENT_TIMESTAMP)
        ON CONFLICT(storage_key) DO UPDATE SET
            payload = excluded.payload,
            updated_at = excluded.updated_at
    ''', (key, json.dumps(value)))
    db.commit()


def key_exists(key: str) -> bool:
    """Check whether anything was ever stored under a key."""
    cursor = get_db().cursor()
    cursor.execute('SELECT 1 FROM app_storage WHERE storage_key = ?', (key,))
    return cursor.fetchone() is not None


def load_collection(key: str) -> list:
    """
    Load a stored collection.

    Args:
        key: Storage key

    Returns:
        List of record dicts (empty if the key was never written)
    """
    payload = _read_payload(key)
    return payload if payload is not None else []


def save_collection(key: str, records: list) -> None:
    """
    Replace a stored collection.

    Args:
        key: Storage key
        records: Complete list of record dicts
    """
    _write_payload(key, list(records))


def load_document(key: str):
    """Load a single stored document, or None."""
    return _read_payload(key)


def save_document(key: str, document: dict) -> None:
    """Store a single document under a key."""
    _write_payload(key, document)


def delete_document(key: str) -> bool:
    """
    Remove whatever is stored under a key.

    Returns:
        True if something was deleted
    """
    db = get_db()
    cursor = db.execute('DELETE FROM app_storage WHERE storage_key = ?', (key,))
    db.commit()
    return cursor.rowcount > 0
