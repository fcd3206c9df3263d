"""
User registration model.
"""

from .storage import REGISTRATIONS_KEY, load_collection, save_collection

STATUS_REGISTERED = 'Registered'


def get_all_registrations() -> list:
    """All stored registrations, in registration order."""
    return load_collection(REGISTRATIONS_KEY)


def get_registration_by_id(registration_id: str) -> dict:
    """Get registration by ID (USR-...), or None."""
    for registration in get_all_registrations():
        if registration['id'] == registration_id:
            return registration
    return None


def create_registration(record: dict) -> dict:
    """Append a new registration record."""
    registrations = get_all_registrations()
    registrations.append(record)
    save_collection(REGISTRATIONS_KEY, registrations)
    return record
