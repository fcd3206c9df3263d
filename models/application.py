"""
PSP application model.
Stored applications and their status tracking.
"""

from .storage import APPLICATIONS_KEY, load_collection, save_collection

STATUS_SUBMITTED = 'Submitted'
STATUS_UNDER_REVIEW = 'Under Review'
STATUS_APPROVED = 'Approved'
STATUS_REJECTED = 'Rejected'

APPLICATION_STATUSES = [STATUS_SUBMITTED, STATUS_UNDER_REVIEW, STATUS_APPROVED, STATUS_REJECTED]


def get_all_applications() -> list:
    """All stored applications, in submission order."""
    return load_collection(APPLICATIONS_KEY)


def get_application_by_id(application_id: str) -> dict:
    """
    Get application by ID.

    Args:
        application_id: Application ID (PSP-...)

    Returns:
        Application dict or None if not found
    """
    for application in get_all_applications():
        if application['id'] == application_id:
            return application
    return None


def create_application(record: dict) -> dict:
    """Append a new application record."""
    applications = get_all_applications()
    applications.append(record)
    save_collection(APPLICATIONS_KEY, applications)
    return record


def update_application(application_id: str, **fields) -> dict:
    """
    Update fields of a stored application.

    Returns:
        Updated application dict or None if not found
    """
    applications = get_all_applications()
    for application in applications:
        if application['id'] == application_id:
            application.update(fields)
            save_collection(APPLICATIONS_KEY, applications)
            return application
    return None
