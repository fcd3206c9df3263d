"""
Administered user model and data access functions.
"""

from .storage import USERS_KEY, load_collection, save_collection

STATUS_ACTIVE = 'Active'
STATUS_INACTIVE = 'Inactive'
USER_STATUSES = [STATUS_ACTIVE, STATUS_INACTIVE]


def get_all_users() -> list:
    return load_collection(USERS_KEY)


def get_user_by_id(user_id: str) -> dict:
    """
    Get user by ID.

    Args:
        user_id: User ID

    Returns:
        User dict or None if not found
    """
    for user in get_all_users():
        if user['id'] == user_id:
            return user
    return None


def get_user_by_username(username: str) -> dict:
    """Get user by username (case-insensitive), or None."""
    wanted = (username or '').strip().lower()
    for user in get_all_users():
        if user['username'].lower() == wanted:
            return user
    return None


def get_user_by_email(email: str) -> dict:
    """Get user by email (case-insensitive), or None."""
    wanted = (email or '').strip().lower()
    for user in get_all_users():
        if user['email'].lower() == wanted:
            return user
    return None


def create_user(record: dict) -> dict:
    users = get_all_users()
    users.append(record)
    save_collection(USERS_KEY, users)
    return record


def update_user(user_id: str, **fields) -> dict:
    """
    Update user fields.

    Args:
        user_id: User ID
        **fields: Fields to update (username, email, full_name, cell_number, role, status)

    Returns:
        Updated user dict or None if not found
    """
    allowed_fields = {'username', 'email', 'full_name', 'cell_number', 'role', 'status'}
    updates = {k: v for k, v in fields.items() if k in allowed_fields}

    users = get_all_users()
    for user in users:
        if user['id'] == user_id:
            user.update(updates)
            save_collection(USERS_KEY, users)
            return user
    return None


def delete_user(user_id: str) -> bool:
    """Delete a user. Returns True if it existed."""
    users = get_all_users()
    remaining = [u for u in users if u['id'] != user_id]
    if len(remaining) == len(users):
        return False
    save_collection(USERS_KEY, remaining)
    return True
