"""
Role model and data access functions.
Roles carry a permission matrix over the application modules.
"""

from database.seed import default_roles
from .storage import ROLES_KEY, USERS_KEY, key_exists, load_collection, save_collection


def get_all_roles() -> list:
    """
    Get all roles, seeding the built-in roles on first use.

    Returns:
        List of role dicts
    """
    if not key_exists(ROLES_KEY):
        save_collection(ROLES_KEY, default_roles())
    return load_collection(ROLES_KEY)


def get_role_by_id(role_id: str) -> dict:
    """
    Get role by ID.

    Args:
        role_id: Role ID

    Returns:
        Role dict or None if not found
    """
    for role in get_all_roles():
        if role['id'] == role_id:
            return role
    return None


def get_role_by_name(name: str) -> dict:
    """Get role by name, ignoring case and surrounding whitespace."""
    wanted = (name or '').strip().lower()
    for role in get_all_roles():
        if role['name'].lower() == wanted:
            return role
    return None


def create_role(record: dict) -> dict:
    roles = get_all_roles()
    roles.append(record)
    save_collection(ROLES_KEY, roles)
    return record


def update_role(role_id: str, **fields) -> dict:
    """
    Update role fields.

    Args:
        role_id: Role ID
        **fields: Fields to update (name, description, permissions)

    Returns:
        Updated role dict or None if not found
    """
    allowed_fields = {'name', 'description', 'permissions'}
    updates = {k: v for k, v in fields.items() if k in allowed_fields}

    roles = get_all_roles()
    for role in roles:
        if role['id'] == role_id:
            role.update(updates)
            save_collection(ROLES_KEY, roles)
            return role
    return None


def has_users(role_id: str) -> bool:
    """Check whether any user is assigned to the role."""
    return any(user.get('role') == role_id for user in load_collection(USERS_KEY))


def delete_role(role_id: str) -> bool:
    """Delete a role. Returns True if it existed."""
    roles = get_all_roles()
    remaining = [r for r in roles if r['id'] != role_id]
    if len(remaining) == len(roles):
        return False
    save_collection(ROLES_KEY, remaining)
    return True
