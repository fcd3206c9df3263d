"""
Business logic for administered users.
Validation, uniqueness rules, filtering and effective permissions.
"""

import logging

from blueprints.admin.forms import UserForm
from models.role import get_role_by_id
from models.user import (STATUS_ACTIVE, get_all_users, get_user_by_id, get_user_by_username,
                         get_user_by_email, create_user, update_user)
from utils.api_response import form_errors
from utils.forms import bind_form
from utils.helpers import generate_unique_code, timestamp
from utils.messages import MESSAGES

logger = logging.getLogger(__name__)


def validate_user(data: dict, exclude_id: str = None) -> tuple:
    """
    Validate user data, including unique username/email and an existing role.

    Args:
        data: User fields
        exclude_id: User ID to exclude from uniqueness checks (for updates)

    Returns:
        Tuple of (form, errors)
    """
    form = bind_form(UserForm, data)
    if not form.validate():
        return form, form_errors(form)

    errors = {}

    existing = get_user_by_username(form.username.data)
    if existing and existing['id'] != exclude_id:
        errors['username'] = MESSAGES['username_exists']

    existing = get_user_by_email(form.email.data)
    if existing and existing['id'] != exclude_id:
        errors['email'] = MESSAGES['email_exists']

    if not get_role_by_id(form.role.data):
        errors['role'] = MESSAGES['role_not_found']

    return form, errors


def _user_fields(form) -> dict:
    return {
        'username': form.username.data,
        'email': form.email.data,
        'full_name': form.full_name.data,
        'cell_number': form.cell_number.data,
        'role': form.role.data,
        'status': form.status.data,
    }


def create_admin_user(data: dict) -> tuple:
    """
    Create an administered user.

    Returns:
        Tuple of (user, errors)
    """
    form, errors = validate_user(data)
    if errors:
        return None, errors

    user = {'id': generate_unique_code('USER')}
    user.update(_user_fields(form))
    user['created_at'] = timestamp()

    create_user(user)
    logger.info('User %s created with role %s', user['username'], user['role'])
    return user, {}


def update_admin_user(user_id: str, data: dict) -> tuple:
    """
    Update an administered user.

    Returns:
        Tuple of (user, errors); (None, {}) if the user does not exist
    """
    if not get_user_by_id(user_id):
        return None, {}

    form, errors = validate_user(data, exclude_id=user_id)
    if errors:
        return None, errors

    return update_user(user_id, **_user_fields(form)), {}


def filter_users(role: str = None, status: str = None, search: str = None) -> list:
    """
    Filter users by role id, status and a search term.

    The search term matches username, email and full name, ignoring case.
    """
    users = get_all_users()

    if role:
        users = [u for u in users if u['role'] == role]

    if status:
        users = [u for u in users if u['status'] == status]

    if search:
        search_lower = search.lower()
        users = [u for u in users if
                 search_lower in u['username'].lower() or
                 search_lower in u['email'].lower() or
                 search_lower in u['full_name'].lower()]

    return users


def effective_permissions(user_id: str) -> dict:
    """
    Permission matrix a user actually holds.

    Inactive users, and users whose role no longer exists, hold nothing.

    Returns:
        Permission matrix, or None if the user does not exist
    """
    user = get_user_by_id(user_id)
    if not user:
        return None

    if user['status'] != STATUS_ACTIVE:
        return {}

    role = get_role_by_id(user['role'])
    return role['permissions'] if role else {}
