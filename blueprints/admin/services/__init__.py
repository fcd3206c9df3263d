"""Admin services package."""

from blueprints.admin.services.user_service import (  # noqa: F401
    validate_user,
    create_admin_user,
    update_admin_user,
    filter_users,
    effective_permissions,
)
