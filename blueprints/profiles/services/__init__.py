"""Profile services package."""

from blueprints.profiles.services.personnel_service import (  # noqa: F401
    create_personnel_profile,
    update_personnel_profile,
    delete_personnel_profile,
)
