"""Intake services package."""

from blueprints.intake.services.intake_service import (  # noqa: F401
    ApplicationWizard,
    RegistrationWizard,
    get_wizard,
    get_application_status,
    update_application_status,
)
