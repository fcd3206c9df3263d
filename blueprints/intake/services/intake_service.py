"""
Business logic for the application and registration wizards.
Step validation, draft autosave, submission and status tracking.
"""

import logging

from blueprints.intake.forms import ApplicationForm, RegistrationForm
from models.application import (APPLICATION_STATUSES, STATUS_SUBMITTED,
                                get_all_applications, get_application_by_id,
                                create_application, update_application)
from models.registration import (STATUS_REGISTERED, get_all_registrations,
                                 get_registration_by_id, create_registration)
from models.storage import (APPLICATION_DRAFT_KEY, REGISTRATION_DRAFT_KEY,
                            load_document, save_document, delete_document)
from utils.api_response import form_errors
from utils.forms import bind_form
from utils.helpers import generate_unique_code, timestamp

logger = logging.getLogger(__name__)


class IntakeWizard:
    """Multi-step intake form backed by one stored collection."""

    form_class = None
    steps = []
    draft_key = None
    id_prefix = None
    initial_status = None
    timestamp_field = None

    def step_count(self) -> int:
        return len(self.steps)

    def get_step(self, step: int) -> dict:
        """Step definition by 1-based number, or None."""
        if 1 <= step <= len(self.steps):
            return self.steps[step - 1]
        return None

    def validate_step(self, step: int, data: dict) -> dict:
        """
        Validate only the fields of one step.

        Args:
            step: 1-based step number
            data: Field values (other steps' fields are ignored)

        Returns:
            Dict of {field: message}; empty when the step is valid

        Raises:
            ValueError: Unknown step number
        """
        definition = self.get_step(step)
        if definition is None:
            raise ValueError(f'Unknown step: {step}')

        form = bind_form(self.form_class, data)
        errors = {}
        for name in definition['fields']:
            field = form[name]
            if not field.validate(form):
                errors[name] = field.errors[0]
        return errors

    # Drafts hold whatever the user typed so far; they are never validated.

    def save_draft(self, data: dict) -> dict:
        draft = dict(data or {})
        save_document(self.draft_key, draft)
        return draft

    def load_draft(self) -> dict:
        return load_document(self.draft_key)

    def discard_draft(self) -> bool:
        return delete_document(self.draft_key)

    def submit(self, data: dict) -> tuple:
        """
        Validate every step and store the record.

        Returns:
            Tuple of (record, errors); record is None when errors is not empty
        """
        form = bind_form(self.form_class, data)
        if not form.validate():
            return None, form_errors(form)

        record = {'id': generate_unique_code(self.id_prefix)}
        record.update({name: form.data[name] or '' for name in self.field_names()})
        record['status'] = self.initial_status
        record[self.timestamp_field] = timestamp()

        self.store(record)
        self.discard_draft()
        logger.info('%s %s submitted', self.__class__.__name__, record['id'])
        return record, {}

    def field_names(self) -> list:
        return [name for step in self.steps for name in step['fields']]

    def store(self, record: dict) -> None:
        raise NotImplementedError

    def get(self, record_id: str) -> dict:
        raise NotImplementedError

    def list(self) -> list:
        raise NotImplementedError


class ApplicationWizard(IntakeWizard):
    """New PSP application."""

    form_class = ApplicationForm
    steps = [
        {'title': 'Personal Information',
         'fields': ['first_name', 'middle_name', 'last_name', 'suffix']},
        {'title': 'Contact Information',
         'fields': ['email', 'phone', 'phone_type']},
        {'title': 'Address Information',
         'fields': ['home_address', 'mailing_address']},
        {'title': 'Date of Birth',
         'fields': ['date_of_birth']},
    ]
    draft_key = APPLICATION_DRAFT_KEY
    id_prefix = 'PSP'
    initial_status = STATUS_SUBMITTED
    timestamp_field = 'submitted_at'

    def store(self, record):
        create_application(record)

    def get(self, record_id):
        return get_application_by_id(record_id)

    def list(self):
        return get_all_applications()


class RegistrationWizard(IntakeWizard):
    """User registration with employment details."""

    form_class = RegistrationForm
    steps = [
        {'title': 'Personal Information',
         'fields': ['first_name', 'middle_name', 'last_name', 'suffix']},
        {'title': 'Contact Information',
         'fields': ['email', 'phone', 'phone_type', 'best_contact_method']},
        {'title': 'Address Information',
         'fields': ['home_address', 'mailing_address', 'date_of_birth']},
        {'title': 'Employment Information',
         'fields': ['current_employer', 'employer_phone', 'employer_email',
                    'business_address', 'title', 'employment_start_date']},
    ]
    draft_key = REGISTRATION_DRAFT_KEY
    id_prefix = 'USR'
    initial_status = STATUS_REGISTERED
    timestamp_field = 'registered_at'

    def store(self, record):
        create_registration(record)

    def get(self, record_id):
        return get_registration_by_id(record_id)

    def list(self):
        return get_all_registrations()


WIZARDS = {
    'applications': ApplicationWizard(),
    'registrations': RegistrationWizard(),
}


def get_wizard(kind: str) -> IntakeWizard:
    """Wizard for 'applications' or 'registrations', or None."""
    return WIZARDS.get(kind)


# =============================================================================
# APPLICATION TRACKING
# =============================================================================

def get_application_status(application_id: str) -> dict:
    """Tracking summary of an application, or None if not found."""
    application = get_application_by_id(application_id)
    if not application:
        return None
    return {
        'id': application['id'],
        'status': application['status'],
        'submitted_at': application['submitted_at'],
    }


def update_application_status(application_id: str, status: str) -> tuple:
    """
    Move an application to another review status.

    Returns:
        Tuple of (application, error_message_key)
    """
    if status not in APPLICATION_STATUSES:
        return None, 'invalid_status'

    application = update_application(application_id, status=status, status_updated_at=timestamp())
    if not application:
        return None, 'application_not_found'

    logger.info('Application %s status changed to %s', application_id, status)
    return application, ''
