"""
Intake routes.
Multi-step application and registration wizards, drafts and application tracking.
"""

from flask import Blueprint, current_app, request

from blueprints.intake.services.intake_service import (
    get_wizard, get_application_status, update_application_status
)
from models.application import APPLICATION_STATUSES
from utils.api_response import api_success, api_error
from utils.messages import MESSAGES

intake_bp = Blueprint('intake', __name__)

KINDS = 'any(applications, registrations)'

NOT_FOUND_KEYS = {
    'applications': 'application_not_found',
    'registrations': 'registration_not_found',
}

SUBMITTED_KEYS = {
    'applications': 'application_submitted',
    'registrations': 'registration_submitted',
}


# =============================================================================
# WIZARD STEPS
# =============================================================================

@intake_bp.route(f'/<{KINDS}:kind>/steps')
def steps(kind):
    """Step titles and their fields."""
    wizard = get_wizard(kind)
    return api_success(data=[
        {'step': number, 'title': step['title'], 'fields': step['fields']}
        for number, step in enumerate(wizard.steps, start=1)
    ])


@intake_bp.route(f'/<{KINDS}:kind>/steps/<int:step>/validate', methods=['POST'])
def validate_step(kind, step):
    """Validate one step before moving to the next."""
    wizard = get_wizard(kind)
    if wizard.get_step(step) is None:
        return api_error(MESSAGES['invalid_step'], status=404)

    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return api_error(MESSAGES['json_required'])

    errors = wizard.validate_step(step, data)
    if errors:
        return api_error(MESSAGES['validation_failed'], errors=errors)

    return api_success(data={'step': step, 'valid': True,
                             'is_last': step == wizard.step_count()})


# =============================================================================
# DRAFTS
# =============================================================================

@intake_bp.route(f'/<{KINDS}:kind>/draft')
def draft_get(kind):
    """Load the autosaved draft (null when none)."""
    return api_success(data={'draft': get_wizard(kind).load_draft()})


@intake_bp.route(f'/<{KINDS}:kind>/draft', methods=['PUT'])
def draft_save(kind):
    """Autosave the in-progress form."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return api_error(MESSAGES['json_required'])

    draft = get_wizard(kind).save_draft(data)
    return api_success(data={'draft': draft}, message=MESSAGES['draft_saved'])


@intake_bp.route(f'/<{KINDS}:kind>/draft', methods=['DELETE'])
def draft_discard(kind):
    """Discard the autosaved draft."""
    get_wizard(kind).discard_draft()
    return api_success(message=MESSAGES['draft_discarded'])


# =============================================================================
# SUBMISSIONS
# =============================================================================

@intake_bp.route(f'/<{KINDS}:kind>')
def submissions_list(kind):
    """List submitted records."""
    return api_success(data=get_wizard(kind).list())


@intake_bp.route(f'/<{KINDS}:kind>/<record_id>')
def submission_detail(kind, record_id):
    """Get one submitted record."""
    record = get_wizard(kind).get(record_id)
    if not record:
        return api_error(MESSAGES[NOT_FOUND_KEYS[kind]], status=404)
    return api_success(data=record)


@intake_bp.route(f'/<{KINDS}:kind>', methods=['POST'])
def submit(kind):
    """Validate every step and store the submission."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return api_error(MESSAGES['json_required'])

    record, errors = get_wizard(kind).submit(data)
    if errors:
        return api_error(MESSAGES['validation_failed'], errors=errors)

    current_app.logger.info(f'Intake {kind}: {record["id"]} stored')
    return api_success(data=record, message=MESSAGES[SUBMITTED_KEYS[kind]], status=201)


# =============================================================================
# APPLICATION TRACKING
# =============================================================================

@intake_bp.route('/applications/<application_id>/status')
def application_status(application_id):
    """Current review status of an application."""
    summary = get_application_status(application_id)
    if not summary:
        return api_error(MESSAGES['application_not_found'], status=404)
    return api_success(data=summary)


@intake_bp.route('/applications/<application_id>/status', methods=['PUT'])
def application_status_update(application_id):
    """Move an application to another review status."""
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return api_error(MESSAGES['json_required'])

    application, error = update_application_status(application_id, data.get('status'))
    if error == 'application_not_found':
        return api_error(MESSAGES[error], status=404)
    if error:
        return api_error(MESSAGES[error], field='status', allowed=APPLICATION_STATUSES)

    return api_success(data=application, message=MESSAGES['application_status_updated'])
