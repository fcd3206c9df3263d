"""
Business logic for training classes, scheduling and participant rosters.
"""

import logging

from blueprints.training.forms import ClassForm, ScheduleForm
from models.profile import get_all_profiles
from models.scheduled_class import (get_schedule_by_id, get_schedules_for_class,
                                    create_schedule, update_schedule, refresh_class_name)
from models.training_class import (get_class_by_id, create_class, update_class, delete_class)
from utils.api_response import form_errors
from utils.forms import bind_form
from utils.helpers import generate_unique_code, timestamp, format_file_size, split_csv
from utils.messages import MESSAGES

logger = logging.getLogger(__name__)

DEFAULT_MATERIAL_TYPE = 'application/octet-stream'


# =============================================================================
# CLASSES
# =============================================================================

def _class_fields(form) -> dict:
    return {
        'name': form.name.data,
        'description': form.description.data,
        'duration': form.duration.data,
        'duration_type': form.duration_type.data,
        'prerequisites': split_csv(form.prerequisites.data),
        'requires_dorm_room': bool(form.requires_dorm_room.data),
    }


def build_material(name: str, content_type: str = None, size: int = 0) -> dict:
    """Material metadata for an uploaded file (the file itself is not kept)."""
    return {
        'id': generate_unique_code('MAT'),
        'name': name,
        'type': content_type or DEFAULT_MATERIAL_TYPE,
        'size': format_file_size(size),
        'uploaded_at': timestamp(),
    }


def create_training_class(data: dict) -> tuple:
    """
    Validate and store a new training class.

    Args:
        data: Class fields; 'materials' may carry already built metadata

    Returns:
        Tuple of (class, errors)
    """
    form = bind_form(ClassForm, data)
    if not form.validate():
        return None, form_errors(form)

    record = {'id': generate_unique_code('CLS')}
    record.update(_class_fields(form))
    record['materials'] = list(data.get('materials') or [])
    record['created_at'] = timestamp()

    create_class(record)
    logger.info('Training class %s created: %s', record['id'], record['name'])
    return record, {}


def update_training_class(class_id: str, data: dict) -> tuple:
    """
    Validate and update a training class.

    The material list is replaced when supplied, otherwise kept. Scheduled
    sessions pick up a new class name.

    Returns:
        Tuple of (class, errors); (None, {}) if the class does not exist
    """
    existing = get_class_by_id(class_id)
    if not existing:
        return None, {}

    form = bind_form(ClassForm, data)
    if not form.validate():
        return None, form_errors(form)

    fields = _class_fields(form)
    if 'materials' in data:
        fields['materials'] = list(data.get('materials') or [])

    record = update_class(class_id, **fields)
    if record['name'] != existing['name']:
        refresh_class_name(class_id, record['name'])
    return record, {}


def can_delete_class(class_id: str) -> tuple:
    """
    Check if a training class can be deleted.

    Returns:
        Tuple of (can_delete, error_message_key)
    """
    if not get_class_by_id(class_id):
        return False, 'class_not_found'

    if get_schedules_for_class(class_id):
        return False, 'class_has_schedules'

    return True, ''


def delete_training_class(class_id: str) -> tuple:
    can_delete, error = can_delete_class(class_id)
    if not can_delete:
        return False, error

    delete_class(class_id)
    logger.info('Training class %s deleted', class_id)
    return True, ''


def add_materials(class_id: str, files: list) -> tuple:
    """
    Attach material metadata to a class.

    Args:
        class_id: Training class ID
        files: List of {'name', 'type', 'size' (bytes)}

    Returns:
        Tuple of (new materials, error_message_key)
    """
    training_class = get_class_by_id(class_id)
    if not training_class:
        return [], 'class_not_found'

    added = [build_material(f['name'], f.get('type'), f.get('size') or 0) for f in files]
    update_class(class_id, materials=training_class['materials'] + added)
    return added, ''


def remove_material(class_id: str, material_id: str) -> tuple:
    training_class = get_class_by_id(class_id)
    if not training_class:
        return False, 'class_not_found'

    remaining = [m for m in training_class['materials'] if m['id'] != material_id]
    if len(remaining) == len(training_class['materials']):
        return False, 'material_not_found'

    update_class(class_id, materials=remaining)
    return True, ''


# =============================================================================
# SCHEDULED CLASSES
# =============================================================================

def _validate_schedule(data: dict) -> tuple:
    """Returns (form, training_class, errors)."""
    form = bind_form(ScheduleForm, data)
    if not form.validate():
        return form, None, form_errors(form)

    training_class = get_class_by_id(form.class_id.data)
    if not training_class:
        return form, None, {'class_id': MESSAGES['class_not_found']}

    return form, training_class, {}


def schedule_class(data: dict) -> tuple:
    """
    Schedule a session of an existing class with an empty roster.

    Returns:
        Tuple of (scheduled class, errors)
    """
    form, training_class, errors = _validate_schedule(data)
    if errors:
        return None, errors

    record = {
        'id': generate_unique_code('SCH'),
        'class_id': training_class['id'],
        'class_name': training_class['name'],
        'facility_type': form.facility_type.data,
        'max_attendees': form.max_attendees.data,
        'participants': [],
        'created_at': timestamp(),
    }
    create_schedule(record)
    logger.info('Class %s scheduled as %s', training_class['id'], record['id'])
    return record, {}


def update_scheduled_class(schedule_id: str, data: dict) -> tuple:
    """
    Update a scheduled session. The roster is kept, so capacity cannot
    drop below the number of enrolled participants.

    Returns:
        Tuple of (scheduled class, errors); (None, {}) if it does not exist
    """
    existing = get_schedule_by_id(schedule_id)
    if not existing:
        return None, {}

    form, training_class, errors = _validate_schedule(data)
    if errors:
        return None, errors

    enrolled = len(existing['participants'])
    if form.max_attendees.data < enrolled:
        return None, {'max_attendees': MESSAGES['roster_exceeds_capacity'].format(count=enrolled)}

    record = update_schedule(
        schedule_id,
        class_id=training_class['id'],
        class_name=training_class['name'],
        facility_type=form.facility_type.data,
        max_attendees=form.max_attendees.data,
    )
    return record, {}


def _participant(profile_id: str, profiles: dict) -> dict:
    profile = profiles.get(profile_id)
    if not profile:
        return {'id': profile_id, 'name': 'Unknown', 'email': '', 'type': ''}
    return {
        'id': profile['id'],
        'name': f"{profile.get('first_name', '')} {profile.get('last_name', '')}".strip(),
        'email': profile.get('email', ''),
        'type': profile['type'],
    }


def set_participants(schedule_id: str, profile_ids: list) -> tuple:
    """
    Replace the roster of a scheduled class.

    Args:
        schedule_id: Scheduled class ID
        profile_ids: Selected profile ids (duplicates are ignored)

    Returns:
        Tuple of (scheduled class, error_message_key)
    """
    schedule = get_schedule_by_id(schedule_id)
    if not schedule:
        return None, 'schedule_not_found'

    selected = list(dict.fromkeys(profile_ids))
    if len(selected) > schedule['max_attendees']:
        return schedule, 'roster_full'

    profiles = {p['id']: p for p in get_all_profiles()}
    participants = [_participant(pid, profiles) for pid in selected]

    record = update_schedule(schedule_id, participants=participants)
    logger.info('Roster of %s set to %d participant(s)', schedule_id, len(participants))
    return record, ''


def remove_participant(schedule_id: str, participant_id: str) -> tuple:
    schedule = get_schedule_by_id(schedule_id)
    if not schedule:
        return None, 'schedule_not_found'

    remaining = [p for p in schedule['participants'] if p['id'] != participant_id]
    if len(remaining) == len(schedule['participants']):
        return None, 'participant_not_found'

    return update_schedule(schedule_id, participants=remaining), ''
