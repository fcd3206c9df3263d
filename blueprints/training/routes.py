"""
Training records routes.
Class catalog, course materials, scheduled sessions and participant rosters.
"""

import os

from flask import Blueprint, current_app, request

from blueprints.training.services.training_service import (
    create_training_class, update_training_class, delete_training_class,
    add_materials, remove_material, schedule_class, update_scheduled_class,
    set_participants, remove_participant
)
from models.scheduled_class import get_all_schedules, get_schedule_by_id, delete_schedule
from models.training_class import get_all_classes, get_class_by_id, duration_display
from utils.api_response import api_success, api_error
from utils.messages import MESSAGES

training_bp = Blueprint('training', __name__)

NOT_FOUND_STATUS = {
    'class_not_found': 404,
    'material_not_found': 404,
    'schedule_not_found': 404,
    'participant_not_found': 404,
}


def _class_payload(training_class: dict) -> dict:
    return dict(training_class, duration_display=duration_display(training_class))


def _uploaded_files() -> list:
    """Metadata of multipart uploads, or of a JSON 'files' list."""
    files = []
    for upload in request.files.getlist('files'):
        upload.stream.seek(0, os.SEEK_END)
        files.append({'name': upload.filename, 'type': upload.mimetype,
                      'size': upload.stream.tell()})
    if files:
        return files

    data = request.get_json(silent=True)
    listed = data.get('files') if isinstance(data, dict) else None
    if not isinstance(listed, list):
        return []
    return [f for f in listed if isinstance(f, dict) and f.get('name')]


# =============================================================================
# CLASSES
# =============================================================================

@training_bp.route('/classes')
def classes_list():
    """List training classes."""
    return api_success(data=[_class_payload(c) for c in get_all_classes()])


@training_bp.route('/classes/<class_id>')
def class_detail(class_id):
    training_class = get_class_by_id(class_id)
    if not training_class:
        return api_error(MESSAGES['class_not_found'], status=404)
    return api_success(data=_class_payload(training_class))


@training_bp.route('/classes', methods=['POST'])
def classes_create():
    """Create a training class."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return api_error(MESSAGES['json_required'])

    record, errors = create_training_class(data)
    if errors:
        return api_error(MESSAGES['validation_failed'], errors=errors)

    return api_success(data=_class_payload(record), message=MESSAGES['class_created'], status=201)


@training_bp.route('/classes/<class_id>', methods=['PUT'])
def classes_update(class_id):
    """Update a training class."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return api_error(MESSAGES['json_required'])

    record, errors = update_training_class(class_id, data)
    if errors:
        return api_error(MESSAGES['validation_failed'], errors=errors)
    if not record:
        return api_error(MESSAGES['class_not_found'], status=404)

    return api_success(data=_class_payload(record), message=MESSAGES['class_updated'])


@training_bp.route('/classes/<class_id>', methods=['DELETE'])
def classes_delete(class_id):
    """Delete a class that has no scheduled sessions."""
    deleted, error = delete_training_class(class_id)
    if not deleted:
        return api_error(MESSAGES[error], status=NOT_FOUND_STATUS.get(error, 409))
    return api_success(message=MESSAGES['class_deleted'])


@training_bp.route('/classes/<class_id>/materials', methods=['POST'])
def materials_add(class_id):
    """Attach uploaded files (metadata only) to a class."""
    files = _uploaded_files()
    if not files:
        return api_error('No files uploaded', field='files')

    added, error = add_materials(class_id, files)
    if error:
        return api_error(MESSAGES[error], status=404)

    current_app.logger.info(f'{len(added)} material(s) added to class {class_id}')
    return api_success(data=added, message=MESSAGES['materials_added'].format(count=len(added)),
                       status=201)


@training_bp.route('/classes/<class_id>/materials/<material_id>', methods=['DELETE'])
def materials_remove(class_id, material_id):
    removed, error = remove_material(class_id, material_id)
    if not removed:
        return api_error(MESSAGES[error], status=404)
    return api_success(message=MESSAGES['material_removed'])


# =============================================================================
# SCHEDULED CLASSES
# =============================================================================

@training_bp.route('/schedules')
def schedules_list():
    """List scheduled sessions. Query: class_id."""
    schedules = get_all_schedules()
    class_id = request.args.get('class_id')
    if class_id:
        schedules = [s for s in schedules if s['class_id'] == class_id]
    return api_success(data=schedules)


@training_bp.route('/schedules/<schedule_id>')
def schedule_detail(schedule_id):
    schedule = get_schedule_by_id(schedule_id)
    if not schedule:
        return api_error(MESSAGES['schedule_not_found'], status=404)
    return api_success(data=schedule)


@training_bp.route('/schedules', methods=['POST'])
def schedules_create():
    """Schedule a session of a class."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return api_error(MESSAGES['json_required'])

    record, errors = schedule_class(data)
    if errors:
        return api_error(MESSAGES['validation_failed'], errors=errors)

    return api_success(data=record, message=MESSAGES['schedule_created'], status=201)


@training_bp.route('/schedules/<schedule_id>', methods=['PUT'])
def schedules_update(schedule_id):
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return api_error(MESSAGES['json_required'])

    record, errors = update_scheduled_class(schedule_id, data)
    if errors:
        return api_error(MESSAGES['validation_failed'], errors=errors)
    if not record:
        return api_error(MESSAGES['schedule_not_found'], status=404)

    return api_success(data=record, message=MESSAGES['schedule_updated'])


@training_bp.route('/schedules/<schedule_id>', methods=['DELETE'])
def schedules_delete(schedule_id):
    if not delete_schedule(schedule_id):
        return api_error(MESSAGES['schedule_not_found'], status=404)
    return api_success(message=MESSAGES['schedule_deleted'])


@training_bp.route('/schedules/<schedule_id>/participants', methods=['PUT'])
def participants_set(schedule_id):
    """Replace the roster with the selected profile ids."""
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return api_error(MESSAGES['json_required'])
    profile_ids = data.get('profile_ids')
    if not isinstance(profile_ids, list):
        return api_error(MESSAGES['json_required'], field='profile_ids')

    schedule, error = set_participants(schedule_id, profile_ids)
    if error == 'roster_full':
        return api_error(MESSAGES['roster_full'].format(max=schedule['max_attendees']),
                         status=409, field='profile_ids')
    if error:
        return api_error(MESSAGES[error], status=404)

    count = len(schedule['participants'])
    return api_success(data=schedule, message=MESSAGES['participants_saved'].format(count=count))


@training_bp.route('/schedules/<schedule_id>/participants/<participant_id>', methods=['DELETE'])
def participants_remove(schedule_id, participant_id):
    schedule, error = remove_participant(schedule_id, participant_id)
    if error:
        return api_error(MESSAGES[error], status=404)
    return api_success(data=schedule, message=MESSAGES['participant_removed'])
