"""
Scheduled class model.
Scheduled sessions of a training class and their participant roster.
"""

from .storage import SCHEDULED_CLASSES_KEY, load_collection, save_collection

MAX_ATTENDEES_LIMIT = 100


def get_all_schedules() -> list:
    return load_collection(SCHEDULED_CLASSES_KEY)


def get_schedule_by_id(schedule_id: str) -> dict:
    """Get scheduled class by ID, or None."""
    for schedule in get_all_schedules():
        if schedule['id'] == schedule_id:
            return schedule
    return None


def get_schedules_for_class(class_id: str) -> list:
    return [s for s in get_all_schedules() if s['class_id'] == class_id]


def create_schedule(record: dict) -> dict:
    schedules = get_all_schedules()
    schedules.append(record)
    save_collection(SCHEDULED_CLASSES_KEY, schedules)
    return record


def update_schedule(schedule_id: str, **fields) -> dict:
    """
    Update fields of a scheduled class.

    Returns:
        Updated schedule dict or None if not found
    """
    schedules = get_all_schedules()
    for schedule in schedules:
        if schedule['id'] == schedule_id:
            schedule.update(fields)
            save_collection(SCHEDULED_CLASSES_KEY, schedules)
            return schedule
    return None


def delete_schedule(schedule_id: str) -> bool:
    """Delete a scheduled class. Returns True if it existed."""
    schedules = get_all_schedules()
    remaining = [s for s in schedules if s['id'] != schedule_id]
    if len(remaining) == len(schedules):
        return False
    save_collection(SCHEDULED_CLASSES_KEY, remaining)
    return True


def refresh_class_name(class_id: str, class_name: str) -> int:
    """Copy a renamed class name onto its scheduled sessions. Returns count updated."""
    schedules = get_all_schedules()
    changed = 0
    for schedule in schedules:
        if schedule['class_id'] == class_id and schedule['class_name'] != class_name:
            schedule['class_name'] = class_name
            changed += 1
    if changed:
        save_collection(SCHEDULED_CLASSES_KEY, schedules)
    return changed
