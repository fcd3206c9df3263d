"""
Training class model.
Class definitions with their course material metadata.
"""

from .storage import TRAINING_CLASSES_KEY, load_collection, save_collection

DURATION_TYPES = ['hours', 'days', 'weeks']


def get_all_classes() -> list:
    return load_collection(TRAINING_CLASSES_KEY)


def get_class_by_id(class_id: str) -> dict:
    """Get training class by ID, or None."""
    for training_class in get_all_classes():
        if training_class['id'] == class_id:
            return training_class
    return None


def create_class(record: dict) -> dict:
    classes = get_all_classes()
    classes.append(record)
    save_collection(TRAINING_CLASSES_KEY, classes)
    return record


def update_class(class_id: str, **fields) -> dict:
    """
    Update fields of a training class.

    Returns:
        Updated class dict or None if not found
    """
    classes = get_all_classes()
    for training_class in classes:
        if training_class['id'] == class_id:
            training_class.update(fields)
            save_collection(TRAINING_CLASSES_KEY, classes)
            return training_class
    return None


def delete_class(class_id: str) -> bool:
    """Delete a training class. Returns True if it existed."""
    classes = get_all_classes()
    remaining = [c for c in classes if c['id'] != class_id]
    if len(remaining) == len(classes):
        return False
    save_collection(TRAINING_CLASSES_KEY, remaining)
    return True


def duration_display(training_class: dict) -> str:
    """Duration with its unit, singular for 1 (e.g. '3 days', '1 hour')."""
    duration = training_class['duration']
    unit = training_class['duration_type']
    if duration == 1:
        unit = unit[:-1]
    return f'{duration} {unit}'
