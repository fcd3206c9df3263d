"""
Input validation helper functions.
Provides validation for common input types, plus WTForms validators
built on top of them for the module forms.
"""

import re
from datetime import datetime

from wtforms.validators import ValidationError

from utils.datetime_helpers import get_today, years_between

EMAIL_PATTERN = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
US_PHONE_PATTERN = r'^\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}$'


def validate_email(email: str) -> bool:
    """
    Validate email format.

    Args:
        email: Email address to validate

    Returns:
        True if valid email format
    """
    if not email or not isinstance(email, str):
        return False

    return bool(re.match(EMAIL_PATTERN, email))


def validate_phone(phone: str) -> bool:
    """
    Validate a 10-digit US phone number.
    Accepts: (717) 555-0100, 717-555-0100, 717.555.0100, 7175550100

    Args:
        phone: Phone number to validate

    Returns:
        True if valid phone format
    """
    if not phone or not isinstance(phone, str):
        return False

    return bool(re.match(US_PHONE_PATTERN, phone.strip()))


def validate_cell_number(cell: str, min_digits: int = 10) -> bool:
    """
    Validate a cell number by counting its digits.

    Args:
        cell: Cell number, separators allowed
        min_digits: Minimum number of digits

    Returns:
        True if enough digits and nothing but digits/separators
    """
    if not cell or not isinstance(cell, str):
        return False

    if re.search(r'[^0-9\s\-\.\(\)\+]', cell):
        return False

    return len(re.sub(r'\D', '', cell)) >= min_digits


def validate_date_format(date_str: str) -> bool:
    """
    Validate date is in YYYY-MM-DD format.

    Args:
        date_str: Date string to validate

    Returns:
        True if valid format
    """
    try:
        datetime.strptime(date_str, '%Y-%m-%d')
        return True
    except (ValueError, TypeError):
        return False


def is_adult(date_of_birth: str, min_age: int = 18, today=None) -> bool:
    """
    Check that a person born on date_of_birth is at least min_age today.

    Args:
        date_of_birth: Birth date (YYYY-MM-DD)
        min_age: Minimum age in completed years
        today: Reference date (defaults to today in the configured timezone)

    Returns:
        True if old enough, False if too young or the date is invalid
    """
    try:
        born = datetime.strptime(date_of_birth, '%Y-%m-%d').date()
    except (ValueError, TypeError):
        return False

    today = today or get_today()
    if born > today:
        return False
    return years_between(born, today) >= min_age


# =============================================================================
# WTFORMS VALIDATORS
# =============================================================================

class USPhone:
    """WTForms validator for 10-digit US phone numbers."""

    def __init__(self, message=None):
        self.message = message or 'Please enter a valid 10-digit US phone number'

    def __call__(self, form, field):
        if not validate_phone(field.data):
            raise ValidationError(self.message)


class MinimumAge:
    """WTForms validator for an ISO birth date at least `years` old."""

    def __init__(self, years: int = 18, message=None):
        self.years = years
        self.message = message or f'You must be at least {years} years old'

    def __call__(self, form, field):
        if not validate_date_format(field.data):
            raise ValidationError('Please enter a valid date (YYYY-MM-DD)')
        if not is_adult(field.data, self.years):
            raise ValidationError(self.message)


class ISODate:
    """WTForms validator for YYYY-MM-DD strings."""

    def __init__(self, message=None):
        self.message = message or 'Please enter a valid date (YYYY-MM-DD)'

    def __call__(self, form, field):
        if not validate_date_format(field.data):
            raise ValidationError(self.message)


class CellNumber:
    """WTForms validator for cell numbers with a minimum digit count."""

    def __init__(self, min_digits: int = 10, message=None):
        self.min_digits = min_digits
        self.message = message or f'Cell number must be at least {min_digits} digits'

    def __call__(self, form, field):
        if not validate_cell_number(field.data, self.min_digits):
            raise ValidationError(self.message)
