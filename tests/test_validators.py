"""
Tests for input validation utilities.
"""

import re
from datetime import date

import pytest

from utils.datetime_helpers import parse_date

from utils.helpers import format_file_size, generate_unique_code, split_csv
from utils.validators import (
    validate_email,
    validate_phone,
    validate_cell_number,
    validate_date_format,
    is_adult,
)


class TestValidateEmail:
    """Tests for email validation."""

    def test_valid_email(self):
        """Test valid email formats."""
        assert validate_email('user@example.com') is True
        assert validate_email('user.name@example.com') is True
        assert validate_email('user+tag@example.co.uk') is True

    def test_invalid_email(self):
        """Test invalid email formats."""
        assert validate_email('') is False
        assert validate_email(None) is False
        assert validate_email('invalid') is False
        assert validate_email('missing@domain') is False
        assert validate_email('spaces in@email.com') is False


class TestValidatePhone:
    """Tests for US phone validation."""

    def test_valid_phones(self):
        assert validate_phone('(717) 555-0100') is True
        assert validate_phone('717-555-0100') is True
        assert validate_phone('717.555.0100') is True
        assert validate_phone('717 555 0100') is True
        assert validate_phone('7175550100') is True

    def test_invalid_phones(self):
        assert validate_phone('') is False
        assert validate_phone(None) is False
        assert validate_phone('555-0100') is False
        assert validate_phone('+1 717 555 0100') is False
        assert validate_phone('717-555-01000') is False


class TestValidateCellNumber:

    def test_counts_digits(self):
        assert validate_cell_number('+1 (717) 555-0100') is True
        assert validate_cell_number('717-555-010') is False

    def test_rejects_letters(self):
        assert validate_cell_number('717-555-01OO') is False


class TestValidateDates:
    """Tests for date validation."""

    def test_date_format(self):
        assert validate_date_format('2025-02-28') is True
        assert validate_date_format('2025-02-30') is False
        assert validate_date_format('02/28/2025') is False
        assert validate_date_format(None) is False

    def test_is_adult_birthday_boundary(self):
        today = date(2025, 6, 15)

        assert is_adult('2007-06-15', today=today) is True
        assert is_adult('2007-06-16', today=today) is False
        assert is_adult('2030-01-01', today=today) is False
        assert is_adult('not-a-date', today=today) is False


class TestParseDate:
    """Tests for calendar-day parsing of stored and submitted dates."""

    def test_plain_date(self):
        assert parse_date('2025-01-01') == date(2025, 1, 1)

    def test_utc_timestamp_uses_local_day(self):
        # 03:00 UTC is still the previous evening in New York
        assert parse_date('2025-01-02T03:00:00.000Z') == date(2025, 1, 1)
        assert parse_date('2025-01-02T15:00:00Z') == date(2025, 1, 2)

    def test_offset_timestamp_converted(self):
        assert parse_date('2025-01-02T01:00:00+02:00') == date(2025, 1, 1)

    def test_naive_timestamp_keeps_its_day(self):
        assert parse_date('2025-01-02T23:30:00') == date(2025, 1, 2)

    @pytest.mark.parametrize('value', ['2025-01-01garbage', '2025-13-01', '', None])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            parse_date(value)


class TestHelpers:

    def test_unique_code_shape(self):
        code = generate_unique_code('PSP')
        prefix, millis, random_part = code.split('-')

        assert prefix == 'PSP'
        assert millis.isdigit()
        assert re.fullmatch(r'[A-Z0-9]{9}', random_part)

    def test_format_file_size(self):
        assert format_file_size(0) == '0 Bytes'
        assert format_file_size(512) == '512 Bytes'
        assert format_file_size(1536) == '1.5 KB'
        assert format_file_size(5 * 1024 * 1024) == '5 MB'

    def test_split_csv(self):
        assert split_csv(' a, b ,,c ') == ['a', 'b', 'c']
        assert split_csv('') == []
