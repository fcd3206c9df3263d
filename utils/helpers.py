"""
Miscellaneous utility helper functions.
Provides common functionality used across the application.
"""

import random
import string
import time

from utils.datetime_helpers import get_now


def generate_unique_code(prefix: str = '', length: int = 9) -> str:
    """
    Generate a timestamped unique record id, e.g. 'PSP-1718000000000-K3J9QZ0AB'.

    Args:
        prefix: Optional prefix (e.g., 'PSP', 'USR', 'RES')
        length: Length of random part

    Returns:
        Unique code string
    """
    millis = int(time.time() * 1000)
    random_part = ''.join(random.choices(string.ascii_uppercase + string.digits, k=length))

    if prefix:
        return f'{prefix}-{millis}-{random_part}'

    return f'{millis}-{random_part}'


def timestamp() -> str:
    """Current time as an ISO-8601 string with offset."""
    return get_now().isoformat()


def format_file_size(num_bytes: int) -> str:
    """
    Human readable file size.

    Args:
        num_bytes: Size in bytes

    Returns:
        String like '0 Bytes', '512 Bytes', '1.5 KB', '2.25 MB'
    """
    if not num_bytes or num_bytes <= 0:
        return '0 Bytes'

    units = ['Bytes', 'KB', 'MB', 'GB']
    size = float(num_bytes)
    index = 0
    while size >= 1024 and index < len(units) - 1:
        size /= 1024
        index += 1

    rounded = round(size, 2)
    if rounded == int(rounded):
        rounded = int(rounded)
    return f'{rounded} {units[index]}'


def split_csv(text: str) -> list:
    """Split comma separated input into trimmed, non-empty items."""
    if not text:
        return []
    return [item.strip() for item in text.split(',') if item.strip()]
