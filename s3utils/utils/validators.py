"""
Validation helpers for storage client arguments
"""

import os
from datetime import date
from typing import Any

from s3utils.storage.errors import ValidationError


def require_value(value: Any, message: str) -> None:
    """
    Reject empty required arguments

    Args:
        value: Argument to check
        message: Validation message, e.g. ``"bucket name is empty"``

    Raises:
        ValidationError: If the value is None or empty
    """
    if value is None:
        raise ValidationError(message)

    if isinstance(value, (str, bytes)) and not value:
        raise ValidationError(message)


def require_date(value: Any, message: str = "date is empty") -> None:
    """Reject missing dates; datetime values are accepted as dates"""
    if value is None or not isinstance(value, date):
        raise ValidationError(message)


def to_path_str(value: Any) -> str:
    """Return a plain string for str, bytes or PathLike inputs"""
    return os.fsdecode(value)
