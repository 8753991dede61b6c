"""
Utility functions for argument validation
"""

from .validators import require_value, require_date, to_path_str

__all__ = [
    'require_value',
    'require_date',
    'to_path_str'
]
