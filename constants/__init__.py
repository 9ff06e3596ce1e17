"""
Constants Package

Type tags, defaults and column limits shared by models and services.
"""

from .types import SettingType, TRUE_STRINGS, BOOL_STRINGS, DEFAULT_TABLE_NAME
from .validation import MAX_LENGTHS, VALID_FAIL_MODES

__all__ = [
    'SettingType',
    'TRUE_STRINGS',
    'BOOL_STRINGS',
    'DEFAULT_TABLE_NAME',
    'MAX_LENGTHS',
    'VALID_FAIL_MODES',
]
