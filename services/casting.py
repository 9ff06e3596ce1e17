"""
Casting Service

Functions for converting between the canonical stored string of a setting
and its typed value. Numeric parsing is permissive: the longest valid
numeric prefix is used and anything unparseable reads as zero.
"""

import math
import re
import sys

from constants import SettingType, TRUE_STRINGS, BOOL_STRINGS
from .errors import UnsupportedTypeError

# Optional leading whitespace and sign, then digits (leading zeros apart)
INT_PREFIX = re.compile(r'\s*([+-]?)0*([0-9]+)', re.ASCII)

# Digits with optional fraction (or a bare fraction), then an optional exponent
FLOAT_PREFIX = re.compile(r'\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)', re.ASCII)


def resolve_type(type_tag):
    """Map a type tag (case-insensitive) to a SettingType."""
    if isinstance(type_tag, SettingType):
        return type_tag
    try:
        return SettingType(str(type_tag).lower())
    except ValueError:
        raise UnsupportedTypeError(type_tag) from None


def to_int(value):
    """Parse the leading integer of a value, 0 if there is none."""
    if isinstance(value, (bool, int)):
        return int(value)
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = INT_PREFIX.match(str(value)) if value is not None else None
    if not match:
        return 0
    sign, digits = match.groups()
    # Saturate at the 64-bit range like intval()
    if len(digits) > len(str(sys.maxsize)):
        number = sys.maxsize + 1
    else:
        number = int(digits)
    if sign == '-':
        return -min(number, sys.maxsize + 1)
    return min(number, sys.maxsize)


def to_float(value):
    """Parse the leading floating point number of a value, 0.0 if there is none."""
    if isinstance(value, (bool, int, float)):
        return float(value)
    match = FLOAT_PREFIX.match(str(value)) if value is not None else None
    return float(match.group(1)) if match else 0.0


def str_to_bool(value):
    """Yes/true/on/1 (any case) are True, everything else is False."""
    return str(value).lower() in TRUE_STRINGS


def bool_to_str(value):
    return BOOL_STRINGS[bool(value)]


def cast(value, type_tag):
    """
    Cast a value to the given setting type.

    Args:
        value: Stored string (or a runtime value when serializing)
        type_tag: SettingType or its tag name ('integer', 'Boolean', ...)

    Returns:
        int, float, bool or str depending on the type

    Raises:
        UnsupportedTypeError: If the tag is not a recognized type
    """
    setting_type = resolve_type(type_tag)

    if setting_type is SettingType.INTEGER:
        return to_int(value)
    if setting_type is SettingType.DOUBLE:
        return to_float(value)
    if setting_type is SettingType.BOOLEAN:
        return str_to_bool(value)

    # STRING
    if isinstance(value, bool):
        return bool_to_str(value)
    if value is None:
        return ''
    return str(value)


def serialize(value):
    """Canonical string form of a value, as written to storage."""
    return cast(value, SettingType.STRING)
