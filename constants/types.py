"""
Setting Type Constants

Type tags recognized for stored settings and the string forms that
read back as a true boolean.
"""

from enum import Enum


class SettingType(str, Enum):
    """Primitive type a stored value is interpreted as."""
    INTEGER = 'integer'
    STRING = 'string'
    BOOLEAN = 'boolean'
    DOUBLE = 'double'


# Lowercased strings that cast to True (everything else is False)
TRUE_STRINGS = {'yes', 'true', 'on', '1'}

# Canonical string forms written for booleans
BOOL_STRINGS = {True: 'true', False: 'false'}

# Table used when a store is built without an explicit name
DEFAULT_TABLE_NAME = 'Settings'
