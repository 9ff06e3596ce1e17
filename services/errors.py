"""
Settings Errors

Exception hierarchy raised by the settings store and its backends.
Every error carries an ErrorKind so lenient callers can tell failures apart.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a settings failure."""
    NOT_FOUND = 'not_found'
    CONFLICT = 'conflict'
    UNSUPPORTED_TYPE = 'unsupported_type'
    BACKEND_FAILURE = 'backend_failure'


class SettingsError(Exception):
    """Base class for all settings store errors. Reported as a backend failure unless a subclass says otherwise."""
    kind = ErrorKind.BACKEND_FAILURE


class NotFoundError(SettingsError):
    """Raised when no setting exists for a key and group."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, key, group):
        self.key = key
        self.group = group
        super().__init__(
            f"The configuration setting with key '{key}' and group '{group}' does not exist."
        )


class ConflictError(SettingsError):
    """Raised when creating a setting whose key and group already exist."""
    kind = ErrorKind.CONFLICT

    def __init__(self, key, group):
        self.key = key
        self.group = group
        super().__init__(
            f"The configuration setting with key '{key}' and group '{group}' already exists."
        )


class UnsupportedTypeError(SettingsError):
    """Raised when a type tag is not one of the recognized setting types."""
    kind = ErrorKind.UNSUPPORTED_TYPE

    def __init__(self, type_tag):
        self.type_tag = type_tag
        super().__init__(f"Unsupported type '{type_tag}'")


class BackendError(SettingsError):
    """Raised when the storage backend fails (I/O, database or driver errors)."""
    kind = ErrorKind.BACKEND_FAILURE
