"""
Services Package

Typed settings store, value casting and persistence backends.
"""

from .casting import (
    bool_to_str,
    cast,
    resolve_type,
    serialize,
    str_to_bool,
    to_float,
    to_int,
)

from .errors import (
    ErrorKind,
    SettingsError,
    NotFoundError,
    ConflictError,
    UnsupportedTypeError,
    BackendError,
)

from .result import FailMode, Result

from .backend import SettingsBackend, SqlAlchemySettingsBackend

from .settings_store import SettingsStore

__all__ = [
    # Casting
    'bool_to_str',
    'cast',
    'resolve_type',
    'serialize',
    'str_to_bool',
    'to_float',
    'to_int',
    # Errors
    'ErrorKind',
    'SettingsError',
    'NotFoundError',
    'ConflictError',
    'UnsupportedTypeError',
    'BackendError',
    # Results
    'FailMode',
    'Result',
    # Backends
    'SettingsBackend',
    'SqlAlchemySettingsBackend',
    # Store
    'SettingsStore',
]
