"""
Operation Results

FailMode selects whether store operations raise or report failures,
and Result carries either the value of a successful call or the error.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .errors import SettingsError


class FailMode(str, Enum):
    """How a store operation reports an error."""
    STRICT = 'strict'    # raise the error to the caller
    LENIENT = 'lenient'  # return a failed Result


@dataclass(frozen=True)
class Result:
    """
    Outcome of a store operation.

    A successful Result holds the operation's value (a typed setting, a
    mapping of settings, or None for writes). A failed Result holds the
    error instead, so a stored boolean False is never mistaken for a failure.
    Truthiness reflects success, not the value.
    """
    value: Any = None
    error: Optional[SettingsError] = None

    @classmethod
    def success(cls, value=None):
        return cls(value=value)

    @classmethod
    def failure(cls, error):
        return cls(error=error)

    @property
    def ok(self):
        return self.error is None

    @property
    def kind(self):
        """ErrorKind of the failure, or None on success."""
        return self.error.kind if self.error is not None else None

    def unwrap(self):
        """Return the value, raising the carried error if the call failed."""
        if self.error is not None:
            raise self.error
        return self.value

    def __bool__(self):
        return self.ok
