"""
Settings Store

Typed key/value holder on top of a settings backend. Values are stored as
canonical strings together with a type tag, and are cast back to that type
when read. Settings can be tied together with a group name so that a set of
related values (the configuration of one object, say) can be read, updated
or removed as a whole.
"""

import logging

from constants import DEFAULT_TABLE_NAME
from .backend import SqlAlchemySettingsBackend
from .casting import cast, resolve_type, serialize
from .errors import NotFoundError, SettingsError
from .result import FailMode, Result

logger = logging.getLogger(__name__)


class SettingsStore:
    """
    Typed access to one settings table.

    Each operation that takes a fail_mode returns a Result. In strict mode
    errors are raised, so the Result is always successful; in lenient mode
    errors are returned inside a failed Result. Nothing is cached: every call
    goes to the backend.
    """

    def __init__(self, table_name=DEFAULT_TABLE_NAME, backend=None, fail_mode=FailMode.STRICT):
        """
        Args:
            table_name: Settings table to use. Alternate tables must have the
                same key/group/value/type schema as the default one.
            backend: Backend to use instead of a SqlAlchemySettingsBackend
                on table_name
            fail_mode: Default for operations called without a fail_mode
        """
        self.backend = backend if backend is not None else SqlAlchemySettingsBackend(table_name)
        self.table_name = getattr(self.backend, 'table_name', table_name)
        self.fail_mode = FailMode(fail_mode)

    @staticmethod
    def make_setting(key, value, type_tag, group):
        """Build an entry for new_settings()."""
        return {'key': key, 'value': value, 'type': type_tag, 'group': group}

    def _run(self, fail_mode, operation, *args):
        """Call operation, raising or wrapping a SettingsError according to fail_mode."""
        mode = FailMode(fail_mode) if fail_mode is not None else self.fail_mode
        try:
            value = operation(*args)
        except SettingsError as e:
            if mode is FailMode.STRICT:
                raise
            logger.info(f"Suppressed {e.kind.value} in {operation.__name__}: {e}")
            return Result.failure(e)
        return Result.success(value)

    def _lookup(self, key, group):
        setting = self.backend.get_by_key_group(key, group)
        if setting is None:
            raise NotFoundError(key, group)
        return setting

    def get(self, key, group, fail_mode=None):
        """
        Get the typed value of a setting.

        A missing setting is subject to fail_mode. A stored type that can't
        be cast raises UnsupportedTypeError in either mode.
        """
        result = self._run(fail_mode, self._lookup, key, group)
        if not result.ok:
            return result
        setting = result.value
        return Result.success(cast(setting.value, setting.type))

    def set(self, key, value, group, fail_mode=None):
        """Update the value of an existing setting. The stored type is kept."""
        return self._run(fail_mode, self.backend.set_by_key_group, key, serialize(value), group)

    def _read_group(self, group):
        return {
            setting.key: cast(setting.value, setting.type)
            for setting in self.backend.get_all_group(group)
        }

    def get_all_group(self, group, fail_mode=None):
        """Get all settings of a group as a {key: typed value} dict."""
        return self._run(fail_mode, self._read_group, group)

    def _write_group(self, entries, group):
        for key, value in entries.items():
            self.set(key, value, group, FailMode.STRICT)

    def set_all_group(self, entries, group, fail_mode=None):
        """
        Update several settings of a group from a {key: value} dict.

        Entries are written one at a time in order. The first failure stops
        the loop; entries written before it stay updated.
        """
        return self._run(fail_mode, self._write_group, entries, group)

    def _create(self, key, value, type_tag, group):
        setting_type = resolve_type(type_tag)
        self.backend.new_setting(key, serialize(value), setting_type.value, group)

    def new_setting(self, key, value, type_tag, group, fail_mode=None):
        """
        Create a new setting.

        The value is stored as given and only checked against its type when
        it is read.
        """
        return self._run(fail_mode, self._create, key, value, type_tag, group)

    def _create_all(self, entries):
        for entry in entries:
            self._create(entry['key'], entry['value'], entry['type'], entry['group'])

    def new_settings(self, entries, fail_mode=None):
        """Create settings from a sequence of make_setting() dicts, in order."""
        return self._run(fail_mode, self._create_all, entries)

    def has_setting(self, key, group):
        """Check whether a setting exists. Backend errors are always raised."""
        return self.backend.get_by_key_group(key, group) is not None

    def remove_group(self, group, fail_mode=None):
        """Remove every setting of a group. An empty group is not an error."""
        result = self._run(fail_mode, self.backend.remove_by_group, group)
        if not result.ok:
            return result
        self.backend.optimize()
        return Result.success()

    def remove_setting(self, key, group, fail_mode=None):
        """Remove a single setting. A missing setting is not an error."""
        result = self._run(fail_mode, self.backend.remove_by_key_group, key, group)
        if not result.ok:
            return result
        self.backend.optimize()
        return Result.success()
