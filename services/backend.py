"""
Settings Backend

The persistence contract used by the settings store, and its
Flask-SQLAlchemy implementation. Backends deal only in canonical
strings; casting happens in the store.
"""

import logging
from abc import ABC, abstractmethod

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from constants import DEFAULT_TABLE_NAME
from models import db, get_settings_model
from .errors import BackendError, ConflictError, NotFoundError

logger = logging.getLogger(__name__)


class SettingsBackend(ABC):
    """
    Row-level CRUD on settings keyed by (key, group).

    Rows returned by the read methods expose key, group, value and type.
    """

    @abstractmethod
    def get_by_key_group(self, key, group):
        """Return the row for key and group, or None."""

    @abstractmethod
    def set_by_key_group(self, key, value, group):
        """Update the value of an existing row. Raises NotFoundError if absent."""

    @abstractmethod
    def get_all_group(self, group):
        """Return all rows of a group."""

    @abstractmethod
    def new_setting(self, key, value, type_tag, group):
        """Insert a row. Raises ConflictError if key and group already exist."""

    @abstractmethod
    def remove_by_group(self, group):
        """Delete all rows of a group and return how many were deleted."""

    @abstractmethod
    def remove_by_key_group(self, key, group):
        """Delete one row and return how many were deleted."""

    @abstractmethod
    def optimize(self):
        """Compact storage after deletes."""


class SqlAlchemySettingsBackend(SettingsBackend):
    """
    Settings backend on the Flask-SQLAlchemy session.

    Every write commits immediately. Database errors roll the session back
    and are re-raised as BackendError. Must be used inside an app context.
    """

    def __init__(self, table_name=DEFAULT_TABLE_NAME):
        self.table_name = table_name
        self.model = get_settings_model(table_name)

    @property
    def session(self):
        return db.session

    def _query(self):
        return self.session.query(self.model)

    def _commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.warning(f"Commit to {self.model.__tablename__} failed: {e}")
            raise BackendError(str(e)) from e

    def get_by_key_group(self, key, group):
        try:
            return self._query().filter_by(key=key, group=group).first()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.warning(f"Lookup of {group}/{key} failed: {e}")
            raise BackendError(str(e)) from e

    def set_by_key_group(self, key, value, group):
        setting = self.get_by_key_group(key, group)
        if setting is None:
            raise NotFoundError(key, group)

        setting.value = value
        self._commit()
        logger.debug(f"Updated setting {group}/{key}")

    def get_all_group(self, group):
        try:
            return self._query().filter_by(group=group).order_by(self.model.id).all()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.warning(f"Lookup of group {group} failed: {e}")
            raise BackendError(str(e)) from e

    def new_setting(self, key, value, type_tag, group):
        if self.get_by_key_group(key, group) is not None:
            raise ConflictError(key, group)

        self.session.add(self.model(key=key, value=value, type=type_tag, group=group))
        try:
            self._commit()
        except BackendError as e:
            # Lost a race with another writer on the unique constraint
            if isinstance(e.__cause__, IntegrityError):
                raise ConflictError(key, group) from None
            raise
        logger.debug(f"Created setting {group}/{key} ({type_tag})")

    def _delete(self, **filters):
        try:
            deleted = self._query().filter_by(**filters).delete(synchronize_session=False)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.warning(f"Delete from {self.model.__tablename__} failed: {e}")
            raise BackendError(str(e)) from e
        self._commit()
        return deleted

    def remove_by_group(self, group):
        deleted = self._delete(group=group)
        logger.debug(f"Removed {deleted} setting(s) in group {group}")
        return deleted

    def remove_by_key_group(self, key, group):
        deleted = self._delete(key=key, group=group)
        logger.debug(f"Removed {deleted} setting(s) for {group}/{key}")
        return deleted

    def optimize(self):
        """
        Run the dialect's statistics/compaction statement for the table.

        - sqlite:     PRAGMA optimize
        - postgresql: ANALYZE <table>
        - mysql:      OPTIMIZE TABLE <table>
        Other dialects are skipped.
        """
        table = self.model.__tablename__
        dialect = self.session.get_bind().dialect.name

        if dialect == 'sqlite':
            statement = 'PRAGMA optimize'
        elif dialect == 'postgresql':
            statement = f'ANALYZE "{table}"'
        elif dialect in ('mysql', 'mariadb'):
            statement = f'OPTIMIZE TABLE `{table}`'
        else:
            logger.debug(f"No optimize statement for dialect {dialect}, skipping")
            return

        try:
            self.session.execute(db.text(statement))
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.warning(f"Optimize of {table} failed: {e}")
            raise BackendError(str(e)) from e
        self._commit()
