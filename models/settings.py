"""
Settings Model

Contains the typed key/value settings rows. Each row belongs to a group,
and the (key, group) pair is unique within its table.
"""

import re

from sqlalchemy.orm import declared_attr

from constants import DEFAULT_TABLE_NAME, MAX_LENGTHS
from .base import db


class SettingMixin:
    """
    Columns shared by every settings table.

    - key:   name of the setting, unique within its group
    - group: collection the setting belongs to
    - value: canonical string representation of the value
    - type:  one of the SettingType tags, decides how value is read
    """
    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(MAX_LENGTHS['key']), nullable=False)
    group = db.Column(db.String(MAX_LENGTHS['group']), nullable=False, index=True)
    value = db.Column(db.Text, nullable=False, default='')
    type = db.Column(db.String(MAX_LENGTHS['type']), nullable=False)

    @declared_attr
    def __table_args__(cls):
        return (
            db.UniqueConstraint('key', 'group', name=f'uq_{cls.__tablename__}_key_group'),
        )

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.group}/{self.key}>"


class Settings(SettingMixin, db.Model):
    """Default settings table."""
    __tablename__ = 'settings'


# Mapped model per table name, so each table is only declared once
_MODELS = {DEFAULT_TABLE_NAME: Settings}


def table_name_for(name):
    """Convert a CamelCase model name to its table name (SiteSettings -> site_settings)."""
    return re.sub(r'(?<!^)(?=[A-Z])', '_', name).lower()


def get_settings_model(name=DEFAULT_TABLE_NAME):
    """
    Return the model class for a settings table, creating it on first use.

    Alternate tables share the default table's columns and constraints.
    """
    model = _MODELS.get(name)
    if model is None:
        model = type(name, (SettingMixin, db.Model), {'__tablename__': table_name_for(name)})
        _MODELS[name] = model
    return model
