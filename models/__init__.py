"""
Models Package

Exports the settings models and the db instance for use throughout the application.
"""

from .base import db

from .settings import Settings, SettingMixin, get_settings_model, table_name_for

__all__ = [
    'db',
    'Settings',
    'SettingMixin',
    'get_settings_model',
    'table_name_for',
]
