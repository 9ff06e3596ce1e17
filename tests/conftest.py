"""Pytest configuration and fixtures."""

import pytest

from app import create_app, get_settings_store
from models import db


@pytest.fixture
def app():
    """Create an app on a fresh in-memory database, with its context pushed."""
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def store(app):
    """Settings store registered on the test app."""
    return get_settings_store()


@pytest.fixture
def seeded(store):
    """Store holding a small 'mail' group and a 'ui' group."""
    store.new_settings([
        store.make_setting('port', '25', 'integer', 'mail'),
        store.make_setting('host', 'smtp.example.com', 'string', 'mail'),
        store.make_setting('tls', 'true', 'boolean', 'mail'),
        store.make_setting('timeout', '2.5', 'double', 'mail'),
        store.make_setting('theme', 'dark', 'string', 'ui'),
    ])
    return store
