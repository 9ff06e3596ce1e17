"""
Application Factory

Builds the Flask application that owns the database connection and
registers a SettingsStore for the configured settings table.
"""

import logging
import sys

from flask import Flask, current_app
from flask_migrate import Migrate

from config import get_config
from constants import VALID_FAIL_MODES
from models import db, get_settings_model
from services import SettingsStore

logger = logging.getLogger(__name__)

migrate = Migrate()


def setup_logging(level):
    """Configure root logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def create_app(env=None):
    """
    Create and configure the application.

    Args:
        env: Configuration name ('development', 'production', 'testing').
             Defaults to FLASK_ENV.

    Returns:
        Flask app with db, migrations and the settings store set up
    """
    app = Flask(__name__)
    app.config.from_object(get_config(env))

    setup_logging(app.config['LOG_LEVEL'])

    fail_mode = app.config['SETTINGS_FAIL_MODE'].lower()
    if fail_mode not in VALID_FAIL_MODES:
        raise ValueError(f"Invalid SETTINGS_FAIL_MODE '{fail_mode}'")

    db.init_app(app)
    migrate.init_app(app, db)

    table_name = app.config['SETTINGS_TABLE']
    # Map the table before create_all so alternate tables get created too
    get_settings_model(table_name)
    init_db(app)

    app.extensions['settings_store'] = SettingsStore(table_name=table_name, fail_mode=fail_mode)
    logger.info(f"Settings store ready on table {table_name} ({fail_mode})")
    return app


def get_settings_store():
    """Return the settings store of the current application."""
    return current_app.extensions['settings_store']


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db(app):
    """Create any missing settings tables."""
    with app.app_context():
        db.create_all()

