"""
Application Configuration

Centralizes Flask, database and settings store configuration.
"""

import os


class Config:
    """Base configuration class."""

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///settings.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Settings store
    SETTINGS_TABLE = os.environ.get('SETTINGS_TABLE', 'Settings')
    SETTINGS_FAIL_MODE = os.environ.get('SETTINGS_FAIL_MODE', 'strict')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SETTINGS_TABLE = 'Settings'
    SETTINGS_FAIL_MODE = 'strict'


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
