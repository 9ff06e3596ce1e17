"""
Database Base Module

Creates the SQLAlchemy instance the settings models are declared on.
Kept apart from the models so services can import db without cycles.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to the Flask app in create_app()
db = SQLAlchemy()
