"""
Extensions module to avoid circular imports.
Should contain all Flask extension instances.
"""
from flask_sqlalchemy import SQLAlchemy

# Initialize extensions
db = SQLAlchemy()
