"""
Database initialization and connection utilities
"""

import uuid
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

db = SQLAlchemy()


def generate_id() -> str:
    """Primary keys are UUID strings, as issued by the hosted backend"""
    return str(uuid.uuid4())


def init_db() -> None:
    """Create all tables known to the metadata (requires an app context)"""
    db.create_all()


def check_connection() -> bool:
    """Run a trivial query against the configured database"""
    try:
        db.session.execute(text('SELECT 1'))
        return True
    except SQLAlchemyError:
        db.session.rollback()
        raise
