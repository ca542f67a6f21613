"""
Database module - SQLAlchemy engine, sessions and table models.
"""
from hirehub.db.database import Base, get_db, get_db_session, init_db, test_db_connection

__all__ = [
    "Base",
    "get_db",
    "get_db_session",
    "init_db",
    "test_db_connection"
]
