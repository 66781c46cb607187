"""Database layer for hisab application."""

from hisab.database.base import Database
from hisab.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
