"""Database layer for pennywise application."""

from pennywise.database.base import Database
from pennywise.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
