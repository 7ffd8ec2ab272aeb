"""Database module."""

from .database import RunHistory, init_db, make_engine, session_scope
from .models import Base, UnitRun

__all__ = ["RunHistory", "init_db", "make_engine", "session_scope", "Base", "UnitRun"]
