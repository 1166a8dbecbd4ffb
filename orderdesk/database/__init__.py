from orderdesk.database.base import Base
from orderdesk.database.engine import Database, build_engine
from orderdesk.database.session import get_db

__all__ = ["Base", "Database", "build_engine", "get_db"]
