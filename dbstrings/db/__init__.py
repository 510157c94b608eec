from dbstrings.db.base import Base
from dbstrings.db.models import LocalizationRecord
from dbstrings.db.session import Database

__all__ = ["Base", "Database", "LocalizationRecord"]
