from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.types import TypeDecorator

class OffsetDateTime(TypeDecorator):
    """
    Timestamp that keeps the UTC offset it was given.

    PostgreSQL stores it as ``timestamptz``. SQLite has no such type and its
    DATETIME drops tzinfo, so the value is kept there as ISO-8601 text.
    Naive values stay naive.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(40))
        return dialect.type_descriptor(DateTime(timezone=True))

    def process_bind_param(self, value, dialect):
        if value is None or dialect.name != "sqlite":
            return value
        return value.isoformat()

    def process_result_value(self, value, dialect):
        if value is None or dialect.name != "sqlite":
            return value
        return datetime.fromisoformat(value)
