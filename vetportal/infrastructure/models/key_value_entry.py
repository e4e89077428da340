"""SQLAlchemy model for persisted key-value entries."""

from sqlalchemy import Column, DateTime, String, Text

from vetportal.infrastructure.database import Base
from vetportal.utils import now_in_app_timezone


def _now_naive():
    return now_in_app_timezone().replace(tzinfo=None)


class KeyValueEntryModel(Base):
    """Database representation of a single stored value."""

    __tablename__ = "key_value_entry"

    key = Column(String(191), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(), nullable=False, default=_now_naive, onupdate=_now_naive)


__all__ = ["KeyValueEntryModel"]
