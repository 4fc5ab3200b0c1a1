"""SQLAlchemy ORM models - one JSON document per record collection"""

from sqlalchemy import Column, DateTime, JSON, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class RecordCollection(Base):
    """
    Persisted record set, stored verbatim under a fixed collection key.

    e.g. key="incomes" -> payload=[{...}, {...}], key="profile" -> payload={...}
    """

    __tablename__ = "record_collection"

    key = Column(Text, primary_key=True)
    payload = Column(JSON, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
