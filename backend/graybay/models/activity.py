"""
Activity model: audit-trail entries for the activity feed.
"""

from sqlalchemy import Column, Integer, String, DateTime, Text

from graybay.db.base import Base
from graybay.utils.dates import utcnow


class Activity(Base):
    """Append-only record of a mutation."""

    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    type = Column(String(50), nullable=False, index=True)
    description = Column(Text, nullable=False)
    user = Column(String(255), nullable=True, index=True)
    target = Column(String(255), nullable=True)
    status = Column(String(50), nullable=False, default="success", index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)
