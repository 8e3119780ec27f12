"""
Template model for reusable documents.
"""

from sqlalchemy import Column, Integer, String, DateTime, Text

from graybay.db.base import Base
from graybay.utils.dates import utcnow


class Template(Base):
    """Reusable document/content definition."""

    __tablename__ = "templates"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    author = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    status = Column(String(50), nullable=True)
    content = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow, index=True)
