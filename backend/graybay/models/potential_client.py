"""
Potential client model used by capacity recommendations.
"""

import json
from typing import List

from sqlalchemy import Column, Integer, String, Float, Text

from graybay.db.base import Base


class PotentialClient(Base):
    """Prospect with the service types it has shown interest in."""

    __tablename__ = "potential_clients"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False)
    # JSON-encoded list of service types, matched with a substring search
    interested_services = Column(Text, nullable=False, default="[]")
    probability = Column(Float, nullable=False, default=0)

    @property
    def interested_service_list(self) -> List[str]:
        try:
            value = json.loads(self.interested_services or "[]")
        except ValueError:
            return []
        return [str(item) for item in value] if isinstance(value, list) else []
