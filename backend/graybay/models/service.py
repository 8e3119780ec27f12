"""
Service model: a subscribed offering provisioned for a client,
with its usage metrics and resource allocation log.
"""

from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship

from graybay.db.base import Base
from graybay.utils.dates import utcnow


class Service(Base):
    """Service subscribed by a client."""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=True)
    status = Column(String(50), nullable=False, default="active")
    capacity_limit = Column(Float, nullable=True)
    # Denormalized: the `used` of the newest allocation once any exist
    current_usage = Column(Float, nullable=True, default=0)
    cost_per_unit = Column(Float, nullable=True)
    custom_price = Column(Float, nullable=True)
    price_range_min = Column(Float, nullable=True)
    price_range_max = Column(Float, nullable=True)
    included = Column(Boolean, nullable=False, default=True)
    health_score = Column(Float, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    client = relationship("Client", back_populates="services")
    metrics = relationship(
        "ServiceMetric",
        back_populates="service",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    resource_allocations = relationship(
        "ResourceAllocation",
        back_populates="service",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class ServiceMetric(Base):
    """Append-only measurement for a service."""

    __tablename__ = "service_metrics"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    service_id = Column(Integer, ForeignKey("services.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    value = Column(Float, nullable=False)
    unit = Column(String(50), nullable=True)
    status = Column(String(50), nullable=True)
    trend = Column(Float, nullable=True)
    timestamp = Column(DateTime, nullable=False, default=utcnow, index=True)

    service = relationship("Service", back_populates="metrics")


class ResourceAllocation(Base):
    """Append-only log of capacity assigned to a client's service."""

    __tablename__ = "resource_allocations"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    service_id = Column(Integer, ForeignKey("services.id", ondelete="CASCADE"), nullable=False, index=True)
    client_id = Column(Integer, ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True)
    allocated = Column(Float, nullable=False)
    used = Column(Float, nullable=False)
    cost = Column(Float, nullable=False, default=0)
    timestamp = Column(DateTime, nullable=False, default=utcnow, index=True)

    service = relationship("Service", back_populates="resource_allocations")
    client = relationship("Client")
