"""
Database initialization and demo data seeding.
Run with: python -m graybay.db.init_db [--seed]
"""

import asyncio
import json
import sys
from datetime import timedelta

from graybay.core.config import settings
from graybay.core.logging import setup_logging, get_logger
from graybay.db.session import Database
from graybay.models import (
    Activity,
    Client,
    ClientStatus,
    Contact,
    ContactType,
    PotentialClient,
    ResourceAllocation,
    Service,
    ServiceMetric,
    Template,
)
from graybay.utils.dates import utcnow

logger = get_logger(__name__)


async def create_tables(database: Database) -> None:
    """Create all database tables."""
    await database.create_all()


async def seed_demo_data(database: Database) -> None:
    """
    Seed a small demo portfolio: two clients with services, metric samples,
    an allocation history, prospects and a template.
    """
    now = utcnow()
    async with database.session() as session:
        dental = Client(
            name="Bayside Dental",
            website="https://baysidedental.example",
            industry="Healthcare",
            size="11-50",
            status=ClientStatus.ACTIVE,
            health_score=92,
            monthly_revenue=499,
        )
        bakery = Client(
            name="Crozier Bakery",
            website="https://crozierbakery.example",
            industry="Food & Beverage",
            size="1-10",
            status=ClientStatus.ACTIVE,
            health_score=78,
            monthly_revenue=199,
        )
        session.add_all([dental, bakery])
        await session.flush()

        session.add_all([
            Contact(client_id=dental.id, name="Dana Reyes", role="Office Manager",
                    email="dana@baysidedental.example", is_primary=True, type=ContactType.PRIMARY),
            Contact(client_id=dental.id, name="Sam Ortiz", role="IT Lead",
                    email="sam@baysidedental.example", is_primary=False, type=ContactType.TECHNICAL),
            Contact(client_id=bakery.id, name="Robin Crozier", role="Owner",
                    email="robin@crozierbakery.example", is_primary=True, type=ContactType.PRIMARY),
        ])

        hosting = Service(
            client_id=dental.id,
            name="Website Maintenance",
            type="website-maintenance",
            description="Hosting, updates and backups",
            capacity_limit=100,
            current_usage=90,
            cost_per_unit=2.5,
            health_score=88,
        )
        chatbot = Service(
            client_id=bakery.id,
            name="Chatbot Management",
            type="chatbot-management",
            description="Order-taking chatbot",
            capacity_limit=500,
            current_usage=120,
            cost_per_unit=0.4,
            health_score=95,
        )
        session.add_all([hosting, chatbot])
        await session.flush()

        for hours_ago, value in enumerate([99.9, 99.7, 99.95]):
            session.add(ServiceMetric(
                service_id=hosting.id,
                name="uptime",
                value=value,
                unit="%",
                status="healthy",
                timestamp=now - timedelta(hours=hours_ago),
            ))
        session.add_all([
            ResourceAllocation(service_id=hosting.id, client_id=dental.id, allocated=60, used=50,
                               cost=150, timestamp=now - timedelta(days=2)),
            ResourceAllocation(service_id=hosting.id, client_id=dental.id, allocated=100, used=90,
                               cost=250, timestamp=now - timedelta(days=1)),
            ResourceAllocation(service_id=chatbot.id, client_id=bakery.id, allocated=500, used=120,
                               cost=200, timestamp=now - timedelta(days=1)),
        ])

        session.add_all([
            PotentialClient(name="Harbor Physio",
                            interested_services=json.dumps(["website-maintenance", "seo-management"]),
                            probability=0.7),
            PotentialClient(name="Pier 9 Cafe",
                            interested_services=json.dumps(["chatbot-management"]),
                            probability=0.4),
        ])

        session.add(Template(
            name="Monthly Report",
            author=settings.DEMO_USER_NAME,
            description="Standard monthly service report",
            status="active",
            content="# Monthly report\n",
        ))
        session.add(Activity(
            type="system",
            description="Demo data seeded",
            user="System",
            target="database",
        ))

    logger.info("Demo data seeded")


async def main(seed: bool = False) -> None:
    setup_logging()
    database = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    try:
        await create_tables(database)
        if seed:
            await seed_demo_data(database)
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(main(seed="--seed" in sys.argv[1:]))
