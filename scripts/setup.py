#!/usr/bin/env python3
"""Setup script for the GoGlobe API: migrate the schema and seed sample data."""

import asyncio
import logging
import os
import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

# Add the server directory to the Python path
server_dir = Path(__file__).parent.parent / "server"
sys.path.insert(0, str(server_dir))

from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
from sqlalchemy import func, select  # noqa: E402

from goglobe.core.database import async_session_factory, close_db  # noqa: E402
from goglobe.models import (  # noqa: E402
    Agency,
    City,
    Country,
    Hotel,
    Property,
    PropertyKind,
    Room,
    TravelOffer,
    UserKind,
)
from goglobe.repositories import UserRepository  # noqa: E402
from goglobe.services import UserService  # noqa: E402

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ADMIN_EMAIL = os.environ.get("GOGLOBE_ADMIN_EMAIL", "admin@goglobe.example.com")
ADMIN_PASSWORD = os.environ.get("GOGLOBE_ADMIN_PASSWORD", "change-me-please")


def setup_database():
    """Upgrade the database schema to the latest revision."""
    logger.info("Running database migrations...")

    alembic_cfg = Config(str(server_dir / "db" / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(server_dir / "db" / "alembic"))
    command.upgrade(alembic_cfg, "head")

    logger.info("Database migrations completed")


async def create_admin():
    """Create the first administrator unless one already exists."""
    async with async_session_factory() as db:
        service = UserService(UserRepository(db))
        if await service.repository.get_by_email(ADMIN_EMAIL):
            logger.info(f"Administrator {ADMIN_EMAIL} already exists, skipping...")
            return

        await service.create_user(
            email=ADMIN_EMAIL,
            password=ADMIN_PASSWORD,
            name="GoGlobe",
            surname="Administrator",
            kind=UserKind.ADMINISTRATOR
        )
        logger.info(f"Administrator {ADMIN_EMAIL} created")


async def create_sample_data():
    """Create a small catalogue for local testing."""
    logger.info("Creating sample data...")

    async with async_session_factory() as db:
        try:
            existing_offers = await db.scalar(select(func.count()).select_from(TravelOffer))
            if existing_offers:
                logger.info("Sample data already exists, skipping...")
                return

            agency = Agency(name="Sunrise Travel", address="12 Harbour Street", logo=None)
            country = Country(name="Iceland")
            city = City(name="Reykjavik")
            hotel = Hotel(
                name="Aurora Lodge",
                star_count=4,
                rooms=[Room(type="single"), Room(type="double")]
            )
            transfer = Property(name="Airport transfer", kind=PropertyKind.INCLUDED.value)
            insurance = Property(name="Travel insurance", kind=PropertyKind.EXCLUDED.value)
            db.add_all([agency, country, city, hotel, transfer, insurance])
            await db.flush()

            base_date = datetime.now(timezone.utc) + timedelta(days=30)
            for i in range(3):
                departure = base_date + timedelta(days=i * 7)
                db.add(TravelOffer(
                    agency_id=agency.id,
                    country_id=country.id,
                    city_id=city.id,
                    hotel_id=hotel.id,
                    description="Northern lights week with guided excursions",
                    departure_date=departure,
                    return_date=departure + timedelta(days=6),
                    person_count=2,
                    price=Decimal("1299.00"),
                    is_feeding_included=i % 2 == 0,
                    properties=[transfer, insurance]
                ))

            await db.commit()
            logger.info("Sample data created successfully!")

        except Exception as e:
            await db.rollback()
            logger.error(f"Failed to create sample data: {e}")
            raise


async def seed():
    try:
        await create_admin()
        await create_sample_data()
    finally:
        await close_db()


def main():
    """Main setup function."""
    logger.info("Starting GoGlobe API setup...")

    setup_database()
    asyncio.run(seed())

    logger.info("Setup completed successfully!")
    logger.info("You can now start the API server with: cd server && uvicorn goglobe.main:app --reload")


if __name__ == "__main__":
    main()
