# maktabi/database.py
"""
Database connection, session management, and table creation.
Uses SQLAlchemy; PostgreSQL in production, SQLite for local runs and tests.
All models are auto-imported here so create_tables() creates every table in one call.
"""

import uuid

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from maktabi.config import settings


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool   # One shared in-memory DB
        return options
    return {
        "pool_pre_ping": True,          # Auto-reconnect if DB connection drops
        "pool_size": 10,
        "max_overflow": 20,
    }


engine = create_engine(
    settings.DATABASE_URL,
    echo=False,                  # Set True to log all SQL queries (debug only)
    **_engine_options(settings.DATABASE_URL),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def new_id() -> str:
    """Generated record identifier (UUID4 string)."""
    return str(uuid.uuid4())


def get_db():
    """FastAPI dependency. Yields a DB session and closes it after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables():
    """
    Creates all DB tables on startup. Safe to call multiple times.
    Import all models here so SQLAlchemy knows about them.
    """
    # Fleet
    from maktabi.models.vehicle import Vehicle                     # noqa
    from maktabi.models.vehicle_permit import VehiclePermit        # noqa
    from maktabi.models.fuel_expense import FuelExpense            # noqa
    # People
    from maktabi.models.employee import Employee                   # noqa
    from maktabi.models.leave_request import LeaveRequest          # noqa
    from maktabi.models.public_holiday import PublicHoliday        # noqa
    from maktabi.models.training_record import TrainingRecord      # noqa
    from maktabi.models.user_request import UserRequest            # noqa
    # Correspondence
    from maktabi.models.correspondence import (                    # noqa
        Correspondence, CustomsCorrespondence, RejectionNotice,
    )
    # System
    from maktabi.models.announcement import Announcement           # noqa
    from maktabi.models.app_settings import AppSettings            # noqa
    from maktabi.models.audit_log import AuditLog                  # noqa

    Base.metadata.create_all(bind=engine)
