# tests/conftest.py
"""Shared fixtures: an in-memory SQLite database, seeded users and an API client."""

import sys
import os
import tempfile
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="maktabi-logs-"))
os.environ["API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient

from maktabi.database import Base, SessionLocal, engine, create_tables
from maktabi.models.employee import Employee
from maktabi.models.vehicle import Vehicle


@pytest.fixture
def db():
    create_tables()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def users(db):
    admin = Employee(name="مدير النظام", department="الإدارة", role="Admin")
    head = Employee(name="رئيس القسم", department="الحجر", role="Head of Department")
    staff = Employee(name="سالم", department="الحجر", role="Employee")
    db.add_all([admin, head, staff])
    db.commit()
    return {"admin": admin, "head": head, "staff": staff}


@pytest.fixture
def vehicle(db):
    car = Vehicle(type="Toyota Hilux", plate_number="1234 AB")
    db.add(car)
    db.commit()
    return car


@pytest.fixture
def client(db):
    from maktabi.main import app
    with TestClient(app) as test_client:
        yield test_client
