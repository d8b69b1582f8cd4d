import os
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

# Set testing environment before the application reads its settings
os.environ["TESTING"] = "1"
os.environ.setdefault("TEST_DATABASE_URL", "sqlite:///./test.db")

from slotbook.core.database import Base, SessionLocal, engine
from slotbook import models  # noqa: F401
from slotbook.main import app
from slotbook.models.appointment import Appointment
from slotbook.services.clinic_service import SeedService


@pytest.fixture(scope="function")
def test_db():
    # Create tables
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(test_db):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(test_db):
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client


@pytest.fixture
def appointments(db):
    """Seed the demo clinic and give it three appointments; returns their ids."""
    seeded = SeedService(db).seed()
    booked = [
        Appointment(
            patient_id=seeded["patient"].id,
            doctor_id=seeded["doctor"].id,
            appointment_date=datetime(2025, 3, 28, 9 + index),
            end_time=datetime(2025, 3, 28, 9 + index, 15),
            reason="Consultation",
        )
        for index in range(3)
    ]
    db.add_all(booked)
    db.commit()
    return [appointment.id for appointment in booked]
