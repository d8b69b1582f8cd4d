"""
Test suite for slotbook.

Contains unit and integration tests for slot generation, booking,
schedules, clinic seeding/reporting, the HTTP API and the scripts.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
os.environ.setdefault("TEST_DATABASE_URL", "sqlite:///./test.db")
