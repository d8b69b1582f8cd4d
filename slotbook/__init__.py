"""
Slotbook

A FastAPI/SQLAlchemy backend for healthcare provider schedules: slot
generation, slot booking, clinic seeding and reporting.
"""

__version__ = "1.0.0"
