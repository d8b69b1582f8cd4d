from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Boolean, Date, CheckConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from ..core.database import Base
from .types import OffsetDateTime

class Schedule(Base):
    __tablename__ = "schedules"
    __table_args__ = (
        CheckConstraint("slot_duration > 0", name="ck_schedules_slot_duration_positive"),
    )

    id = Column(Integer, primary_key=True, index=True)
    service_provider_id = Column(Integer, ForeignKey("doctors.id"), nullable=True, index=True)

    # Window partitioned into slots
    start_time = Column(OffsetDateTime, nullable=False)
    end_time = Column(OffsetDateTime, nullable=False)
    slot_duration = Column(Integer, nullable=False)  # minutes

    # Pass-through attributes
    date = Column(Date, nullable=True)  # one-off schedules
    day_of_week = Column(String(10), nullable=True)  # recurring schedules
    is_recurring = Column(Boolean, default=False)
    recurrence_type = Column(String(20), nullable=True)
    location = Column(String(255), nullable=True)
    is_available = Column(Boolean, default=True)
    service_type = Column(String(50), nullable=True)

    # Timestamps
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    service_provider = relationship("Doctor", back_populates="schedules")
    slots = relationship("Slot", back_populates="schedule", order_by="Slot.start_time")

    def __repr__(self):
        return f"<Schedule(id={self.id}, start='{self.start_time}', end='{self.end_time}', slot_duration={self.slot_duration})>"

class Slot(Base):
    __tablename__ = "slots"

    id = Column(Integer, primary_key=True, index=True)
    schedule_id = Column(Integer, ForeignKey("schedules.id"), nullable=False, index=True)

    start_time = Column(OffsetDateTime, nullable=False, index=True)
    end_time = Column(OffsetDateTime, nullable=False)

    # Booking state
    is_booked = Column(Boolean, nullable=False, default=False)
    appointment_id = Column(Integer, ForeignKey("appointments.id"), nullable=True, unique=True)

    # Timestamps
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    # Relationships
    schedule = relationship("Schedule", back_populates="slots")
    appointment = relationship("Appointment", back_populates="slot")

    def __repr__(self):
        return f"<Slot(id={self.id}, schedule_id={self.schedule_id}, start='{self.start_time}', booked={self.is_booked})>"
