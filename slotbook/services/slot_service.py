from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from datetime import datetime, timedelta
from typing import List, Tuple
import logging

from ..models.appointment import Appointment
from ..models.schedule import Schedule, Slot
from ..core.exceptions import (
    InvalidArgument, StoreFailure, ScheduleNotFound, SlotNotFound,
    SlotAlreadyBooked, AppointmentNotFound, AppointmentAlreadyBooked
)

logger = logging.getLogger(__name__)

def partition_window(
    start_time: datetime,
    end_time: datetime,
    duration_minutes: int
) -> List[Tuple[datetime, datetime]]:
    """
    Split [start_time, end_time) into consecutive slots of duration_minutes.

    A trailing remainder shorter than one slot is dropped. An empty or
    inverted window yields no slots.
    """
    if duration_minutes <= 0:
        raise InvalidArgument(
            f"Slot duration must be a positive number of minutes, got {duration_minutes}"
        )

    step = timedelta(minutes=duration_minutes)
    intervals = []
    cursor = start_time

    while cursor < end_time:
        next_time = cursor + step
        if next_time > end_time:
            break
        intervals.append((cursor, next_time))
        cursor = next_time

    return intervals

class SlotService:
    def __init__(self, db: Session):
        self.db = db

    def generate_slots(
        self,
        schedule_id: int,
        start_time: datetime,
        end_time: datetime,
        duration_minutes: int
    ) -> List[Slot]:
        """Partition a window into slots and persist them in one bulk insert."""
        intervals = partition_window(start_time, end_time, duration_minutes)

        try:
            schedule = self.db.get(Schedule, schedule_id)
        except SQLAlchemyError as exc:
            raise StoreFailure(f"Could not load schedule {schedule_id}") from exc

        if not schedule:
            raise ScheduleNotFound(schedule_id)

        slots = [
            Slot(
                schedule_id=schedule_id,
                start_time=slot_start,
                end_time=slot_end,
                is_booked=False
            )
            for slot_start, slot_end in intervals
        ]

        try:
            self.db.add_all(slots)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Failed to store slots for schedule {schedule_id}: {str(exc)}")
            raise StoreFailure(f"Could not store slots for schedule {schedule_id}") from exc

        logger.info(
            f"Generated {len(slots)} slots of {duration_minutes} min "
            f"for schedule {schedule_id}"
        )
        return slots

    def book_slot(self, slot_id: int, appointment_id: int) -> Slot:
        """Claim an unbooked slot for an appointment."""
        try:
            updated = self.db.query(Slot).filter(
                Slot.id == slot_id,
                Slot.is_booked == False  # noqa: E712
            ).update(
                {"is_booked": True, "appointment_id": appointment_id},
                synchronize_session=False
            )
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning(f"Booking slot {slot_id} for appointment {appointment_id} rejected: {str(exc)}")
            self._raise_booking_conflict(slot_id, appointment_id, exc)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Failed to book slot {slot_id}: {str(exc)}")
            raise StoreFailure(f"Could not book slot {slot_id}") from exc

        slot = self.get_slot(slot_id)
        if not updated:
            # Slot exists, so an earlier booking won the conditional update
            raise SlotAlreadyBooked(slot_id)

        logger.info(f"Booked slot {slot_id} for appointment {appointment_id}")
        return slot

    def get_slot(self, slot_id: int) -> Slot:
        """Get a slot by id."""
        try:
            # Conditional updates bypass the identity map
            slot = self.db.query(Slot).populate_existing().filter(
                Slot.id == slot_id
            ).first()
        except SQLAlchemyError as exc:
            raise StoreFailure(f"Could not load slot {slot_id}") from exc

        if not slot:
            raise SlotNotFound(slot_id)

        return slot

    def list_slots(self, schedule_id: int, available_only: bool = False) -> List[Slot]:
        """List the slots of a schedule ordered by start time."""
        query = self.db.query(Slot).filter(Slot.schedule_id == schedule_id)
        if available_only:
            query = query.filter(Slot.is_booked == False)  # noqa: E712

        try:
            return query.order_by(Slot.start_time).all()
        except SQLAlchemyError as exc:
            raise StoreFailure(f"Could not list slots for schedule {schedule_id}") from exc

    def _raise_booking_conflict(self, slot_id: int, appointment_id: int, cause: IntegrityError):
        """Turn a constraint violation raised while booking into a domain error."""
        try:
            appointment = self.db.get(Appointment, appointment_id)
            holder = self.db.query(Slot).filter(
                Slot.appointment_id == appointment_id,
                Slot.id != slot_id
            ).first()
        except SQLAlchemyError as exc:
            raise StoreFailure(f"Could not book slot {slot_id}") from exc

        if not appointment:
            raise AppointmentNotFound(appointment_id) from cause

        if holder:
            raise AppointmentAlreadyBooked(appointment_id) from cause

        raise StoreFailure(f"Could not book slot {slot_id}") from cause
