from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import List
import logging

from ..models.schedule import Schedule, Slot
from ..schemas.schedule import ScheduleCreate
from ..core.exceptions import InvalidArgument, StoreFailure, ScheduleNotFound
from .slot_service import SlotService

logger = logging.getLogger(__name__)

class ScheduleService:
    def __init__(self, db: Session):
        self.db = db

    def create_schedule(self, schedule_data: ScheduleCreate) -> Schedule:
        """Create a provider schedule."""
        if schedule_data.slot_duration <= 0:
            raise InvalidArgument("slot_duration must be greater than zero")

        if schedule_data.end_time <= schedule_data.start_time:
            raise InvalidArgument("end_time must be later than start_time")

        schedule = Schedule(**schedule_data.model_dump())

        try:
            self.db.add(schedule)
            self.db.commit()
            self.db.refresh(schedule)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Failed to create schedule: {str(exc)}")
            raise StoreFailure("Could not create schedule") from exc

        logger.info(
            f"Created schedule {schedule.id} "
            f"({schedule.start_time} - {schedule.end_time}, {schedule.slot_duration} min slots)"
        )
        return schedule

    def get_schedule(self, schedule_id: int) -> Schedule:
        """Get a schedule by id."""
        try:
            schedule = self.db.query(Schedule).filter(
                Schedule.id == schedule_id
            ).first()
        except SQLAlchemyError as exc:
            raise StoreFailure(f"Could not load schedule {schedule_id}") from exc

        if not schedule:
            raise ScheduleNotFound(schedule_id)

        return schedule

    def generate_for_schedule(self, schedule_id: int) -> List[Slot]:
        """Generate slots from a stored schedule's own window and slot duration."""
        schedule = self.get_schedule(schedule_id)

        return SlotService(self.db).generate_slots(
            schedule.id,
            schedule.start_time,
            schedule.end_time,
            schedule.slot_duration
        )
