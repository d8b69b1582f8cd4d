from fastapi import Depends, status
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..core.exceptions import (
    SlotbookError, InvalidArgument, ScheduleNotFound, SlotNotFound,
    SlotAlreadyBooked, AppointmentNotFound, AppointmentAlreadyBooked
)
from ..services.slot_service import SlotService
from ..services.schedule_service import ScheduleService
from ..services.clinic_service import ReportService

def get_slot_service(db: Session = Depends(get_db)) -> SlotService:
    """Slot service bound to the request session."""
    return SlotService(db)

def get_schedule_service(db: Session = Depends(get_db)) -> ScheduleService:
    """Schedule service bound to the request session."""
    return ScheduleService(db)

def get_report_service(db: Session = Depends(get_db)) -> ReportService:
    """Report service bound to the request session."""
    return ReportService(db)

def status_for_error(exc: SlotbookError) -> int:
    """HTTP status clients see for a domain error."""
    if isinstance(exc, InvalidArgument):
        return status.HTTP_400_BAD_REQUEST

    if isinstance(exc, (ScheduleNotFound, SlotNotFound, AppointmentNotFound)):
        return status.HTTP_404_NOT_FOUND

    if isinstance(exc, (SlotAlreadyBooked, AppointmentAlreadyBooked)):
        return status.HTTP_409_CONFLICT

    return status.HTTP_500_INTERNAL_SERVER_ERROR
