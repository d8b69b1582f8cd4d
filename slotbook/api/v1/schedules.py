from fastapi import APIRouter, Depends
from typing import List

from ...api.deps import get_slot_service, get_schedule_service
from ...services.slot_service import SlotService
from ...services.schedule_service import ScheduleService
from ...schemas.schedule import (
    ScheduleCreate, ScheduleResponse, SlotResponse,
    SlotGenerateRequest, BookSlotRequest
)

# Sync handlers: FastAPI runs them in its threadpool
router = APIRouter(tags=["Scheduling"])

@router.post("/schedules", response_model=ScheduleResponse, status_code=201)
def create_schedule(
    schedule_data: ScheduleCreate,
    schedule_service: ScheduleService = Depends(get_schedule_service)
):
    """Create a provider schedule."""
    schedule = schedule_service.create_schedule(schedule_data)
    return ScheduleResponse.model_validate(schedule)

@router.get("/schedules/{schedule_id}", response_model=ScheduleResponse)
def get_schedule(
    schedule_id: int,
    schedule_service: ScheduleService = Depends(get_schedule_service)
):
    """Get a schedule."""
    return ScheduleResponse.model_validate(schedule_service.get_schedule(schedule_id))

@router.post("/schedules/{schedule_id}/slots", response_model=List[SlotResponse], status_code=201)
def generate_schedule_slots(
    schedule_id: int,
    schedule_service: ScheduleService = Depends(get_schedule_service)
):
    """Generate slots from the schedule's own window and slot duration."""
    slots = schedule_service.generate_for_schedule(schedule_id)
    return [SlotResponse.model_validate(slot) for slot in slots]

@router.get("/schedules/{schedule_id}/slots", response_model=List[SlotResponse])
def list_schedule_slots(
    schedule_id: int,
    available_only: bool = False,
    slot_service: SlotService = Depends(get_slot_service)
):
    """List a schedule's slots ordered by start time."""
    slots = slot_service.list_slots(schedule_id, available_only=available_only)
    return [SlotResponse.model_validate(slot) for slot in slots]

@router.post("/slots/generate", response_model=List[SlotResponse], status_code=201)
def generate_slots(
    request_data: SlotGenerateRequest,
    slot_service: SlotService = Depends(get_slot_service)
):
    """Generate slots for an explicit window."""
    slots = slot_service.generate_slots(
        request_data.schedule_id,
        request_data.start_time,
        request_data.end_time,
        request_data.duration_minutes
    )
    return [SlotResponse.model_validate(slot) for slot in slots]

@router.post("/slots/{slot_id}/book", response_model=SlotResponse)
def book_slot(
    slot_id: int,
    booking: BookSlotRequest,
    slot_service: SlotService = Depends(get_slot_service)
):
    """Book a slot for an appointment."""
    slot = slot_service.book_slot(slot_id, booking.appointment_id)
    return SlotResponse.model_validate(slot)
