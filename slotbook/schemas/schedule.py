from datetime import date as calendar_date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ScheduleCreate(BaseModel):
    start_time: datetime
    end_time: datetime
    slot_duration: int = Field(..., description="Slot length in minutes")
    date: Optional[calendar_date] = None
    day_of_week: Optional[str] = None
    is_recurring: bool = False
    recurrence_type: Optional[str] = None
    location: Optional[str] = None
    is_available: bool = True
    service_type: Optional[str] = None
    service_provider_id: Optional[int] = None


class ScheduleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    start_time: datetime
    end_time: datetime
    slot_duration: int
    date: Optional[calendar_date] = None
    day_of_week: Optional[str] = None
    is_recurring: bool
    recurrence_type: Optional[str] = None
    location: Optional[str] = None
    is_available: bool
    service_type: Optional[str] = None
    service_provider_id: Optional[int] = None


class SlotGenerateRequest(BaseModel):
    # No range validation here: the partitioner owns those rules
    schedule_id: int
    start_time: datetime
    end_time: datetime
    duration_minutes: int


class SlotResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    schedule_id: int
    start_time: datetime
    end_time: datetime
    is_booked: bool
    appointment_id: Optional[int] = None


class BookSlotRequest(BaseModel):
    appointment_id: int
