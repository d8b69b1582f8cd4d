"""
Create a provider schedule.

Usage:
    python -m slotbook.scripts.create_schedule \
        --start 2025-03-28T09:00:00Z --end 2025-03-28T11:00:00Z \
        --slot-duration 15 --day-of-week Monday --recurring --recurrence-type Weekly \
        --location "Clinic A" --service-type OndeskAppointment
"""
import argparse
import sys
from datetime import date

from ..core.config import settings
from ..schemas.schedule import ScheduleCreate, ScheduleResponse
from ..services.schedule_service import ScheduleService
from ._runner import parse_datetime, run


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Create a provider schedule")
    p.add_argument("--start", type=parse_datetime, required=True, help="Window start (ISO-8601)")
    p.add_argument("--end", type=parse_datetime, required=True, help="Window end (ISO-8601)")
    p.add_argument("--slot-duration", type=int, default=settings.DEFAULT_SLOT_DURATION, help="Minutes per slot")
    p.add_argument("--date", type=date.fromisoformat, help="YYYY-MM-DD, for one-off schedules")
    p.add_argument("--day-of-week", help="For recurring schedules, e.g. Monday")
    p.add_argument("--recurring", action="store_true")
    p.add_argument("--recurrence-type", help="e.g. Daily, Weekly")
    p.add_argument("--location")
    p.add_argument("--service-type")
    p.add_argument("--provider-id", type=int, help="Doctor id offering the service")
    p.add_argument("--unavailable", action="store_true", help="Create the schedule as unavailable")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    def operation(db):
        schedule = ScheduleService(db).create_schedule(ScheduleCreate(
            start_time=args.start,
            end_time=args.end,
            slot_duration=args.slot_duration,
            date=args.date,
            day_of_week=args.day_of_week,
            is_recurring=args.recurring,
            recurrence_type=args.recurrence_type,
            location=args.location,
            is_available=not args.unavailable,
            service_type=args.service_type,
            service_provider_id=args.provider_id,
        ))
        print("Schedule:", ScheduleResponse.model_validate(schedule).model_dump_json())

    return run(operation)


if __name__ == "__main__":
    sys.exit(main())
