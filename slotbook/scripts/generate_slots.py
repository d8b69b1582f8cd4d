"""
Generate slots for a schedule.

Usage:
    python -m slotbook.scripts.generate_slots --schedule-id 1
    python -m slotbook.scripts.generate_slots --schedule-id 1 \
        --start 2025-03-28T09:00:00Z --end 2025-03-28T11:00:00Z --duration 15
"""
import argparse
import sys

from ..services.slot_service import SlotService
from ..services.schedule_service import ScheduleService
from ._runner import parse_datetime, run


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Partition a schedule window into bookable slots")
    p.add_argument("--schedule-id", type=int, required=True)
    p.add_argument("--start", type=parse_datetime, help="Window start; defaults to the schedule's")
    p.add_argument("--end", type=parse_datetime, help="Window end; defaults to the schedule's")
    p.add_argument("--duration", type=int, help="Minutes per slot; defaults to the schedule's")
    args = p.parse_args(argv)

    explicit = [args.start, args.end, args.duration]
    if any(value is not None for value in explicit) and None in explicit:
        p.error("--start, --end and --duration must be given together")

    return args


def main(argv=None) -> int:
    args = parse_args(argv)

    def operation(db):
        if args.start is None:
            slots = ScheduleService(db).generate_for_schedule(args.schedule_id)
        else:
            slots = SlotService(db).generate_slots(
                args.schedule_id, args.start, args.end, args.duration
            )

        print(f"Created {len(slots)} slots for schedule {args.schedule_id}")
        for slot in slots:
            print(f"  {slot.start_time.isoformat()} - {slot.end_time.isoformat()}")

    return run(operation)


if __name__ == "__main__":
    sys.exit(main())
