"""
Book a slot for an appointment.

Usage:
    python -m slotbook.scripts.book_slot --slot-id 456 --appointment-id 789
"""
import argparse
import sys

from ..schemas.schedule import SlotResponse
from ..services.slot_service import SlotService
from ._runner import run


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Mark a slot as booked for an appointment")
    p.add_argument("--slot-id", type=int, required=True)
    p.add_argument("--appointment-id", type=int, required=True)
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    def operation(db):
        slot = SlotService(db).book_slot(args.slot_id, args.appointment_id)
        print("Slot:", SlotResponse.model_validate(slot).model_dump_json())

    return run(operation)


if __name__ == "__main__":
    sys.exit(main())
