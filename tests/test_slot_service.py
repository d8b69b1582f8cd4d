"""
Tests for slot persistence and booking.
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.exc import OperationalError

from slotbook.core.exceptions import (
    InvalidArgument, StoreFailure, ScheduleNotFound, SlotNotFound, SlotAlreadyBooked,
    AppointmentNotFound, AppointmentAlreadyBooked
)
from slotbook.models.appointment import AppointmentStatus
from slotbook.models.schedule import Slot
from slotbook.schemas.schedule import ScheduleCreate
from slotbook.services.schedule_service import ScheduleService
from slotbook.services.slot_service import SlotService

START = datetime(2025, 3, 28, 9, 0)
END = datetime(2025, 3, 28, 11, 0)


@pytest.fixture
def schedule(db):
    return ScheduleService(db).create_schedule(ScheduleCreate(
        start_time=START,
        end_time=END,
        slot_duration=15,
        day_of_week="Monday",
        is_recurring=True,
        recurrence_type="Weekly",
        location="Clinic A",
        service_type="OndeskAppointment",
    ))


class TestGenerateSlots:

    def test_generate_persists_slots(self, db, schedule):
        slots = SlotService(db).generate_slots(schedule.id, START, END, 15)

        assert len(slots) == 8
        assert db.query(Slot).filter(Slot.schedule_id == schedule.id).count() == 8
        assert slots[0].start_time == START
        assert slots[-1].end_time == END
        assert all(not slot.is_booked for slot in slots)
        assert all(slot.appointment_id is None for slot in slots)

    def test_generate_uses_one_bulk_write(self, db, schedule, monkeypatch):
        service = SlotService(db)
        calls = []
        original_add_all = db.add_all

        def recording_add_all(instances):
            instances = list(instances)
            calls.append(len(instances))
            return original_add_all(instances)

        monkeypatch.setattr(db, "add_all", recording_add_all)

        service.generate_slots(schedule.id, START, END, 45)

        assert calls == [2]

    def test_generate_is_not_idempotent(self, db, schedule):
        service = SlotService(db)
        service.generate_slots(schedule.id, START, END, 15)
        service.generate_slots(schedule.id, START, END, 15)

        assert db.query(Slot).filter(Slot.schedule_id == schedule.id).count() == 16

    def test_generate_short_window_stores_nothing(self, db, schedule):
        slots = SlotService(db).generate_slots(
            schedule.id, START, START + timedelta(minutes=10), 15
        )

        assert slots == []
        assert db.query(Slot).count() == 0

    def test_generate_zero_duration(self, db, schedule):
        with pytest.raises(InvalidArgument):
            SlotService(db).generate_slots(schedule.id, START, END, 0)

        assert db.query(Slot).count() == 0

    def test_store_failure_leaves_nothing_behind(self, db, schedule, monkeypatch):
        def failing_commit():
            raise OperationalError("INSERT INTO slots", {}, Exception("disk I/O error"))

        monkeypatch.setattr(db, "commit", failing_commit)

        with pytest.raises(StoreFailure) as exc_info:
            SlotService(db).generate_slots(schedule.id, START, END, 15)

        assert isinstance(exc_info.value.__cause__, OperationalError)
        monkeypatch.undo()
        assert db.query(Slot).count() == 0

    def test_list_slots_ordered(self, db, schedule):
        service = SlotService(db)
        service.generate_slots(schedule.id, datetime(2025, 3, 28, 13), datetime(2025, 3, 28, 14), 30)
        service.generate_slots(schedule.id, START, END, 60)

        starts = [slot.start_time for slot in service.list_slots(schedule.id)]

        assert starts == sorted(starts)
        assert len(starts) == 4

    def test_generate_for_unknown_schedule(self, db):
        with pytest.raises(ScheduleNotFound):
            SlotService(db).generate_slots(999, START, END, 15)

        assert db.query(Slot).count() == 0

    def test_supplied_offset_is_kept(self, db, schedule):
        ist = timezone(timedelta(hours=5, minutes=30))
        service = SlotService(db)
        service.generate_slots(
            schedule.id,
            datetime(2025, 3, 28, 9, 0, tzinfo=ist),
            datetime(2025, 3, 28, 10, 0, tzinfo=ist),
            30
        )
        db.expire_all()

        stored = service.list_slots(schedule.id)

        assert [slot.start_time for slot in stored] == [
            datetime(2025, 3, 28, 9, 0, tzinfo=ist),
            datetime(2025, 3, 28, 9, 30, tzinfo=ist),
        ]
        assert stored[0].start_time.utcoffset() == timedelta(hours=5, minutes=30)
        assert stored[-1].end_time == datetime(2025, 3, 28, 4, 30, tzinfo=timezone.utc)


class TestBookSlot:

    def test_book_slot(self, db, schedule, appointments):
        service = SlotService(db)
        slot = service.generate_slots(schedule.id, START, END, 15)[0]

        booked = service.book_slot(slot.id, appointments[0])

        assert booked.is_booked is True
        assert booked.appointment_id == appointments[0]

    def test_book_slot_twice(self, db, schedule, appointments):
        service = SlotService(db)
        slot = service.generate_slots(schedule.id, START, END, 15)[0]
        service.book_slot(slot.id, appointments[0])

        with pytest.raises(SlotAlreadyBooked):
            service.book_slot(slot.id, appointments[1])

        assert service.get_slot(slot.id).appointment_id == appointments[0]

    def test_book_missing_slot(self, db, schedule, appointments):
        with pytest.raises(SlotNotFound):
            SlotService(db).book_slot(456, appointments[0])

    def test_book_for_unknown_appointment(self, db, schedule):
        service = SlotService(db)
        slot = service.generate_slots(schedule.id, START, END, 15)[0]

        with pytest.raises(AppointmentNotFound):
            service.book_slot(slot.id, 789)

        assert service.get_slot(slot.id).is_booked is False

    def test_same_appointment_cannot_claim_two_slots(self, db, schedule, appointments):
        service = SlotService(db)
        first, second = service.generate_slots(schedule.id, START, END, 60)
        service.book_slot(first.id, appointments[0])

        with pytest.raises(AppointmentAlreadyBooked):
            service.book_slot(second.id, appointments[0])

        assert service.get_slot(second.id).is_booked is False

    def test_available_only_excludes_booked(self, db, schedule, appointments):
        service = SlotService(db)
        slots = service.generate_slots(schedule.id, START, END, 30)
        service.book_slot(slots[1].id, appointments[0])

        available = service.list_slots(schedule.id, available_only=True)

        assert [slot.id for slot in available] == [slots[0].id, slots[2].id, slots[3].id]

    def test_booked_slot_links_appointment(self, db, schedule, appointments):
        service = SlotService(db)
        slot = service.generate_slots(schedule.id, START, END, 15)[2]

        booked = service.book_slot(slot.id, appointments[2])

        assert booked.appointment.status == AppointmentStatus.SCHEDULED
        assert booked.appointment.patient.user.name == "Anand Kumar"
        assert booked.appointment.slot.id == slot.id
