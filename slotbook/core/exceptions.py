"""
Error taxonomy for scheduling operations.

Services raise these; the HTTP layer and the scripts translate them into
status codes and exit codes.
"""


class SlotbookError(Exception):
    """Base class for all application-level errors."""


class InvalidArgument(SlotbookError):
    """Raised for malformed scheduling parameters."""


class StoreFailure(SlotbookError):
    """Raised when the database rejects or fails an operation."""


class ScheduleNotFound(StoreFailure):
    def __init__(self, schedule_id):
        self.schedule_id = schedule_id
        super().__init__(f"Schedule {schedule_id} not found")


class SlotNotFound(StoreFailure):
    def __init__(self, slot_id):
        self.slot_id = slot_id
        super().__init__(f"Slot {slot_id} not found")


class SlotAlreadyBooked(SlotbookError):
    def __init__(self, slot_id):
        self.slot_id = slot_id
        super().__init__(f"Slot {slot_id} is already booked")


class AppointmentNotFound(StoreFailure):
    def __init__(self, appointment_id):
        self.appointment_id = appointment_id
        super().__init__(f"Appointment {appointment_id} not found")


class AppointmentAlreadyBooked(SlotbookError):
    def __init__(self, appointment_id):
        self.appointment_id = appointment_id
        super().__init__(f"Appointment {appointment_id} already holds a slot")
