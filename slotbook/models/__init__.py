from .user import User
from .doctor import Doctor
from .patient import Patient
from .prescription import Prescription, Medication
from .appointment import Appointment, AppointmentStatus
from .schedule import Schedule, Slot

__all__ = [
    "User",
    "Doctor",
    "Patient",
    "Prescription",
    "Medication",
    "Appointment",
    "AppointmentStatus",
    "Schedule",
    "Slot",
]
