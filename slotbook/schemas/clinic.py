from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ..core.security import UserRole


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    role: UserRole
    is_active: bool


class DoctorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    specialization: str
    user: UserResponse


class PatientResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    address: Optional[str] = None
    conditions: List[str] = []
    blood_group: Optional[str] = None
    user: UserResponse


class MedicationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    dosage: str
    frequency: str
    duration: str
    status: str


class PrescriptionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    notes: Optional[str] = None
    date_issued: datetime
    patient: PatientResponse
    doctor: DoctorResponse
    medications: List[MedicationResponse] = []
