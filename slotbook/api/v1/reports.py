from fastapi import APIRouter, Depends
from typing import List

from ...api.deps import get_report_service
from ...services.clinic_service import ReportService
from ...schemas.clinic import (
    UserResponse, DoctorResponse, PatientResponse, PrescriptionResponse
)

router = APIRouter(prefix="/reports", tags=["Reports"])

@router.get("/users", response_model=List[UserResponse])
def list_users(report_service: ReportService = Depends(get_report_service)):
    """List all users."""
    return [UserResponse.model_validate(user) for user in report_service.list_users()]

@router.get("/doctors", response_model=List[DoctorResponse])
def list_doctors(report_service: ReportService = Depends(get_report_service)):
    """List doctors with their user details."""
    return [DoctorResponse.model_validate(doctor) for doctor in report_service.list_doctors()]

@router.get("/patients", response_model=List[PatientResponse])
def list_patients(report_service: ReportService = Depends(get_report_service)):
    """List patients with their user details."""
    return [PatientResponse.model_validate(patient) for patient in report_service.list_patients()]

@router.get("/prescriptions", response_model=List[PrescriptionResponse])
def list_prescriptions(report_service: ReportService = Depends(get_report_service)):
    """List prescriptions with patient, doctor and medications."""
    return [
        PrescriptionResponse.model_validate(prescription)
        for prescription in report_service.list_prescriptions()
    ]
