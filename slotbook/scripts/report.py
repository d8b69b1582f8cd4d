"""
Print users, doctors, patients and prescriptions with their relations.

Usage:
    python -m slotbook.scripts.report
"""
import argparse
import sys

from ..schemas.clinic import (
    UserResponse, DoctorResponse, PatientResponse, PrescriptionResponse
)
from ..services.clinic_service import ReportService
from ._runner import run


def _dump(label, schema, records):
    print(f"{label}:", [schema.model_validate(record).model_dump(mode="json") for record in records])


def main(argv=None) -> int:
    argparse.ArgumentParser(description="Print clinic records").parse_args(argv)

    def operation(db):
        reports = ReportService(db)
        _dump("Users", UserResponse, reports.list_users())
        _dump("Doctors", DoctorResponse, reports.list_doctors())
        _dump("Patients", PatientResponse, reports.list_patients())
        _dump("Prescriptions", PrescriptionResponse, reports.list_prescriptions())

    return run(operation)


if __name__ == "__main__":
    sys.exit(main())
