"""
Seed the database with a demo doctor, patient and prescription.

Usage:
    python -m slotbook.scripts.seed
"""
import argparse
import sys

from ..core.database import init_db
from ..schemas.clinic import (
    UserResponse, DoctorResponse, PatientResponse, PrescriptionResponse
)
from ..services.clinic_service import SeedService
from ._runner import run


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Seed demo clinic records")
    p.add_argument("--skip-init", action="store_true", help="Do not create missing tables first")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    def operation(db):
        if not args.skip_init:
            init_db()

        created = SeedService(db).seed()

        print("Doctor user:", UserResponse.model_validate(created["doctor_user"]).model_dump_json())
        print("Doctor:", DoctorResponse.model_validate(created["doctor"]).model_dump_json())
        print("Patient user:", UserResponse.model_validate(created["patient_user"]).model_dump_json())
        print("Patient:", PatientResponse.model_validate(created["patient"]).model_dump_json())
        print("Prescription:", PrescriptionResponse.model_validate(created["prescription"]).model_dump_json())

    return run(operation)


if __name__ == "__main__":
    sys.exit(main())
