from sqlalchemy.orm import Session, joinedload, selectinload
from sqlalchemy.exc import SQLAlchemyError
from datetime import datetime, timezone
from typing import Dict, List
import logging

from ..models.user import User
from ..models.doctor import Doctor
from ..models.patient import Patient
from ..models.prescription import Prescription, Medication
from ..core.security import UserRole, get_password_hash
from ..core.exceptions import StoreFailure

logger = logging.getLogger(__name__)

class SeedService:
    """Creates the fixed demo clinic: one doctor, one patient and a prescription."""

    def __init__(self, db: Session):
        self.db = db

    def seed(self) -> Dict[str, object]:
        try:
            doctor_user = User(
                name="Dr.Shreya Raj",
                email="shreyaraj@gmail.com",
                password_hash=get_password_hash("securepassword"),
                phone="1234567890",
                role=UserRole.DOCTOR,
            )
            self.db.add(doctor_user)
            self.db.flush()

            doctor = Doctor(user_id=doctor_user.id, specialization="Cardiology")
            self.db.add(doctor)

            patient_user = User(
                name="Anand Kumar",
                email="anand@dreach.in",
                password_hash=get_password_hash("securepassword"),
                phone="0987654321",
                role=UserRole.PATIENT,
            )
            self.db.add(patient_user)
            self.db.flush()

            patient = Patient(
                user_id=patient_user.id,
                address="Patna, Bihar",
                conditions=["Hypertension"],
                blood_group="O+",
            )
            self.db.add(patient)
            self.db.flush()

            prescription = Prescription(
                patient_id=patient.id,
                doctor_id=doctor.id,
                notes="Take medications after meals.",
                date_issued=datetime.now(timezone.utc),
                medications=[
                    Medication(
                        name="Paracetamol",
                        dosage="500mg",
                        frequency="Twice a day",
                        duration="5 days",
                        status="Active",
                        patient_id=patient.id,
                    ),
                    Medication(
                        name="Ibuprofen",
                        dosage="200mg",
                        frequency="Once a day",
                        duration="3 days",
                        status="Active",
                        patient_id=patient.id,
                    ),
                ],
            )
            self.db.add(prescription)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Seeding failed: {str(exc)}")
            raise StoreFailure("Could not seed clinic data") from exc

        logger.info(f"Seeded doctor {doctor.id}, patient {patient.id}, prescription {prescription.id}")

        return {
            "doctor_user": doctor_user,
            "doctor": doctor,
            "patient_user": patient_user,
            "patient": patient,
            "prescription": prescription,
        }

class ReportService:
    """Read-only views over the clinic records with their relations loaded."""

    def __init__(self, db: Session):
        self.db = db

    def list_users(self) -> List[User]:
        return self._all(self.db.query(User).order_by(User.id))

    def list_doctors(self) -> List[Doctor]:
        return self._all(
            self.db.query(Doctor).options(joinedload(Doctor.user)).order_by(Doctor.id)
        )

    def list_patients(self) -> List[Patient]:
        return self._all(
            self.db.query(Patient).options(joinedload(Patient.user)).order_by(Patient.id)
        )

    def list_prescriptions(self) -> List[Prescription]:
        return self._all(
            self.db.query(Prescription).options(
                joinedload(Prescription.patient).joinedload(Patient.user),
                joinedload(Prescription.doctor).joinedload(Doctor.user),
                selectinload(Prescription.medications),
            ).order_by(Prescription.id)
        )

    def _all(self, query) -> list:
        try:
            return query.all()
        except SQLAlchemyError as exc:
            logger.error(f"Report query failed: {str(exc)}")
            raise StoreFailure("Could not read clinic records") from exc
