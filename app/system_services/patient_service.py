# app/system_services/patient_service.py
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.system_models.patient_model.patient_model import Patient
from app.system_models.patient_model.patient_schemas import PatientCreate, PatientUpdate
from app.system_services.constraint_errors import commit_or_raise

logger = logging.getLogger(__name__)


async def create_patient(db: AsyncSession, patient: PatientCreate) -> Patient:
    """Create a new patient."""
    db_patient = Patient(**patient.model_dump())
    db.add(db_patient)
    await commit_or_raise(db, Patient.__tablename__)
    await db.refresh(db_patient)
    logger.info(f"✅ Patient created: {db_patient.patient_id}")
    return db_patient


async def get_patient(db: AsyncSession, patient_id: int) -> Optional[Patient]:
    return await db.get(Patient, patient_id)


async def list_patients(db: AsyncSession) -> List[Patient]:
    result = await db.execute(select(Patient).order_by(Patient.last_name, Patient.first_name))
    return list(result.scalars().all())


async def update_patient(db: AsyncSession, patient_id: int, changes: PatientUpdate) -> Optional[Patient]:
    """Apply only the fields the caller set. Returns None for an unknown patient."""
    db_patient = await db.get(Patient, patient_id)
    if not db_patient:
        return None

    for key, value in changes.model_dump(exclude_unset=True).items():
        setattr(db_patient, key, value)

    await commit_or_raise(db, Patient.__tablename__)
    await db.refresh(db_patient)
    logger.info(f"Patient updated: {patient_id}")
    return db_patient


async def delete_patient(db: AsyncSession, patient_id: int) -> bool:
    """
    Delete a patient. Appointments, the medical record and prescriptions
    go with it through ON DELETE CASCADE.
    """
    db_patient = await db.get(Patient, patient_id)
    if not db_patient:
        return False

    await db.delete(db_patient)
    await commit_or_raise(db, Patient.__tablename__)
    # dependants loaded earlier in this session were removed by the database
    db.expire_all()
    logger.info(f"🗑️ Patient deleted with dependants: {patient_id}")
    return True
