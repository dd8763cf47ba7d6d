# app/system_services/medical_record_service.py
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.system_models.medical_record_model.medical_record_model import MedicalRecord
from app.system_models.medical_record_model.medical_record_schemas import MedicalRecordCreate, MedicalRecordUpdate
from app.system_services.constraint_errors import commit_or_raise

logger = logging.getLogger(__name__)


async def create_medical_record(db: AsyncSession, medical_record: MedicalRecordCreate) -> MedicalRecord:
    """Create the medical record of a patient. A patient holds at most one."""
    db_medical_record = MedicalRecord(**medical_record.model_dump())
    db.add(db_medical_record)
    await commit_or_raise(db, MedicalRecord.__tablename__)
    await db.refresh(db_medical_record)
    logger.info(f"✅ Medical record created: {db_medical_record.record_id} for patient {db_medical_record.patient_id}")
    return db_medical_record


async def get_medical_record(db: AsyncSession, record_id: int) -> Optional[MedicalRecord]:
    return await db.get(MedicalRecord, record_id)


async def get_medical_record_for_patient(db: AsyncSession, patient_id: int) -> Optional[MedicalRecord]:
    result = await db.execute(select(MedicalRecord).where(MedicalRecord.patient_id == patient_id))
    return result.scalars().first()


async def update_medical_record(
    db: AsyncSession, record_id: int, changes: MedicalRecordUpdate
) -> Optional[MedicalRecord]:
    db_medical_record = await db.get(MedicalRecord, record_id)
    if not db_medical_record:
        return None

    for key, value in changes.model_dump(exclude_unset=True).items():
        setattr(db_medical_record, key, value)

    await commit_or_raise(db, MedicalRecord.__tablename__)
    await db.refresh(db_medical_record)
    logger.info(f"Medical record updated: {record_id}")
    return db_medical_record


async def delete_medical_record(db: AsyncSession, record_id: int) -> bool:
    db_medical_record = await db.get(MedicalRecord, record_id)
    if not db_medical_record:
        return False

    await db.delete(db_medical_record)
    await commit_or_raise(db, MedicalRecord.__tablename__)
    logger.info(f"Medical record deleted: {record_id}")
    return True
