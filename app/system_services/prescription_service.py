# app/system_services/prescription_service.py
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.system_models.prescription_model.prescription_model import Prescription
from app.system_models.prescription_model.prescription_schemas import PrescriptionCreate, PrescriptionUpdate
from app.system_services.constraint_errors import commit_or_raise

logger = logging.getLogger(__name__)


async def create_prescription(db: AsyncSession, prescription: PrescriptionCreate) -> Prescription:
    """Create a new prescription."""
    db_prescription = Prescription(**prescription.model_dump())
    db.add(db_prescription)
    await commit_or_raise(db, Prescription.__tablename__)
    await db.refresh(db_prescription)
    logger.info(
        f"✅ Prescription created: {db_prescription.prescription_id} "
        f"({db_prescription.medication_name} for patient {db_prescription.patient_id})"
    )
    return db_prescription


async def get_prescription(db: AsyncSession, prescription_id: int) -> Optional[Prescription]:
    return await db.get(Prescription, prescription_id)


async def list_prescriptions(
    db: AsyncSession, patient_id: Optional[int] = None, doctor_id: Optional[int] = None
) -> List[Prescription]:
    stmt = select(Prescription).order_by(Prescription.prescription_date.desc(), Prescription.prescription_id)
    if patient_id is not None:
        stmt = stmt.where(Prescription.patient_id == patient_id)
    if doctor_id is not None:
        stmt = stmt.where(Prescription.doctor_id == doctor_id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def update_prescription(
    db: AsyncSession, prescription_id: int, changes: PrescriptionUpdate
) -> Optional[Prescription]:
    db_prescription = await db.get(Prescription, prescription_id)
    if not db_prescription:
        return None

    for key, value in changes.model_dump(exclude_unset=True).items():
        setattr(db_prescription, key, value)

    await commit_or_raise(db, Prescription.__tablename__)
    await db.refresh(db_prescription)
    logger.info(f"Prescription updated: {prescription_id}")
    return db_prescription


async def delete_prescription(db: AsyncSession, prescription_id: int) -> bool:
    db_prescription = await db.get(Prescription, prescription_id)
    if not db_prescription:
        return False

    await db.delete(db_prescription)
    await commit_or_raise(db, Prescription.__tablename__)
    logger.info(f"Prescription deleted: {prescription_id}")
    return True
