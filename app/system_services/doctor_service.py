# app/system_services/doctor_service.py
import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.system_models.doctor_model.doctor_model import Doctor
from app.system_models.doctor_model.doctor_schemas import DoctorCreate, DoctorUpdate
from app.system_services.constraint_errors import commit_or_raise

logger = logging.getLogger(__name__)


async def create_doctor(db: AsyncSession, doctor: DoctorCreate) -> Doctor:
    """Create a new doctor."""
    db_doctor = Doctor(**doctor.model_dump())
    db.add(db_doctor)
    await commit_or_raise(db, Doctor.__tablename__)
    await db.refresh(db_doctor)
    logger.info(f"✅ Doctor created: {db_doctor.doctor_id}")
    return db_doctor


async def get_doctor(db: AsyncSession, doctor_id: int) -> Optional[Doctor]:
    return await db.get(Doctor, doctor_id)


async def list_doctors(db: AsyncSession, specialty: Optional[str] = None) -> List[Doctor]:
    stmt = select(Doctor).order_by(Doctor.last_name, Doctor.first_name)
    if specialty:
        stmt = stmt.where(Doctor.specialty == specialty)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def update_doctor(db: AsyncSession, doctor_id: int, changes: DoctorUpdate) -> Optional[Doctor]:
    db_doctor = await db.get(Doctor, doctor_id)
    if not db_doctor:
        return None

    for key, value in changes.model_dump(exclude_unset=True).items():
        setattr(db_doctor, key, value)

    await commit_or_raise(db, Doctor.__tablename__)
    await db.refresh(db_doctor)
    logger.info(f"Doctor updated: {doctor_id}")
    return db_doctor


async def delete_doctor(db: AsyncSession, doctor_id: int) -> bool:
    """Delete a doctor together with their appointments and prescriptions."""
    db_doctor = await db.get(Doctor, doctor_id)
    if not db_doctor:
        return False

    await db.delete(db_doctor)
    await commit_or_raise(db, Doctor.__tablename__)
    # dependants loaded earlier in this session were removed by the database
    db.expire_all()
    logger.info(f"🗑️ Doctor deleted with dependants: {doctor_id}")
    return True
