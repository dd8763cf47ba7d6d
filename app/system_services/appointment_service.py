# app/system_services/appointment_service.py
import logging
from typing import List, Optional, Union

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.system_models.appointment_model.appointment_model import Appointment
from app.system_models.appointment_model.appointment_schemas import AppointmentCreate, AppointmentUpdate
from app.system_models.enums import AppointmentStatus
from app.system_services.constraint_errors import EnumeratedValueViolation, commit_or_raise

logger = logging.getLogger(__name__)


def _coerce_status(status: Union[AppointmentStatus, str]) -> AppointmentStatus:
    try:
        return AppointmentStatus(status)
    except ValueError:
        raise EnumeratedValueViolation(
            f"status must be one of {[s.value for s in AppointmentStatus]}, got {status!r}",
            Appointment.__tablename__,
        ) from None


async def create_appointment(db: AsyncSession, appointment: AppointmentCreate) -> Appointment:
    """
    Create a new appointment.

    The patient and doctor must exist. Double-booking a doctor's slot is
    accepted: the schema has no overlap rule.
    """
    db_appointment = Appointment(**appointment.model_dump())
    db.add(db_appointment)
    await commit_or_raise(db, Appointment.__tablename__)
    await db.refresh(db_appointment)
    logger.info(
        f"✅ Appointment created: {db_appointment.appointment_id} "
        f"(patient {db_appointment.patient_id}, doctor {db_appointment.doctor_id})"
    )
    return db_appointment


async def get_appointment(db: AsyncSession, appointment_id: int) -> Optional[Appointment]:
    return await db.get(Appointment, appointment_id)


async def list_appointments(
    db: AsyncSession,
    patient_id: Optional[int] = None,
    doctor_id: Optional[int] = None,
    status: Optional[Union[AppointmentStatus, str]] = None,
) -> List[Appointment]:
    stmt = select(Appointment).order_by(Appointment.appointment_date, Appointment.appointment_time)
    if patient_id is not None:
        stmt = stmt.where(Appointment.patient_id == patient_id)
    if doctor_id is not None:
        stmt = stmt.where(Appointment.doctor_id == doctor_id)
    if status is not None:
        stmt = stmt.where(Appointment.status == _coerce_status(status).value)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def update_appointment(
    db: AsyncSession, appointment_id: int, changes: AppointmentUpdate
) -> Optional[Appointment]:
    db_appointment = await db.get(Appointment, appointment_id)
    if not db_appointment:
        return None

    for key, value in changes.model_dump(exclude_unset=True).items():
        setattr(db_appointment, key, value)

    await commit_or_raise(db, Appointment.__tablename__)
    await db.refresh(db_appointment)
    logger.info(f"Appointment updated: {appointment_id}")
    return db_appointment


async def set_appointment_status(
    db: AsyncSession, appointment_id: int, status: Union[AppointmentStatus, str]
) -> Optional[Appointment]:
    """Move an appointment to any status. No transition order is enforced."""
    new_status = _coerce_status(status)
    return await update_appointment(db, appointment_id, AppointmentUpdate(status=new_status))


async def delete_appointment(db: AsyncSession, appointment_id: int) -> bool:
    db_appointment = await db.get(Appointment, appointment_id)
    if not db_appointment:
        return False

    await db.delete(db_appointment)
    await commit_or_raise(db, Appointment.__tablename__)
    logger.info(f"Appointment deleted: {appointment_id}")
    return True
