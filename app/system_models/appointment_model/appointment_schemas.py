# app/system_models/appointment_model/appointment_schemas.py
from typing import Optional
from datetime import date, time
from pydantic import BaseModel, ConfigDict

from app.system_models.enums import AppointmentStatus


class AppointmentBase(BaseModel):
    patient_id: int
    doctor_id: int
    appointment_date: date
    appointment_time: time
    status: AppointmentStatus

    model_config = ConfigDict(use_enum_values=True)


class AppointmentCreate(AppointmentBase):
    pass


class AppointmentUpdate(BaseModel):
    patient_id: Optional[int] = None
    doctor_id: Optional[int] = None
    appointment_date: Optional[date] = None
    appointment_time: Optional[time] = None
    status: Optional[AppointmentStatus] = None

    model_config = ConfigDict(use_enum_values=True)


class AppointmentResponse(AppointmentBase):
    appointment_id: int

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)
