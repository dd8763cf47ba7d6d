# app/system_models/doctor_model/doctor_schemas.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


def _normalize_email(v):
    if isinstance(v, str):
        return v.strip().lower()
    return v


class DoctorBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    specialty: Optional[str] = Field(None, max_length=100)
    phone_number: str = Field(..., min_length=1, max_length=15)
    email: EmailStr

    @field_validator("email", mode="before")
    def normalize_email(cls, v):
        return _normalize_email(v)


class DoctorCreate(DoctorBase):
    pass


class DoctorUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, min_length=1, max_length=50)
    specialty: Optional[str] = Field(None, max_length=100)
    phone_number: Optional[str] = Field(None, min_length=1, max_length=15)
    email: Optional[EmailStr] = None

    @field_validator("email", mode="before")
    def normalize_email(cls, v):
        return _normalize_email(v)


class DoctorResponse(DoctorBase):
    doctor_id: int
    email: str

    model_config = ConfigDict(from_attributes=True)
