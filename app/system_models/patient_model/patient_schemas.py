# app/system_models/patient_model/patient_schemas.py
from typing import Optional
from datetime import date
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.system_models.enums import Gender


def _normalize_email(v):
    if isinstance(v, str):
        return v.strip().lower()
    return v


class PatientBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    date_of_birth: Optional[date] = None
    gender: Optional[Gender] = None
    phone_number: str = Field(..., min_length=1, max_length=15)
    email: EmailStr
    address: Optional[str] = Field(None, max_length=255)

    model_config = ConfigDict(use_enum_values=True)

    @field_validator("email", mode="before")
    def normalize_email(cls, v):
        return _normalize_email(v)


class PatientCreate(PatientBase):
    pass


class PatientUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, min_length=1, max_length=50)
    date_of_birth: Optional[date] = None
    gender: Optional[Gender] = None
    phone_number: Optional[str] = Field(None, min_length=1, max_length=15)
    email: Optional[EmailStr] = None
    address: Optional[str] = Field(None, max_length=255)

    model_config = ConfigDict(use_enum_values=True)

    @field_validator("email", mode="before")
    def normalize_email(cls, v):
        return _normalize_email(v)


class PatientResponse(PatientBase):
    patient_id: int
    # Stored values are trusted, not re-validated as deliverable addresses
    email: str

    model_config = ConfigDict(from_attributes=True, use_enum_values=True)
