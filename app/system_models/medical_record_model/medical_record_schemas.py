# app/system_models/medical_record_model/medical_record_schemas.py
from typing import Optional
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field

# DECIMAL(5, 2): up to 999.99
Measurement = Optional[Decimal]


class MedicalRecordBase(BaseModel):
    height_cm: Measurement = Field(None, ge=0, max_digits=5, decimal_places=2)
    weight_kg: Measurement = Field(None, ge=0, max_digits=5, decimal_places=2)
    blood_type: Optional[str] = Field(None, max_length=5)
    allergies: Optional[str] = None
    medication_history: Optional[str] = None


class MedicalRecordCreate(MedicalRecordBase):
    patient_id: int


class MedicalRecordUpdate(MedicalRecordBase):
    pass


class MedicalRecordResponse(MedicalRecordBase):
    record_id: int
    patient_id: int

    model_config = ConfigDict(from_attributes=True)
