# app/system_models/prescription_model/prescription_schemas.py
from typing import Optional
from datetime import date
from pydantic import BaseModel, ConfigDict, Field

class PrescriptionBase(BaseModel):
    doctor_id: int
    patient_id: int
    medication_name: str = Field(..., min_length=1, max_length=100)
    dosage: str = Field(..., min_length=1, max_length=50)
    instructions: Optional[str] = None
    prescription_date: date

class PrescriptionCreate(PrescriptionBase):
    pass

class PrescriptionUpdate(BaseModel):
    medication_name: Optional[str] = Field(None, min_length=1, max_length=100)
    dosage: Optional[str] = Field(None, min_length=1, max_length=50)
    instructions: Optional[str] = None
    prescription_date: Optional[date] = None

class PrescriptionResponse(PrescriptionBase):
    prescription_id: int

    model_config = ConfigDict(from_attributes=True)
