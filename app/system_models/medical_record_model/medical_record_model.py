# app/system_models/medical_record_model/medical_record_model.py
from sqlalchemy import Column, Integer, String, Numeric, Text, ForeignKey
from sqlalchemy.orm import relationship
from app.database.connection import Base

class MedicalRecord(Base):
    __tablename__ = "medical_records"

    record_id = Column(Integer, primary_key=True, autoincrement=True)
    # unique=True makes this one-to-one with patients
    patient_id = Column(
        Integer, ForeignKey("patients.patient_id", ondelete="CASCADE"), nullable=False, unique=True
    )

    height_cm = Column(Numeric(5, 2), nullable=True)
    weight_kg = Column(Numeric(5, 2), nullable=True)
    blood_type = Column(String(5), nullable=True)
    allergies = Column(Text, nullable=True)
    medication_history = Column(Text, nullable=True)

    patient = relationship("Patient", back_populates="medical_record")

    def __repr__(self):
        return f"<MedicalRecord {self.record_id} for Patient {self.patient_id}>"
