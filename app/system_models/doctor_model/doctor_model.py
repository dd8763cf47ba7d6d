# app/system_models/doctor_model/doctor_model.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database.connection import Base

class Doctor(Base):
    __tablename__ = "doctors"

    doctor_id = Column(Integer, primary_key=True, autoincrement=True)

    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    specialty = Column(String(100), nullable=True)
    phone_number = Column(String(15), nullable=False, unique=True)
    email = Column(String(100), nullable=False, unique=True)

    appointments = relationship(
        "Appointment", back_populates="doctor", cascade="all, delete-orphan", passive_deletes=True
    )
    prescriptions = relationship(
        "Prescription", back_populates="doctor", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<Doctor(doctor_id={self.doctor_id}, name='{self.first_name} {self.last_name}', specialty='{self.specialty}')>"
