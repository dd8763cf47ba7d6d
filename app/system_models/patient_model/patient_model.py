# app/system_models/patient_model/patient_model.py
from sqlalchemy import Column, Integer, String, Date, CheckConstraint
from sqlalchemy.orm import relationship
from app.database.connection import Base
from app.system_models.enums import Gender, sql_in_list

class Patient(Base):
    __tablename__ = "patients"

    patient_id = Column(Integer, primary_key=True, autoincrement=True)

    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    date_of_birth = Column(Date, nullable=True)
    gender = Column(String(6), nullable=True)
    phone_number = Column(String(15), nullable=False, unique=True)
    email = Column(String(100), nullable=False, unique=True)
    address = Column(String(255), nullable=True)

    __table_args__ = (
        CheckConstraint(sql_in_list("gender", Gender), name="gender_values"),
    )

    # Children are removed by ON DELETE CASCADE; the ORM does not load them to delete
    appointments = relationship(
        "Appointment", back_populates="patient", cascade="all, delete-orphan", passive_deletes=True
    )
    medical_record = relationship(
        "MedicalRecord", back_populates="patient", uselist=False,
        cascade="all, delete-orphan", passive_deletes=True,
    )
    prescriptions = relationship(
        "Prescription", back_populates="patient", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<Patient {self.patient_id}: {self.first_name} {self.last_name}>"
