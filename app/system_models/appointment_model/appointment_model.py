# app/system_models/appointment_model/appointment_model.py
from sqlalchemy import Column, Integer, String, Date, Time, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from app.database.connection import Base
from app.system_models.enums import AppointmentStatus, sql_in_list

class Appointment(Base):
    __tablename__ = "appointments"

    appointment_id = Column(Integer, primary_key=True, autoincrement=True)
    patient_id = Column(Integer, ForeignKey("patients.patient_id", ondelete="CASCADE"), nullable=False, index=True)
    doctor_id = Column(Integer, ForeignKey("doctors.doctor_id", ondelete="CASCADE"), nullable=False, index=True)
    appointment_date = Column(Date, nullable=False)
    appointment_time = Column(Time, nullable=False)
    # Any status may follow any other; overlapping slots for a doctor are allowed
    status = Column(String(9), nullable=False)

    __table_args__ = (
        CheckConstraint(sql_in_list("status", AppointmentStatus), name="status_values"),
    )

    patient = relationship("Patient", back_populates="appointments")
    doctor = relationship("Doctor", back_populates="appointments")

    def __repr__(self):
        return f"<Appointment {self.appointment_id}: patient {self.patient_id} with doctor {self.doctor_id} on {self.appointment_date} {self.appointment_time} ({self.status})>"
