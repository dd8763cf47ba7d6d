# app/model_registry/__init__.py


# Register all models here so Base.metadata knows every table

# Independent roots
from app.system_models.patient_model.patient_model import Patient
from app.system_models.doctor_model.doctor_model import Doctor

# Dependants (ON DELETE CASCADE from patients / doctors)
from app.system_models.appointment_model.appointment_model import Appointment
from app.system_models.medical_record_model.medical_record_model import MedicalRecord
from app.system_models.prescription_model.prescription_model import Prescription
