# tests/test_cascades.py
from datetime import date, time

from sqlalchemy import func, select

from app.system_models.appointment_model.appointment_model import Appointment
from app.system_models.appointment_model.appointment_schemas import AppointmentUpdate
from app.system_models.doctor_model.doctor_model import Doctor
from app.system_models.medical_record_model.medical_record_model import MedicalRecord
from app.system_models.medical_record_model.medical_record_schemas import MedicalRecordCreate, MedicalRecordUpdate
from app.system_models.patient_model.patient_model import Patient
from app.system_models.patient_model.patient_schemas import PatientCreate
from app.system_models.prescription_model.prescription_model import Prescription
from app.system_models.prescription_model.prescription_schemas import PrescriptionCreate, PrescriptionUpdate
from app.system_services.appointment_service import (
    create_appointment,
    delete_appointment,
    get_appointment,
    list_appointments,
    set_appointment_status,
    update_appointment,
)
from app.system_services.doctor_service import delete_doctor, get_doctor
from app.system_services.medical_record_service import (
    create_medical_record,
    get_medical_record,
    get_medical_record_for_patient,
    update_medical_record,
)
from app.system_services.patient_service import create_patient, delete_patient, get_patient
from app.system_services.prescription_service import (
    create_prescription,
    delete_prescription,
    get_prescription,
    list_prescriptions,
    update_prescription,
)


async def _count(db, model, **filters):
    stmt = select(func.count()).select_from(model)
    for column, value in filters.items():
        stmt = stmt.where(getattr(model, column) == value)
    return await db.scalar(stmt)


async def _populate(db, patient_id, doctor_id, make_appointment):
    await create_appointment(db, make_appointment(patient_id, doctor_id, at=time(9, 0)))
    await create_appointment(db, make_appointment(patient_id, doctor_id, status="Completed", at=time(11, 0)))
    await create_medical_record(db, MedicalRecordCreate(patient_id=patient_id, height_cm="172.50", weight_kg="68.20"))
    await create_prescription(db, PrescriptionCreate(
        doctor_id=doctor_id,
        patient_id=patient_id,
        medication_name="Metformin",
        dosage="500 mg",
        instructions="Twice daily with meals",
        prescription_date=date(2026, 11, 2),
    ))


async def test_deleting_patient_removes_dependants(db, patient_id, doctor_id, make_appointment):
    await _populate(db, patient_id, doctor_id, make_appointment)

    assert await delete_patient(db, patient_id) is True

    assert await _count(db, Patient, patient_id=patient_id) == 0
    assert await _count(db, Appointment, patient_id=patient_id) == 0
    assert await _count(db, MedicalRecord, patient_id=patient_id) == 0
    assert await _count(db, Prescription, patient_id=patient_id) == 0
    # the doctor is an independent root and survives
    assert await _count(db, Doctor, doctor_id=doctor_id) == 1


async def test_deleting_doctor_removes_appointments_and_prescriptions(db, patient_id, doctor_id, make_appointment):
    await _populate(db, patient_id, doctor_id, make_appointment)

    assert await delete_doctor(db, doctor_id) is True

    assert await _count(db, Doctor, doctor_id=doctor_id) == 0
    assert await _count(db, Appointment, doctor_id=doctor_id) == 0
    assert await _count(db, Prescription, doctor_id=doctor_id) == 0
    # the patient and their medical record are not owned by the doctor
    assert await _count(db, Patient, patient_id=patient_id) == 1
    assert await _count(db, MedicalRecord, patient_id=patient_id) == 1


async def test_deleting_patient_leaves_other_patients_rows(db, patient_id, doctor_id, make_appointment):
    other = await create_patient(db, PatientCreate(
        first_name="Jonas", last_name="Berg", phone_number="555-0111", email="jonas@x.com",
    ))
    other_id = other.patient_id
    await _populate(db, patient_id, doctor_id, make_appointment)
    await create_appointment(db, make_appointment(other_id, doctor_id))

    await delete_patient(db, patient_id)

    assert await _count(db, Appointment, patient_id=other_id) == 1


async def test_cascade_is_enforced_in_a_fresh_session(engine, db, patient_id, doctor_id, make_appointment):
    await _populate(db, patient_id, doctor_id, make_appointment)
    await db.close()

    from app.database.connection import make_session_factory

    async with make_session_factory(engine)() as fresh:
        assert await delete_patient(fresh, patient_id) is True
        assert await _count(fresh, Appointment) == 0
        assert await _count(fresh, MedicalRecord) == 0
        assert await _count(fresh, Prescription) == 0


async def test_deleting_missing_rows_reports_not_found(db):
    assert await delete_patient(db, 4242) is False
    assert await delete_doctor(db, 4242) is False


async def test_doctor_with_many_patients_deletes_every_prescription(db, doctor_id):
    patient_ids = []
    for n in range(3):
        patient = await create_patient(db, PatientCreate(
            first_name=f"Patient{n}", last_name="Test", phone_number=f"555-07{n:02d}", email=f"p{n}@x.com",
        ))
        patient_ids.append(patient.patient_id)
    for pid in patient_ids:
        await create_prescription(db, PrescriptionCreate(
            doctor_id=doctor_id, patient_id=pid, medication_name="Lisinopril",
            dosage="10 mg", prescription_date=date(2026, 11, 3),
        ))
    assert await _count(db, Prescription) == 3

    await delete_doctor(db, doctor_id)

    assert await _count(db, Prescription) == 0
    assert await _count(db, Patient) == 3


async def test_service_reads_after_patient_delete_see_cascade(db, patient_id, doctor_id, make_appointment):
    appointment = await create_appointment(db, make_appointment(patient_id, doctor_id))
    appointment_id = appointment.appointment_id
    record = await create_medical_record(db, MedicalRecordCreate(patient_id=patient_id, blood_type="B+"))
    record_id = record.record_id
    prescription = await create_prescription(db, PrescriptionCreate(
        doctor_id=doctor_id, patient_id=patient_id, medication_name="Cetirizine",
        dosage="10 mg", prescription_date=date(2026, 11, 4),
    ))
    prescription_id = prescription.prescription_id

    await delete_patient(db, patient_id)

    assert await get_patient(db, patient_id) is None
    assert await get_appointment(db, appointment_id) is None
    assert await get_medical_record(db, record_id) is None
    assert await get_medical_record_for_patient(db, patient_id) is None
    assert await get_prescription(db, prescription_id) is None
    assert await set_appointment_status(db, appointment_id, "Completed") is None
    assert await update_medical_record(db, record_id, MedicalRecordUpdate(blood_type="O-")) is None
    assert await delete_appointment(db, appointment_id) is False
    assert await delete_prescription(db, prescription_id) is False
    assert await list_appointments(db, doctor_id=doctor_id) == []


async def test_service_reads_after_doctor_delete_see_cascade(db, patient_id, doctor_id, make_appointment):
    appointment = await create_appointment(db, make_appointment(patient_id, doctor_id))
    appointment_id = appointment.appointment_id
    prescription = await create_prescription(db, PrescriptionCreate(
        doctor_id=doctor_id, patient_id=patient_id, medication_name="Omeprazole",
        dosage="20 mg", prescription_date=date(2026, 11, 4),
    ))
    prescription_id = prescription.prescription_id

    await delete_doctor(db, doctor_id)

    assert await get_doctor(db, doctor_id) is None
    assert await get_appointment(db, appointment_id) is None
    assert await get_prescription(db, prescription_id) is None
    assert await update_appointment(db, appointment_id, AppointmentUpdate(status="Canceled")) is None
    assert await update_prescription(db, prescription_id, PrescriptionUpdate(dosage="40 mg")) is None
    assert await list_prescriptions(db, patient_id=patient_id) == []
    # the patient is untouched and still readable
    patient = await get_patient(db, patient_id)
    assert patient.phone_number == "555-0100"
