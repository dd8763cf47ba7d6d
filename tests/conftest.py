# tests/conftest.py
from datetime import date, time

import pytest
import pytest_asyncio

from app.database.connection import build_engine, init_db, make_session_factory
from app.system_models.appointment_model.appointment_schemas import AppointmentCreate
from app.system_models.doctor_model.doctor_schemas import DoctorCreate
from app.system_models.patient_model.patient_schemas import PatientCreate
from app.system_services.doctor_service import create_doctor
from app.system_services.patient_service import create_patient


@pytest_asyncio.fixture
async def engine(tmp_path):
    test_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'clinic_test.db'}")
    await init_db(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture
async def db(engine):
    session_factory = make_session_factory(engine)
    async with session_factory() as session:
        yield session


@pytest.fixture
def patient_data():
    return PatientCreate(
        first_name="Amina",
        last_name="Otieno",
        date_of_birth=date(1990, 4, 12),
        gender="Female",
        phone_number="555-0100",
        email="a@x.com",
        address="12 Harbour Road",
    )


@pytest.fixture
def doctor_data():
    return DoctorCreate(
        first_name="Kwame",
        last_name="Mensah",
        specialty="Cardiology",
        phone_number="555-0200",
        email="k.mensah@clinic.org",
    )


@pytest_asyncio.fixture
async def patient_id(db, patient_data):
    patient = await create_patient(db, patient_data)
    return patient.patient_id


@pytest_asyncio.fixture
async def doctor_id(db, doctor_data):
    doctor = await create_doctor(db, doctor_data)
    return doctor.doctor_id


@pytest.fixture
def make_appointment():
    def _make(patient_id, doctor_id, status="Scheduled", at=time(9, 30)):
        return AppointmentCreate(
            patient_id=patient_id,
            doctor_id=doctor_id,
            appointment_date=date(2026, 11, 2),
            appointment_time=at,
            status=status,
        )
    return _make
