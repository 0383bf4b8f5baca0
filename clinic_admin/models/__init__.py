"""Database models."""

from sqlalchemy import MetaData

from clinic_admin.models.appointments import appointments
from clinic_admin.models.clinics import clinics
from clinic_admin.models.doctors import doctors
from clinic_admin.models.patients import patients

# Every table in one metadata so foreign keys resolve for create_all
metadata = MetaData()
for _table in (clinics, doctors, patients, appointments):
    _table.to_metadata(metadata)

__all__ = [
    "appointments",
    "clinics",
    "doctors",
    "metadata",
    "patients",
]
