"""Dashboard statistics service."""

from datetime import date, datetime, time, timedelta
from typing import Any
from uuid import UUID

from sqlalchemy import and_, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_admin.core.currency import format_currency_in_cents
from clinic_admin.models.appointments import appointments
from clinic_admin.models.doctors import doctors
from clinic_admin.models.patients import patients
from clinic_admin.schemas.dashboard import DashboardResponse, StatCard, TopDoctor, TopSpecialty


def build_stat_cards(
    total_revenue: int | None,
    total_appointments: int | None,
    total_patients: int | None,
    total_doctors: int | None,
) -> list[StatCard]:
    """Format the four summary cards; missing totals read as zero."""
    return [
        StatCard(
            title="Revenue",
            value=format_currency_in_cents(total_revenue) if total_revenue else "R$ 0,00",
        ),
        StatCard(title="Appointments", value=str(total_appointments or 0)),
        StatCard(title="Patients", value=str(total_patients or 0)),
        StatCard(title="Doctors", value=str(total_doctors or 0)),
    ]


class DashboardService:
    """Aggregate read queries for the clinic dashboard."""

    TOP_LIMIT = 10

    def __init__(self, db: AsyncSession):
        """Initialize service with database session."""
        self.db = db

    @staticmethod
    def _period_conditions(
        clinic_id: UUID,
        from_date: date | None,
        to_date: date | None,
    ) -> list[Any]:
        conditions: list[Any] = [appointments.c.clinic_id == clinic_id]
        if from_date:
            conditions.append(appointments.c.date >= datetime.combine(from_date, time.min))
        if to_date:
            # Inclusive of the whole last day
            end = datetime.combine(to_date, time.min) + timedelta(days=1)
            conditions.append(appointments.c.date < end)
        return conditions

    async def get_dashboard(
        self,
        clinic_id: UUID,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> DashboardResponse:
        """
        Collect the dashboard statistics of a clinic.

        Revenue, appointment totals and rankings honour the optional period;
        patient and doctor totals cover the whole clinic.

        Args:
            clinic_id: Clinic of the caller
            from_date: First day of the period
            to_date: Last day of the period

        Returns:
            Totals, formatted stat cards and rankings
        """
        period = and_(*self._period_conditions(clinic_id, from_date, to_date))

        revenue_result = await self.db.execute(
            select(func.sum(appointments.c.appointment_price_in_cents)).where(period)
        )
        total_revenue = revenue_result.scalar_one_or_none()

        appointments_result = await self.db.execute(
            select(func.count()).select_from(appointments).where(period)
        )
        total_appointments = appointments_result.scalar_one()

        patients_result = await self.db.execute(
            select(func.count()).select_from(patients).where(patients.c.clinic_id == clinic_id)
        )
        total_patients = patients_result.scalar_one()

        doctors_result = await self.db.execute(
            select(func.count()).select_from(doctors).where(doctors.c.clinic_id == clinic_id)
        )
        total_doctors = doctors_result.scalar_one()

        booked = func.count(appointments.c.id).label("appointments")

        top_doctors_result = await self.db.execute(
            select(doctors.c.id, doctors.c.name, doctors.c.specialty, booked)
            .select_from(doctors.join(appointments, appointments.c.doctor_id == doctors.c.id))
            .where(period)
            .group_by(doctors.c.id, doctors.c.name, doctors.c.specialty)
            .order_by(desc(booked), doctors.c.name)
            .limit(self.TOP_LIMIT)
        )
        top_doctors = [TopDoctor(**dict(row)) for row in top_doctors_result.mappings().all()]

        top_specialties_result = await self.db.execute(
            select(doctors.c.specialty, booked)
            .select_from(doctors.join(appointments, appointments.c.doctor_id == doctors.c.id))
            .where(period)
            .group_by(doctors.c.specialty)
            .order_by(desc(booked), doctors.c.specialty)
            .limit(self.TOP_LIMIT)
        )
        top_specialties = [
            TopSpecialty(**dict(row)) for row in top_specialties_result.mappings().all()
        ]

        return DashboardResponse(
            total_revenue=total_revenue,
            total_appointments=total_appointments,
            total_patients=total_patients,
            total_doctors=total_doctors,
            stats=build_stat_cards(total_revenue, total_appointments, total_patients, total_doctors),
            top_doctors=top_doctors,
            top_specialties=top_specialties,
        )
