"""Dashboard endpoints."""

from datetime import date

from fastapi import APIRouter, Query

from clinic_admin.core.exceptions import BadRequestException
from clinic_admin.dependencies import CurrentSession, DatabaseSession
from clinic_admin.schemas.dashboard import DashboardResponse
from clinic_admin.services.dashboard_service import DashboardService

router = APIRouter()


@router.get("/", response_model=DashboardResponse, summary="Clinic dashboard statistics")
async def get_dashboard(
    session: CurrentSession,
    db: DatabaseSession,
    from_date: date | None = Query(None, alias="from"),
    to_date: date | None = Query(None, alias="to"),
) -> DashboardResponse:
    """
    Revenue, appointment, patient and doctor totals with rankings.

    - **from** / **to**: Optional period (inclusive) for revenue, appointments and rankings
    """
    if from_date and to_date and from_date > to_date:
        raise BadRequestException("'from' must not be after 'to'")

    return await DashboardService(db).get_dashboard(session.clinic_id, from_date, to_date)
