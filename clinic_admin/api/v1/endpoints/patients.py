"""Patient management endpoints."""

from uuid import UUID

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.exc import IntegrityError

from clinic_admin.dependencies import CurrentSession, DatabaseSession
from clinic_admin.schemas.patients import PatientResponse, PatientUpsert
from clinic_admin.services.patient_service import PatientService

router = APIRouter()


@router.post(
    "/upsert",
    response_model=PatientResponse,
    status_code=status.HTTP_200_OK,
    summary="Create or update a patient",
)
async def upsert_patient(
    data: PatientUpsert,
    session: CurrentSession,
    db: DatabaseSession,
) -> PatientResponse:
    """Create a patient, or update one when ``id`` is given."""
    try:
        return await PatientService(db).upsert_patient(session.clinic_id, data)
    except IntegrityError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Failed to save patient"
        ) from e


@router.get("/", response_model=list[PatientResponse], summary="List patients")
async def list_patients(session: CurrentSession, db: DatabaseSession) -> list[PatientResponse]:
    """List the clinic's patients ordered by name."""
    return await PatientService(db).list_patients(session.clinic_id)


@router.get("/{patient_id}", response_model=PatientResponse, summary="Get patient by ID")
async def get_patient(
    patient_id: UUID,
    session: CurrentSession,
    db: DatabaseSession,
) -> PatientResponse:
    """Get a patient of the clinic."""
    return await PatientService(db).get_patient(session.clinic_id, patient_id)


@router.delete(
    "/{patient_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete patient",
)
async def delete_patient(
    patient_id: UUID,
    session: CurrentSession,
    db: DatabaseSession,
) -> None:
    """Delete a patient and all of their appointments."""
    await PatientService(db).delete_patient(session.clinic_id, patient_id)
