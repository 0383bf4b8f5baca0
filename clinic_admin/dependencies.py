"""FastAPI dependencies."""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_admin.core.exceptions import ForbiddenException
from clinic_admin.core.security import decode_access_token
from clinic_admin.database import get_db

# Security
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class ClinicSession:
    """Authenticated user acting on behalf of a clinic."""

    user_id: UUID
    clinic_id: UUID
    plan: str


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_session(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> ClinicSession:
    """
    Extract and validate the clinic session from the bearer token.

    Args:
        credentials: Bearer token credentials

    Returns:
        Session with user, clinic and plan

    Raises:
        HTTPException: 401 if the token is missing or invalid
        ForbiddenException: If the user has no clinic or no subscription plan yet
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise _unauthorized("Could not validate credentials")

    user_id_str = payload.get("sub")
    if user_id_str is None or not isinstance(user_id_str, str):
        raise _unauthorized("Could not validate credentials")

    try:
        user_id = UUID(user_id_str)
    except ValueError:
        raise _unauthorized("Invalid user ID format")

    clinic_id_str = payload.get("clinic_id")
    if not clinic_id_str:
        raise ForbiddenException("Clinic registration required")

    plan = payload.get("plan")
    if not plan:
        raise ForbiddenException("Subscription plan required")

    try:
        clinic_id = UUID(str(clinic_id_str))
    except ValueError:
        raise _unauthorized("Invalid clinic ID format")

    return ClinicSession(user_id=user_id, clinic_id=clinic_id, plan=str(plan))


# Type aliases for dependency injection
DatabaseSession = Annotated[AsyncSession, Depends(get_db)]
CurrentSession = Annotated[ClinicSession, Depends(get_current_session)]
