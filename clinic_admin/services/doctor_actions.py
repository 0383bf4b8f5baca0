"""Remote doctor actions and user notifications used by the doctor form."""

from typing import Protocol
from uuid import UUID

import httpx
import structlog

from clinic_admin.core.exceptions import RemoteCallError
from clinic_admin.schemas.doctors import DoctorResponse, DoctorUpsert

logger = structlog.get_logger(__name__)


class Notifier(Protocol):
    """Transient global notifications (toasts)."""

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class DoctorActions(Protocol):
    """Server-side doctor actions the form submits to."""

    async def upsert(self, payload: DoctorUpsert) -> DoctorResponse: ...

    async def delete(self, doctor_id: UUID) -> None: ...


class LoggingNotifier:
    """Notifier that emits notifications as log events."""

    def success(self, message: str) -> None:
        logger.info("notification_success", message=message)

    def error(self, message: str) -> None:
        logger.warning("notification_error", message=message)


class HttpDoctorActions:
    """Doctor actions backed by the clinic API."""

    def __init__(self, client: httpx.AsyncClient, api_prefix: str = "/api/v1"):
        """
        Initialize with an HTTP client.

        Args:
            client: Client with ``base_url`` and session headers already set
            api_prefix: API version prefix
        """
        self.client = client
        self.base_path = f"{api_prefix}/doctors"

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, f"{self.base_path}{path}", **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "remote_call_failed",
                method=method,
                path=path,
                status_code=e.response.status_code,
            )
            raise RemoteCallError(
                f"{method} {path} failed with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("remote_call_failed", method=method, path=path, error=str(e))
            raise RemoteCallError(f"{method} {path} failed: {e}") from e
        return response

    async def upsert(self, payload: DoctorUpsert) -> DoctorResponse:
        """Create or update a doctor."""
        response = await self._request(
            "POST",
            "/upsert",
            json=payload.model_dump(mode="json", exclude_none=True),
        )
        return DoctorResponse.model_validate(response.json())

    async def delete(self, doctor_id: UUID) -> None:
        """Delete a doctor and their appointments."""
        await self._request("DELETE", f"/{doctor_id}")
