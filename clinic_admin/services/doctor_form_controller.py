"""State and submission logic of the add/edit doctor dialog."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any
from uuid import UUID

import structlog
from pydantic import ValidationError

from clinic_admin.core.exceptions import FieldError, FormValidationError, RemoteCallError
from clinic_admin.core.representation import initial_form_values, to_upsert_payload
from clinic_admin.schemas.doctor_form import form_field_errors, validate_doctor_form
from clinic_admin.schemas.doctors import DoctorResponse
from clinic_admin.services.doctor_actions import DoctorActions, Notifier

logger = structlog.get_logger(__name__)


class FormStatus(str, Enum):
    """Submission state of the form."""

    IDLE = "idle"
    SUBMITTING = "submitting"


class SubmitOutcome(str, Enum):
    """Result of the last finished remote call."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class DeleteConfirmation:
    """Texts of the confirmation step shown before deleting a doctor."""

    title: str
    description: str
    confirm_label: str = "Delete"
    cancel_label: str = "Cancel"


class UpsertDoctorFormController:
    """
    Add/edit doctor form, independent of any UI framework.

    The hosting dialog calls :meth:`reset` each time it opens, binds inputs
    through :meth:`set_value`, and awaits :meth:`submit` or :meth:`delete`.
    Remote calls and notifications go through the injected ``actions`` and
    ``notifier``.
    """

    def __init__(
        self,
        actions: DoctorActions,
        notifier: Notifier,
        on_success: Callable[[], None] | None = None,
        doctor: DoctorResponse | None = None,
    ):
        """
        Initialize the form.

        Args:
            actions: Remote upsert/delete capability
            notifier: Success/error notifications
            on_success: Called after a successful save, e.g. to close the dialog
            doctor: Doctor being edited; None for create mode
        """
        self.actions = actions
        self.notifier = notifier
        self.on_success = on_success
        self.doctor: DoctorResponse | None = None
        self.values: dict[str, Any] = {}
        self.field_errors: dict[str, FieldError] = {}
        self.status = FormStatus.IDLE
        self.is_deleting = False
        self.last_outcome: SubmitOutcome | None = None
        self.initialize(doctor)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def is_pending(self) -> bool:
        """True while an upsert is in flight; the submit button is disabled."""
        return self.status is FormStatus.SUBMITTING

    @property
    def doctor_id(self) -> UUID | None:
        return self.doctor.id if self.doctor else None

    @property
    def errors(self) -> dict[str, str]:
        """Messages shown beneath each offending control."""
        return {field: error.message for field, error in self.field_errors.items()}

    def reset(self, trigger: bool, doctor: DoctorResponse | None = None) -> bool:
        """
        Re-initialize the form when the dialog opens.

        Args:
            trigger: True when the dialog just became visible
            doctor: Doctor to edit, None for create mode

        Returns:
            Whether the form was reset
        """
        if not trigger:
            return False

        self.doctor = doctor
        self.values = initial_form_values(doctor)
        self.field_errors = {}
        self.last_outcome = None
        return True

    def initialize(self, doctor: DoctorResponse | None = None) -> None:
        """Load default values for ``doctor`` (edit) or for a new doctor."""
        self.reset(True, doctor)

    def set_value(self, field: str, value: Any) -> None:
        """Update one field and clear its error."""
        self.values[field] = value
        self.field_errors.pop(field, None)

    # ------------------------------------------------------------------
    # Texts
    # ------------------------------------------------------------------

    @property
    def title(self) -> str:
        return self.doctor.name if self.doctor else "Add a doctor"

    @property
    def description(self) -> str:
        if self.doctor:
            return "Edit the information of the doctor"
        return "Add a new doctor to your clinic."

    @property
    def submit_label(self) -> str:
        if self.is_pending:
            return "Updating doctor..." if self.doctor else "Adding doctor..."
        return "Save changes" if self.doctor else "Add doctor"

    @property
    def delete_confirmation(self) -> DeleteConfirmation | None:
        """Confirmation texts; None in create mode, where there is nothing to delete."""
        if self.doctor is None:
            return None
        return DeleteConfirmation(
            title="Are you sure you want to delete this doctor?",
            description=(
                "This action cannot be undone. This will delete the doctor "
                "and all scheduled appointments."
            ),
        )

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def submit(self, values: Mapping[str, Any] | None = None) -> DoctorResponse | None:
        """
        Validate, convert and save the form.

        Args:
            values: Field values to apply before submitting

        Returns:
            Saved doctor, or None when validation or the remote call failed
            or another submission is still pending
        """
        if self.is_pending:
            logger.debug("doctor_submit_ignored", reason="pending")
            return None

        if values is not None:
            self.values.update(values)

        try:
            form = validate_doctor_form(self.values)
        except FormValidationError as e:
            self.field_errors = e.errors
            return None

        try:
            payload = to_upsert_payload(form, self.doctor_id)
        except ValidationError as e:
            self.field_errors = form_field_errors(e)
            return None

        self.field_errors = {}
        editing = self.doctor is not None

        self.status = FormStatus.SUBMITTING
        try:
            saved = await self.actions.upsert(payload)
        except RemoteCallError as e:
            self.last_outcome = SubmitOutcome.ERROR
            logger.warning("doctor_upsert_failed", doctor_id=str(self.doctor_id), error=e.message)
            self.notifier.error("Error updating doctor" if editing else "Error adding doctor")
            return None
        finally:
            self.status = FormStatus.IDLE

        self.last_outcome = SubmitOutcome.SUCCESS
        self.notifier.success(
            "Doctor updated successfully" if editing else "Doctor added successfully"
        )
        if self.on_success is not None:
            self.on_success()
        return saved

    async def delete(self, confirmed: bool = False) -> bool:
        """
        Delete the doctor being edited, and with it their appointments.

        Args:
            confirmed: The user acknowledged :attr:`delete_confirmation`

        Returns:
            Whether the doctor was deleted
        """
        if self.doctor is None or not confirmed or self.is_deleting:
            return False

        self.is_deleting = True
        try:
            await self.actions.delete(self.doctor.id)
        except RemoteCallError as e:
            logger.warning("doctor_delete_failed", doctor_id=str(self.doctor.id), error=e.message)
            self.notifier.error("Error deleting doctor.")
            return False
        finally:
            self.is_deleting = False

        self.notifier.success("Doctor deleted successfully.")
        return True
