"""Custom application exceptions."""


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500):
        """Initialize exception with message and status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, message: str = "Resource not found"):
        """Initialize with 404 status code."""
        super().__init__(message, status_code=404)


class UnauthorizedException(AppException):
    """Unauthorized access exception."""

    def __init__(self, message: str = "Unauthorized"):
        """Initialize with 401 status code."""
        super().__init__(message, status_code=401)


class ForbiddenException(AppException):
    """Forbidden access exception."""

    def __init__(self, message: str = "Forbidden"):
        """Initialize with 403 status code."""
        super().__init__(message, status_code=403)


class BadRequestException(AppException):
    """Bad request exception."""

    def __init__(self, message: str = "Bad request"):
        """Initialize with 400 status code."""
        super().__init__(message, status_code=400)


class ConflictException(AppException):
    """Conflict exception."""

    def __init__(self, message: str = "Conflict"):
        """Initialize with 409 status code."""
        super().__init__(message, status_code=409)


class ValidationException(AppException):
    """Validation error exception."""

    def __init__(self, message: str = "Validation error"):
        """Initialize with 422 status code."""
        super().__init__(message, status_code=422)


class RemoteCallError(AppException):
    """Upsert or delete call failed on the network or on the server."""

    def __init__(self, message: str = "Remote call failed", status_code: int = 502):
        """Initialize with 502 status code unless the server answered otherwise."""
        super().__init__(message, status_code=status_code)


# ============================================================================
# Form field errors
# ============================================================================


class FieldError(Exception):
    """Error attached to a single form field."""

    def __init__(self, field: str, message: str):
        """Initialize with the offending field name and a readable message."""
        self.field = field
        self.message = message
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        return (
            type(other) is type(self)
            and other.field == self.field  # type: ignore[attr-defined]
            and other.message == self.message  # type: ignore[attr-defined]
        )

    def __hash__(self) -> int:
        return hash((type(self), self.field, self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.field!r}, {self.message!r})"


class RequiredFieldError(FieldError):
    """Field is empty or missing."""


class OrderingError(FieldError):
    """Start time is not before end time."""


class InvalidChoiceError(FieldError):
    """Value is not one of the offered options."""


class FormValidationError(ValidationException):
    """Form failed validation; carries one error per field."""

    def __init__(self, errors: dict[str, FieldError]):
        """Initialize with the per-field errors."""
        self.errors = errors
        super().__init__("Form validation failed")

    @property
    def messages(self) -> dict[str, str]:
        """Field name to message mapping, as shown beneath each control."""
        return {field: error.message for field, error in self.errors.items()}
