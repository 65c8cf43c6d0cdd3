"""Application exceptions."""


class AppError(Exception):
    """Base exception for application errors."""


class ValidationError(AppError):
    """Raised when a request value is present but malformed."""


class PermissionDeniedError(AppError):
    """Raised when the caller has no session or lacks the required rights."""

    def __init__(self, message: str = "Unauthorized"):
        self.message = message
        super().__init__(message)


class ModelError(AppError):
    """Base exception for model/database operations."""


class RecordNotFoundError(ModelError):
    """Raised when a record is not found in the database."""

    def __init__(self, model_name: str, record_id: str):
        self.model_name = model_name
        self.record_id = record_id
        super().__init__(f"{model_name} not found")


class DuplicateRecordError(ModelError):
    """Raised when a record violates a uniqueness rule."""

    def __init__(self, model_name: str, detail: str):
        self.model_name = model_name
        self.detail = detail
        super().__init__(detail)


class DatabaseConnectionError(ModelError):
    """Raised when database connection fails."""


class InvalidFilterError(ModelError):
    """Raised when invalid filter is provided."""
