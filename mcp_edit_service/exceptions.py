"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class EditError(BaseAppError):
    """
    Base class for failures of an edit request.

    Each subclass names one error kind reported in the result envelope.
    """

    kind = "UnknownError"


class ValidationError(EditError):
    """Exception raised when tool arguments are malformed or missing."""

    kind = "ValidationError"

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = list(errors or [])


class AccessError(EditError):
    """Exception raised when the target file is missing, unreadable or unwritable."""

    kind = "AccessError"


class RewriteError(EditError):
    """Exception raised when the rewriting model fails or returns no content."""

    kind = "RewriteError"


class BackupError(EditError):
    """Exception raised when the backup snapshot cannot be written."""

    kind = "BackupError"


class CommitError(EditError):
    """Exception raised when the reconstructed content cannot be written."""

    kind = "CommitError"
