"""
SDK Exceptions

All SDK exceptions inherit from PhotoEditorSDKError, so callers can catch
every SDK failure with a single except clause.
"""


class PhotoEditorSDKError(Exception):
    """
    Base exception for all SDK errors.

    Attributes:
        message: Error message
        details: Optional dict with additional error context
    """

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConnectionError(PhotoEditorSDKError):
    """
    Connection to backend failed.

    Raised when:
    - Network connection fails
    - Backend is unreachable
    - Backend answers with a non-2xx status
    """
    pass


class ValidationError(PhotoEditorSDKError):
    """
    Backend rejected the input (error code VALIDATION_ERROR).

    details["details"] carries the per-field validation errors.
    """
    pass


class NotFoundError(PhotoEditorSDKError):
    """
    Referenced resource does not exist (error code NOT_FOUND).

    Raised when an operation or project is created for a missing image,
    or when polling an operation id the backend does not know.
    """
    pass


class OperationTimeoutError(PhotoEditorSDKError):
    """
    Operation did not finish within the polling budget.

    The backend makes no promise about when a pending operation changes
    state; this only reflects the client-side attempt limit.
    """
    pass
