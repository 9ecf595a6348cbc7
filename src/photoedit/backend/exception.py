"""Custom exceptions for the photo editor backend"""


class PhotoEditorException(Exception):
    """Base exception for all photo editor business errors

    All custom exceptions should inherit from this class.
    The global exception handler will catch this and return ErrorResponse.

    Attributes:
        message: Human-readable error message
        code: Error code for client-side error handling
    """

    def __init__(self, message: str, code: str):
        """Initialize photo editor exception

        Args:
            message: Human-readable error message
            code: Error code (e.g., "NOT_FOUND")
        """
        self.message = message
        self.code = code
        super().__init__(message)


class NotFoundError(PhotoEditorException):
    """Referenced resource not found

    Raised when a create request points at an image that does not exist.
    Plain reads of a missing row are not errors, they return null.

    Attributes:
        resource_id: Identifier of the missing resource, if known
    """

    def __init__(self, message: str, resource_id: int | None = None):
        super().__init__(message, "NOT_FOUND")
        self.resource_id = resource_id


class ImageNotFoundError(NotFoundError):
    """Referenced image does not exist

    Examples:
        - removeObject with image_id=999999
        - createProject with an original_image_id that was deleted
    """

    def __init__(self, image_id: int):
        super().__init__(f"Image with id {image_id} not found", resource_id=image_id)
        self.image_id = image_id
