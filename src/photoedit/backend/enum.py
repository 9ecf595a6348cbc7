"""Enumeration types for backend"""
from enum import Enum


class OperationType(str, Enum):
    """AI operation type enumeration

    Defines the kinds of AI-assisted edits that can be requested for an image.
    """
    OBJECT_REMOVAL = "object_removal"
    STYLE_TRANSFER = "style_transfer"
    IMAGE_MODIFICATION = "image_modification"


class OperationStatus(str, Enum):
    """AI operation status enumeration

    Defines the lifecycle states of an AI operation.

    PENDING: Operation is recorded and waiting for a worker
    PROCESSING: A worker has picked the operation up
    COMPLETED: Result image was produced (result_image_path is set)
    FAILED: Transformation failed (error_message is set)

    Lifecycle: PENDING → PROCESSING → COMPLETED | FAILED

    Note:
        The backend only ever writes PENDING. The remaining transitions are
        performed by an external transformation worker.
    """
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Check if no further transitions are expected"""
        return self in (OperationStatus.COMPLETED, OperationStatus.FAILED)
