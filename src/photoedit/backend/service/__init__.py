"""Business services, one static method per procedure"""
from .image_service import ImageService
from .operation_service import OperationService
from .project_service import ProjectService

__all__ = [
    "ImageService",
    "OperationService",
    "ProjectService",
]
