"""
Schema package for API request/response models.
"""

from .response import (
    BaseResponse,
    SuccessResponse,
    ErrorResponse,
)
from .image import (
    UploadImageRequest,
    GetImageRequest,
    ImageOut,
)
from .operation import (
    ObjectRemovalParameters,
    StyleTransferParameters,
    ImageModificationParameters,
    ObjectRemovalRequest,
    StyleTransferRequest,
    ImageModificationRequest,
    GetOperationResultRequest,
    ListOperationsRequest,
    AIOperationOut,
)
from .project import (
    CreateProjectRequest,
    GetProjectRequest,
    ListProjectsRequest,
    UpdateProjectRequest,
    ProjectOut,
    ProjectListOut,
)

__all__ = [
    # Response schemas
    "BaseResponse",
    "SuccessResponse",
    "ErrorResponse",
    # Image schemas
    "UploadImageRequest",
    "GetImageRequest",
    "ImageOut",
    # Operation schemas
    "ObjectRemovalParameters",
    "StyleTransferParameters",
    "ImageModificationParameters",
    "ObjectRemovalRequest",
    "StyleTransferRequest",
    "ImageModificationRequest",
    "GetOperationResultRequest",
    "ListOperationsRequest",
    "AIOperationOut",
    # Project schemas
    "CreateProjectRequest",
    "GetProjectRequest",
    "ListProjectsRequest",
    "UpdateProjectRequest",
    "ProjectOut",
    "ProjectListOut",
]
