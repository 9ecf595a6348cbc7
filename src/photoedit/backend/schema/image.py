"""Image-related schemas for API input/output"""

from datetime import datetime
from pydantic import BaseModel, Field


# ==================== Input Schemas ====================

class UploadImageRequest(BaseModel):
    """Upload image request (metadata only, bytes go to external storage)"""

    filename: str = Field(..., max_length=255, description="Stored filename", examples=["a1b2c3.png"])
    original_filename: str = Field(..., max_length=255, description="Filename from the uploader", examples=["beach.png"])
    file_path: str = Field(..., description="Storage path", examples=["/uploads/a1b2c3.png"])
    file_size: int = Field(..., gt=0, description="File size in bytes")
    mime_type: str = Field(..., max_length=100, description="MIME type", examples=["image/png"])
    width: int = Field(..., gt=0, description="Image width in pixels")
    height: int = Field(..., gt=0, description="Image height in pixels")


class GetImageRequest(BaseModel):
    """Get image request"""

    id: int = Field(..., description="Image ID")


# ==================== Output Schemas ====================

class ImageOut(BaseModel):
    """Image output schema"""

    id: int = Field(..., description="Image ID")
    filename: str = Field(..., description="Stored filename")
    original_filename: str = Field(..., description="Filename from the uploader")
    file_path: str = Field(..., description="Storage path")
    file_size: int = Field(..., description="File size in bytes")
    mime_type: str = Field(..., description="MIME type")
    width: int = Field(..., description="Image width in pixels")
    height: int = Field(..., description="Image height in pixels")
    created_at: datetime = Field(..., description="Creation time")
    updated_at: datetime = Field(..., description="Last update time")

    model_config = {"from_attributes": True}
