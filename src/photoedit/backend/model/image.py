"""Image metadata model"""

from sqlmodel import Field, Column, Text
from .base import BaseModel


class Image(BaseModel, table=True):
    """
    Image model - metadata of an uploaded image.

    Rows are created on upload and never modified afterwards. The file
    bytes live in external storage; file_path points at them.

    Deleting an image cascades to its AI operations and projects
    (ON DELETE CASCADE on both foreign keys).
    """

    __tablename__ = "images"

    filename: str = Field(
        max_length=255,
        description="Stored filename"
    )
    original_filename: str = Field(
        max_length=255,
        description="Filename as provided by the uploader"
    )
    file_path: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Storage path of the image file"
    )
    file_size: int = Field(
        description="File size in bytes"
    )
    mime_type: str = Field(
        max_length=100,
        description="MIME type (e.g., image/png, image/jpeg)"
    )
    width: int = Field(
        description="Image width in pixels"
    )
    height: int = Field(
        description="Image height in pixels"
    )
