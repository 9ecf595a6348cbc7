"""Project model"""

from typing import Optional
from sqlmodel import Field, Column, Text
from .base import BaseModel


class Project(BaseModel, table=True):
    """
    Project model - a saved editing session anchored to an original image.

    current_image_path starts as the original image's file_path and is
    moved forward by the client as results arrive. operations_history is
    an opaque JSON string, "[]" on creation.
    """

    __tablename__ = "projects"

    name: str = Field(
        max_length=255,
        description="Project name"
    )
    description: Optional[str] = Field(
        default=None,
        sa_column=Column(Text),
        description="Project description"
    )
    original_image_id: int = Field(
        foreign_key="images.id",
        ondelete="CASCADE",
        index=True,
        description="Reference to images.id - Image the project started from"
    )
    current_image_path: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Path of the latest result image"
    )
    operations_history: str = Field(
        sa_column=Column(Text, nullable=False),
        description="JSON string containing the operation history"
    )
    is_public: bool = Field(
        default=False,
        index=True,
        description="Whether the project is listed publicly"
    )
