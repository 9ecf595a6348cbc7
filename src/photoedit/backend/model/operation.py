"""AI operation model"""

from typing import Optional
from sqlalchemy import Enum as SAEnum
from sqlmodel import Field, Column, Text
from .base import BaseModel
from ..enum import OperationType, OperationStatus


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class AIOperation(BaseModel, table=True):
    """
    AI operation model - a recorded request to transform an image.

    Operations are inserted with status PENDING. Moving them through
    PROCESSING to COMPLETED or FAILED, and filling result_image_path,
    error_message and processing_time, is the job of an external worker.

    mask_data and parameters are opaque JSON strings; the schema does not
    look inside them.
    """

    __tablename__ = "ai_operations"

    image_id: int = Field(
        foreign_key="images.id",
        ondelete="CASCADE",
        index=True,
        description="Reference to images.id - Image this operation targets"
    )

    operation_type: OperationType = Field(
        sa_column=Column(
            SAEnum(OperationType, name="ai_operation_type", values_callable=_enum_values),
            nullable=False,
        ),
        description="object_removal | style_transfer | image_modification"
    )
    status: OperationStatus = Field(
        default=OperationStatus.PENDING,
        sa_column=Column(
            SAEnum(OperationStatus, name="ai_operation_status", values_callable=_enum_values),
            nullable=False,
            default=OperationStatus.PENDING,
        ),
        description="pending | processing | completed | failed"
    )

    # Request payload
    prompt: Optional[str] = Field(
        default=None,
        sa_column=Column(Text),
        description="Text prompt (style transfer, modification)"
    )
    mask_data: Optional[str] = Field(
        default=None,
        sa_column=Column(Text),
        description="JSON string describing the selected region"
    )
    parameters: Optional[str] = Field(
        default=None,
        sa_column=Column(Text),
        description="JSON string with operation-specific tuning values"
    )

    # Written by the transformation worker
    result_image_path: Optional[str] = Field(
        default=None,
        sa_column=Column(Text),
        description="Path to the generated result image"
    )
    error_message: Optional[str] = Field(
        default=None,
        sa_column=Column(Text),
        description="Error details if the operation failed"
    )
    processing_time: Optional[float] = Field(
        default=None,
        description="Time taken for processing in seconds"
    )
