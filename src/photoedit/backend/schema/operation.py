"""AI operation schemas for API input/output"""

import json
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

from ..enum import OperationType, OperationStatus


# ==================== Parameter Bags ====================

class OperationParameters(BaseModel):
    """Base class for operation-specific tuning values

    Parameter bags are stored as JSON text with every default filled in.
    """

    def to_json(self) -> str:
        """Serialize for the parameters column"""
        return json.dumps(self.model_dump())


class ObjectRemovalParameters(OperationParameters):
    """Tuning values for object removal (inpainting)"""

    inpaint_strength: float = Field(0.8, ge=0, le=1, description="How strongly the masked area is repainted")
    guidance_scale: float = Field(7.5, ge=1, le=20, description="Classifier-free guidance scale")


class StyleTransferParameters(OperationParameters):
    """Tuning values for style transfer"""

    style_strength: float = Field(0.7, ge=0, le=1, description="How strongly the style is applied")
    guidance_scale: float = Field(7.5, ge=1, le=20, description="Classifier-free guidance scale")
    num_inference_steps: int = Field(50, ge=10, le=100, description="Number of denoising steps")


class ImageModificationParameters(OperationParameters):
    """Tuning values for prompt-driven modification"""

    modification_strength: float = Field(0.8, ge=0, le=1, description="How strongly the image is changed")
    guidance_scale: float = Field(7.5, ge=1, le=20, description="Classifier-free guidance scale")
    num_inference_steps: int = Field(50, ge=10, le=100, description="Number of denoising steps")


# ==================== Input Schemas ====================

class ObjectRemovalRequest(BaseModel):
    """Remove object request"""

    image_id: int = Field(..., description="Target image ID")
    mask_data: str = Field(
        ...,
        description="JSON string describing the selection to remove",
        examples=['{"type": "rect", "x": 10, "y": 20, "width": 100, "height": 50}']
    )
    parameters: Optional[ObjectRemovalParameters] = Field(None, description="Optional tuning values")


class StyleTransferRequest(BaseModel):
    """Apply style transfer request (whole image, no mask)"""

    image_id: int = Field(..., description="Target image ID")
    prompt: str = Field(..., description="Style description", examples=["in the style of Van Gogh"])
    parameters: Optional[StyleTransferParameters] = Field(None, description="Optional tuning values")


class ImageModificationRequest(BaseModel):
    """Modify image request (mask narrows the change to a region)"""

    image_id: int = Field(..., description="Target image ID")
    prompt: str = Field(..., description="Requested change", examples=["make the sky brighter"])
    mask_data: Optional[str] = Field(None, description="Optional JSON string describing the target region")
    parameters: Optional[ImageModificationParameters] = Field(None, description="Optional tuning values")


class GetOperationResultRequest(BaseModel):
    """Get operation result request"""

    operation_id: int = Field(..., description="Operation ID")


class ListOperationsRequest(BaseModel):
    """List operations request"""

    image_id: Optional[int] = Field(None, description="Only operations on this image")


# ==================== Output Schemas ====================

class AIOperationOut(BaseModel):
    """AI operation output schema"""

    id: int = Field(..., description="Operation ID")
    image_id: int = Field(..., description="Target image ID")
    operation_type: OperationType = Field(..., description="Operation type")
    status: OperationStatus = Field(..., description="Operation status")
    prompt: Optional[str] = Field(None, description="Text prompt")
    mask_data: Optional[str] = Field(None, description="JSON mask description")
    parameters: Optional[str] = Field(None, description="JSON parameter bag")
    result_image_path: Optional[str] = Field(None, description="Result image path")
    error_message: Optional[str] = Field(None, description="Error details")
    processing_time: Optional[float] = Field(None, description="Processing time in seconds")
    created_at: datetime = Field(..., description="Creation time")
    updated_at: datetime = Field(..., description="Last update time")

    model_config = {"from_attributes": True}

    @field_validator("processing_time", mode="before")
    @classmethod
    def coerce_processing_time(cls, value: Any) -> Optional[float]:
        """Drivers may hand REAL/NUMERIC columns back as Decimal or str"""
        if value is None:
            return None
        if isinstance(value, (Decimal, str)):
            return float(value)
        return value
