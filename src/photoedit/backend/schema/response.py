"""
Response schemas for API endpoints.

This module defines the unified response format for all procedures:
- BaseResponse: Common fields for all responses
- SuccessResponse: Generic successful response wrapper
- ErrorResponse: Error response with error details
"""

from typing import TypeVar, Generic, Optional
from pydantic import BaseModel, Field


T = TypeVar('T')


class BaseResponse(BaseModel):
    """Base response model with common fields."""

    success: bool = Field(..., description="Indicates whether the request was successful")
    message: Optional[str] = Field(None, description="Optional message for additional context")


class SuccessResponse(BaseResponse, Generic[T]):
    """Generic successful response wrapper.

    Example:
        SuccessResponse[ImageOut] for a created image
        SuccessResponse[Optional[ProjectOut]] for a lookup that may miss
    """

    success: bool = Field(True, description="Always true for successful responses")
    data: T = Field(..., description="Response data")


class ErrorResponse(BaseResponse):
    """Error response with detailed error information."""

    success: bool = Field(False, description="Always false for error responses")
    data: None = Field(None, description="Always null for error responses")
    error: Optional[dict] = Field(
        None,
        description="Error details including code and optional details",
        examples=[
            {"code": "NOT_FOUND", "resource_id": 999999},
            {"code": "VALIDATION_ERROR", "details": [{"loc": ["body", "file_size"], "msg": "Input should be greater than 0"}]}
        ]
    )
