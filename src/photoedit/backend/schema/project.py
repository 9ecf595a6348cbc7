"""Project schemas for API input/output"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, model_validator


# ==================== Input Schemas ====================

class CreateProjectRequest(BaseModel):
    """Create project request"""

    name: str = Field(..., max_length=255, description="Project name", examples=["Beach retouch"])
    description: Optional[str] = Field(None, description="Project description")
    original_image_id: int = Field(..., description="Image the project starts from")
    is_public: bool = Field(False, description="List the project publicly")


class GetProjectRequest(BaseModel):
    """Get project request"""

    id: int = Field(..., description="Project ID")


class ListProjectsRequest(BaseModel):
    """List projects request"""

    limit: int = Field(20, ge=1, le=100, description="Page size (1-100)")
    offset: int = Field(0, ge=0, description="Rows to skip")
    public_only: bool = Field(False, description="Only public projects")


class UpdateProjectRequest(BaseModel):
    """Update project request

    Only fields present in the request body are written. description may
    be set to null explicitly; the other fields may only be omitted.
    """

    id: int = Field(..., description="Project ID")
    name: Optional[str] = Field(None, max_length=255, description="New project name")
    description: Optional[str] = Field(None, description="New description (null clears it)")
    current_image_path: Optional[str] = Field(None, description="Path of the latest result image")
    operations_history: Optional[str] = Field(None, description="JSON string with the operation history")
    is_public: Optional[bool] = Field(None, description="New visibility")

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        for field in ("name", "current_image_path", "operations_history", "is_public"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self

    def changes(self) -> dict:
        """Fields supplied by the caller, excluding the id"""
        return self.model_dump(include=self.model_fields_set - {"id"})


# ==================== Output Schemas ====================

class ProjectOut(BaseModel):
    """Project output schema"""

    id: int = Field(..., description="Project ID")
    name: str = Field(..., description="Project name")
    description: Optional[str] = Field(None, description="Project description")
    original_image_id: int = Field(..., description="Image the project started from")
    current_image_path: str = Field(..., description="Path of the latest result image")
    operations_history: str = Field(..., description="JSON string with the operation history")
    is_public: bool = Field(..., description="Whether the project is public")
    created_at: datetime = Field(..., description="Creation time")
    updated_at: datetime = Field(..., description="Last update time")

    model_config = {"from_attributes": True}


class ProjectListOut(BaseModel):
    """One page of projects plus the total matching count"""

    projects: list[ProjectOut] = Field(..., description="Projects on this page")
    total: int = Field(..., ge=0, description="Total number of matching projects")
