"""Base data model class"""
from datetime import datetime, timedelta
from typing import Optional
from sqlmodel import SQLModel, Field


class BaseModel(SQLModel):
    """Base class for all data tables with common fields"""

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(
        default_factory=datetime.now,
        nullable=False,
    )
    updated_at: datetime = Field(
        default_factory=datetime.now,
        nullable=False,
    )

    def touch(self) -> None:
        """Refresh updated_at, always moving it forward"""
        now = datetime.now()
        if now <= self.updated_at:
            now = self.updated_at + timedelta(microseconds=1)
        self.updated_at = now
