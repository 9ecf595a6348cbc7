"""Data models"""
from .base import BaseModel
from .image import Image
from .operation import AIOperation
from .project import Project

__all__ = [
    "BaseModel",
    "Image",
    "AIOperation",
    "Project",
]
