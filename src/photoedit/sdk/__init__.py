"""
Photo Editor SDK - Python client for the photo editor backend

Usage:
    from photoedit.sdk import PhotoEditorClient

    async with PhotoEditorClient("http://localhost:2022") as client:
        op = await client.apply_style_transfer(image_id=1, prompt="watercolor")
        result = await client.wait_for_operation(op["id"])
"""

from .client import PhotoEditorClient
from .exceptions import (
    PhotoEditorSDKError,
    ConnectionError,
    ValidationError,
    NotFoundError,
    OperationTimeoutError,
)

__version__ = "0.1.0"

__all__ = [
    "PhotoEditorClient",
    "PhotoEditorSDKError",
    "ConnectionError",
    "ValidationError",
    "NotFoundError",
    "OperationTimeoutError",
]
