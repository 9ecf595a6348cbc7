"""
Photo Editor SDK Main Client

Responsibilities:
- One coroutine per backend procedure
- Client-side polling for asynchronous operation results
- HTTP client lifecycle (async context manager)
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from ..backend.enum import OperationStatus
from .api.base import APIClient
from .exceptions import NotFoundError, OperationTimeoutError
from .utils import encode_mask

logger = logging.getLogger(__name__)

# Poll every 5 seconds for up to 5 minutes
DEFAULT_POLL_INTERVAL = 5.0
DEFAULT_POLL_ATTEMPTS = 60


def _compact(values: Dict[str, Any]) -> Dict[str, Any]:
    """Drop None values so the backend applies its own defaults"""
    return {key: value for key, value in values.items() if value is not None}


class PhotoEditorClient:
    """
    Async client for the photo editor backend.

    Usage:
        async with PhotoEditorClient("http://localhost:2022") as client:
            image = await client.upload_image(...)
            op = await client.remove_object(image["id"], mask={"x": 1, "y": 2})
            result = await client.wait_for_operation(op["id"])

    Args:
        base_url: Backend base URL
        timeout: HTTP request timeout in seconds
        transport: Optional httpx transport (for tests or in-process apps)
    """

    def __init__(
        self,
        base_url: str = "http://localhost:2022",
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.api_client = APIClient(base_url=base_url, timeout=timeout, transport=transport)

    # ==================== Images ====================

    async def upload_image(
        self,
        filename: str,
        original_filename: str,
        file_path: str,
        file_size: int,
        mime_type: str,
        width: int,
        height: int,
    ) -> Dict[str, Any]:
        """Record metadata of an image already placed in storage"""
        return await self.api_client.call("uploadImage", {
            "filename": filename,
            "original_filename": original_filename,
            "file_path": file_path,
            "file_size": file_size,
            "mime_type": mime_type,
            "width": width,
            "height": height,
        })

    async def get_image(self, image_id: int) -> Optional[Dict[str, Any]]:
        """Get image by id, None if absent"""
        return await self.api_client.call("getImage", {"id": image_id})

    # ==================== AI Operations ====================

    async def remove_object(
        self,
        image_id: int,
        mask: Any,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Queue object removal; mask may be a JSON string or a plain structure"""
        return await self.api_client.call("removeObject", _compact({
            "image_id": image_id,
            "mask_data": encode_mask(mask),
            "parameters": parameters,
        }))

    async def apply_style_transfer(
        self,
        image_id: int,
        prompt: str,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Queue a style transfer"""
        return await self.api_client.call("applyStyleTransfer", _compact({
            "image_id": image_id,
            "prompt": prompt,
            "parameters": parameters,
        }))

    async def modify_image(
        self,
        image_id: int,
        prompt: str,
        mask: Any = None,
        parameters: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Queue a prompt-driven modification"""
        return await self.api_client.call("modifyImage", _compact({
            "image_id": image_id,
            "prompt": prompt,
            "mask_data": encode_mask(mask) if mask is not None else None,
            "parameters": parameters,
        }))

    async def get_operation_result(self, operation_id: int) -> Optional[Dict[str, Any]]:
        """Get operation by id, None if absent"""
        return await self.api_client.call("getOperationResult", {"operation_id": operation_id})

    async def list_operations(self, image_id: Optional[int] = None) -> List[Dict[str, Any]]:
        """List operations newest first"""
        return await self.api_client.call("listOperations", _compact({"image_id": image_id}))

    async def wait_for_operation(
        self,
        operation_id: int,
        interval: float = DEFAULT_POLL_INTERVAL,
        max_attempts: int = DEFAULT_POLL_ATTEMPTS,
    ) -> Dict[str, Any]:
        """
        Poll getOperationResult until the operation completes or fails.

        Args:
            operation_id: Operation to watch
            interval: Seconds between polls
            max_attempts: Number of polls before giving up

        Returns:
            The operation in status completed or failed

        Raises:
            NotFoundError: Backend does not know the operation
            OperationTimeoutError: Still not finished after max_attempts polls
        """
        status = None
        for attempt in range(1, max_attempts + 1):
            operation = await self.get_operation_result(operation_id)
            if operation is None:
                raise NotFoundError(
                    f"Operation with id {operation_id} not found",
                    details={"operation_id": operation_id},
                )

            status = operation["status"]
            logger.debug(f"Poll {attempt}/{max_attempts}: operation {operation_id} is {status}")
            if OperationStatus(status).is_terminal:
                return operation

            if attempt < max_attempts:
                await asyncio.sleep(interval)

        raise OperationTimeoutError(
            f"Operation {operation_id} did not finish after {max_attempts} attempts",
            details={"operation_id": operation_id, "last_status": status},
        )

    # ==================== Projects ====================

    async def create_project(
        self,
        name: str,
        original_image_id: int,
        description: Optional[str] = None,
        is_public: bool = False,
    ) -> Dict[str, Any]:
        """Create a project from an existing image"""
        return await self.api_client.call("createProject", _compact({
            "name": name,
            "description": description,
            "original_image_id": original_image_id,
            "is_public": is_public,
        }))

    async def get_project(self, project_id: int) -> Optional[Dict[str, Any]]:
        """Get project by id, None if absent"""
        return await self.api_client.call("getProject", {"id": project_id})

    async def list_projects(
        self,
        limit: int = 20,
        offset: int = 0,
        public_only: bool = False,
    ) -> Dict[str, Any]:
        """List a page of projects; returns {"projects": [...], "total": n}"""
        return await self.api_client.call("listProjects", {
            "limit": limit,
            "offset": offset,
            "public_only": public_only,
        })

    async def update_project(self, project_id: int, **changes: Any) -> Optional[Dict[str, Any]]:
        """
        Partially update a project.

        Only the keyword arguments given are sent, so description=None
        clears the description while omitting it leaves it untouched.
        """
        return await self.api_client.call("updateProject", {"id": project_id, **changes})

    # ==================== System ====================

    async def healthcheck(self) -> Dict[str, Any]:
        """Check backend health"""
        return await self.api_client.get("/api/health")

    async def close(self) -> None:
        await self.api_client.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
