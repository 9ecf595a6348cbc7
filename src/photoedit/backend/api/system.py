"""Health check endpoint"""

from datetime import datetime, timezone

from fastapi import APIRouter

from ..schema.response import SuccessResponse

router = APIRouter(tags=["System"])


@router.get("/health", response_model=SuccessResponse[dict])
async def healthcheck():
    """Report that the server is up"""
    return SuccessResponse(
        data={"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
    )
