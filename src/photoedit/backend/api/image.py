"""Image procedures"""

import logging
from typing import Optional

from fastapi import APIRouter

from ..schema.response import SuccessResponse
from ..schema.image import UploadImageRequest, GetImageRequest, ImageOut
from ..service import ImageService
from ..dep import SessionDep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Images"])


@router.post("/uploadImage", response_model=SuccessResponse[ImageOut])
async def upload_image(request: UploadImageRequest, session: SessionDep):
    """Record an uploaded image's metadata

    No file bytes travel through this procedure; storage is handled
    out of band and file_path points at the stored file.

    Request:
        {"filename": "a1b2.png", "original_filename": "beach.png",
         "file_path": "/uploads/a1b2.png", "file_size": 204800,
         "mime_type": "image/png", "width": 1920, "height": 1080}
    """
    logger.debug(f"API: uploadImage filename={request.filename}")
    image = await ImageService.upload_image(session, request)
    return SuccessResponse(data=image)


@router.post("/getImage", response_model=SuccessResponse[Optional[ImageOut]])
async def get_image(request: GetImageRequest, session: SessionDep):
    """Get an image by id (data is null when absent)"""
    image = await ImageService.get_image(session, request.id)
    return SuccessResponse(data=image)
