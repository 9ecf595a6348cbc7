"""AI operation procedures"""

import logging
from typing import Optional

from fastapi import APIRouter

from ..schema.response import SuccessResponse
from ..schema.operation import (
    ObjectRemovalRequest,
    StyleTransferRequest,
    ImageModificationRequest,
    GetOperationResultRequest,
    ListOperationsRequest,
    AIOperationOut,
)
from ..service import OperationService
from ..dep import SessionDep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["AI Operations"])


@router.post("/removeObject", response_model=SuccessResponse[AIOperationOut])
async def remove_object(request: ObjectRemovalRequest, session: SessionDep):
    """Queue an object removal for the masked region

    The operation is recorded as pending; poll getOperationResult for the
    outcome.

    Raises:
        NotFoundError: image_id does not reference an image
    """
    logger.debug(f"API: removeObject image_id={request.image_id}")
    operation = await OperationService.remove_object(session, request)
    return SuccessResponse(data=operation)


@router.post("/applyStyleTransfer", response_model=SuccessResponse[AIOperationOut])
async def apply_style_transfer(request: StyleTransferRequest, session: SessionDep):
    """Queue a style transfer over the whole image

    Raises:
        NotFoundError: image_id does not reference an image
    """
    logger.debug(f"API: applyStyleTransfer image_id={request.image_id}")
    operation = await OperationService.apply_style_transfer(session, request)
    return SuccessResponse(data=operation)


@router.post("/modifyImage", response_model=SuccessResponse[AIOperationOut])
async def modify_image(request: ImageModificationRequest, session: SessionDep):
    """Queue a prompt-driven modification, optionally limited by a mask

    Raises:
        NotFoundError: image_id does not reference an image
    """
    logger.debug(f"API: modifyImage image_id={request.image_id}")
    operation = await OperationService.modify_image(session, request)
    return SuccessResponse(data=operation)


@router.post("/getOperationResult", response_model=SuccessResponse[Optional[AIOperationOut]])
async def get_operation_result(request: GetOperationResultRequest, session: SessionDep):
    """Get an operation by id (data is null when absent)"""
    operation = await OperationService.get_operation_result(session, request.operation_id)
    return SuccessResponse(data=operation)


@router.post("/listOperations", response_model=SuccessResponse[list[AIOperationOut]])
async def list_operations(session: SessionDep, request: Optional[ListOperationsRequest] = None):
    """List operations newest first, optionally for one image

    An empty body lists operations for every image.
    """
    request = request or ListOperationsRequest()
    operations = await OperationService.list_operations(session, request.image_id)
    return SuccessResponse(data=operations)
