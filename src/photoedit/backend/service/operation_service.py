"""AI operation service

Creates and queries AI operation records. Operations are only recorded
here; the transformation itself is performed by an external worker that
reads pending rows and writes back status, result path or error message,
and processing time.
"""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..model import AIOperation
from ..schema.operation import (
    OperationParameters,
    ObjectRemovalRequest,
    StyleTransferRequest,
    ImageModificationRequest,
    AIOperationOut,
)
from ..enum import OperationType, OperationStatus
from ..exception import ImageNotFoundError
from .image_service import ImageService

logger = logging.getLogger(__name__)


def is_foreign_key_violation(error: IntegrityError) -> bool:
    """Check whether an IntegrityError came from a foreign key constraint"""
    return "foreign key" in str(error.orig).lower()


class OperationService:
    """AI operation service"""

    @staticmethod
    async def _create_operation(
        session: AsyncSession,
        image_id: int,
        operation_type: OperationType,
        prompt: Optional[str],
        mask_data: Optional[str],
        parameters: Optional[OperationParameters],
    ) -> AIOperationOut:
        """Insert a pending operation for an existing image

        Raises:
            ImageNotFoundError: Image does not exist (checked up front, and
                again through the foreign key if it vanishes before insert)
        """
        image = await ImageService.find_image(session, image_id)
        if image is None:
            logger.warning(f"{operation_type.value}: image not found: id={image_id}")
            raise ImageNotFoundError(image_id)

        operation = AIOperation(
            image_id=image_id,
            operation_type=operation_type,
            status=OperationStatus.PENDING,
            prompt=prompt,
            mask_data=mask_data,
            parameters=parameters.to_json() if parameters is not None else None,
        )

        try:
            session.add(operation)
            await session.commit()
            await session.refresh(operation)
        except IntegrityError as e:
            await session.rollback()
            if is_foreign_key_violation(e):
                logger.warning(f"{operation_type.value}: image deleted before insert: id={image_id}")
                raise ImageNotFoundError(image_id) from e
            logger.error(f"{operation_type.value} operation creation failed: {e}")
            raise
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"{operation_type.value} operation creation failed: {e}")
            raise

        logger.info(
            f"Operation created: id={operation.id}, type={operation_type.value}, image_id={image_id}"
        )
        return AIOperationOut.model_validate(operation)

    @staticmethod
    async def remove_object(
        session: AsyncSession,
        request: ObjectRemovalRequest,
    ) -> AIOperationOut:
        """Record an object removal request (mask required, no prompt)"""
        return await OperationService._create_operation(
            session,
            image_id=request.image_id,
            operation_type=OperationType.OBJECT_REMOVAL,
            prompt=None,
            mask_data=request.mask_data,
            parameters=request.parameters,
        )

    @staticmethod
    async def apply_style_transfer(
        session: AsyncSession,
        request: StyleTransferRequest,
    ) -> AIOperationOut:
        """Record a style transfer request (whole image, no mask)"""
        return await OperationService._create_operation(
            session,
            image_id=request.image_id,
            operation_type=OperationType.STYLE_TRANSFER,
            prompt=request.prompt,
            mask_data=None,
            parameters=request.parameters,
        )

    @staticmethod
    async def modify_image(
        session: AsyncSession,
        request: ImageModificationRequest,
    ) -> AIOperationOut:
        """Record a prompt-driven modification, optionally limited by a mask"""
        return await OperationService._create_operation(
            session,
            image_id=request.image_id,
            operation_type=OperationType.IMAGE_MODIFICATION,
            prompt=request.prompt,
            mask_data=request.mask_data,
            parameters=request.parameters,
        )

    @staticmethod
    async def get_operation_result(
        session: AsyncSession,
        operation_id: int,
    ) -> AIOperationOut | None:
        """Get an operation by ID (used by clients to poll for results)

        Returns:
            Operation, or None if no operation has this id
        """
        try:
            operation = await session.get(AIOperation, operation_id)
        except SQLAlchemyError as e:
            logger.error(f"Get operation result failed: id={operation_id}, error={e}")
            raise

        if operation is None:
            logger.debug(f"Operation not found: id={operation_id}")
            return None
        return AIOperationOut.model_validate(operation)

    @staticmethod
    async def list_operations(
        session: AsyncSession,
        image_id: Optional[int] = None,
    ) -> list[AIOperationOut]:
        """List operations, newest first

        Args:
            session: Database session
            image_id: Only operations targeting this image

        Returns:
            All matching operations (no pagination)
        """
        stmt = select(AIOperation)
        if image_id is not None:
            stmt = stmt.where(AIOperation.image_id == image_id)
        stmt = stmt.order_by(AIOperation.created_at.desc(), AIOperation.id.desc())

        try:
            result = await session.execute(stmt)
            operations = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error(f"List operations failed: image_id={image_id}, error={e}")
            raise

        logger.debug(f"Found {len(operations)} operations (image_id={image_id})")
        return [AIOperationOut.model_validate(op) for op in operations]
