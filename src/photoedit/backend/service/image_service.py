"""Image ingestion service"""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..model import Image
from ..schema.image import UploadImageRequest, ImageOut

logger = logging.getLogger(__name__)


class ImageService:
    """Image metadata service"""

    @staticmethod
    async def upload_image(
        session: AsyncSession,
        request: UploadImageRequest,
    ) -> ImageOut:
        """Record metadata of an uploaded image

        The file itself is written by the storage collaborator; only its
        metadata passes through here.

        Args:
            session: Database session
            request: Validated image metadata

        Returns:
            Created image with generated id and timestamps
        """
        logger.info(
            f"Uploading image: filename={request.filename}, "
            f"size={request.file_size}, mime_type={request.mime_type}"
        )

        image = Image(**request.model_dump())

        try:
            session.add(image)
            await session.commit()
            await session.refresh(image)
        except SQLAlchemyError as e:
            logger.error(f"Image upload failed: {e}")
            await session.rollback()
            raise

        logger.info(f"Image created: id={image.id}")
        return ImageOut.model_validate(image)

    @staticmethod
    async def get_image(
        session: AsyncSession,
        image_id: int,
    ) -> ImageOut | None:
        """Get an image by ID

        Args:
            session: Database session
            image_id: Image ID (non-positive ids simply miss)

        Returns:
            Image, or None if no image has this id
        """
        image = await ImageService.find_image(session, image_id)
        if image is None:
            logger.debug(f"Image not found: id={image_id}")
            return None
        return ImageOut.model_validate(image)

    @staticmethod
    async def find_image(
        session: AsyncSession,
        image_id: int,
    ) -> Image | None:
        """Load an image row, logging and re-raising storage failures"""
        try:
            return await session.get(Image, image_id)
        except SQLAlchemyError as e:
            logger.error(f"Image retrieval failed: id={image_id}, error={e}")
            raise
