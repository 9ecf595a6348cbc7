"""Project management service"""
import json
import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..model import Project
from ..schema.project import (
    CreateProjectRequest,
    ListProjectsRequest,
    UpdateProjectRequest,
    ProjectOut,
    ProjectListOut,
)
from ..exception import ImageNotFoundError
from .image_service import ImageService
from .operation_service import is_foreign_key_violation

logger = logging.getLogger(__name__)

EMPTY_HISTORY = json.dumps([])


class ProjectService:
    """Project management service"""

    @staticmethod
    async def create_project(
        session: AsyncSession,
        request: CreateProjectRequest,
    ) -> ProjectOut:
        """Create a project anchored to an existing image

        The project starts with the original image as its current image and
        an empty operations history.

        Raises:
            ImageNotFoundError: original_image_id does not reference an image
        """
        logger.info(
            f"Creating project '{request.name}' from image {request.original_image_id}"
        )

        image = await ImageService.find_image(session, request.original_image_id)
        if image is None:
            logger.warning(f"Project image not found: id={request.original_image_id}")
            raise ImageNotFoundError(request.original_image_id)

        project = Project(
            name=request.name,
            description=request.description,
            original_image_id=image.id,
            current_image_path=image.file_path,
            operations_history=EMPTY_HISTORY,
            is_public=request.is_public,
        )

        try:
            session.add(project)
            await session.commit()
            await session.refresh(project)
        except IntegrityError as e:
            await session.rollback()
            if is_foreign_key_violation(e):
                raise ImageNotFoundError(request.original_image_id) from e
            logger.error(f"Project creation failed: {e}")
            raise
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Project creation failed: {e}")
            raise

        logger.info(f"Project created with ID: {project.id}")
        return ProjectOut.model_validate(project)

    @staticmethod
    async def get_project(
        session: AsyncSession,
        project_id: int,
    ) -> ProjectOut | None:
        """Get a project by ID, or None if absent"""
        try:
            project = await session.get(Project, project_id)
        except SQLAlchemyError as e:
            logger.error(f"Project retrieval failed: id={project_id}, error={e}")
            raise

        if project is None:
            logger.debug(f"Project not found: id={project_id}")
            return None
        return ProjectOut.model_validate(project)

    @staticmethod
    async def list_projects(
        session: AsyncSession,
        request: ListProjectsRequest,
    ) -> ProjectListOut:
        """List one page of projects and the total matching count

        The page and the count are two separate queries, so under
        concurrent writes they may not come from the same snapshot.
        """
        data_stmt = select(Project)
        count_stmt = select(func.count(Project.id))
        if request.public_only:
            data_stmt = data_stmt.where(Project.is_public.is_(True))
            count_stmt = count_stmt.where(Project.is_public.is_(True))

        data_stmt = (
            data_stmt
            .order_by(Project.created_at.desc(), Project.id.desc())
            .limit(request.limit)
            .offset(request.offset)
        )

        try:
            result = await session.execute(data_stmt)
            projects = result.scalars().all()

            count_result = await session.execute(count_stmt)
            total = count_result.scalar() or 0
        except SQLAlchemyError as e:
            logger.error(f"List projects failed: {e}")
            raise

        logger.debug(
            f"Listed {len(projects)} projects (total={total}, limit={request.limit}, "
            f"offset={request.offset}, public_only={request.public_only})"
        )
        return ProjectListOut(
            projects=[ProjectOut.model_validate(p) for p in projects],
            total=total,
        )

    @staticmethod
    async def update_project(
        session: AsyncSession,
        request: UpdateProjectRequest,
    ) -> ProjectOut | None:
        """Apply a partial update to a project

        Only fields present in the request are written. updated_at is
        refreshed even when nothing else changes.

        Returns:
            Updated project, or None if the id matches no project
        """
        logger.info(f"Updating project {request.id}")

        try:
            project = await session.get(Project, request.id)
        except SQLAlchemyError as e:
            logger.error(f"Project update failed: id={request.id}, error={e}")
            raise

        if project is None:
            logger.warning(f"Project not found for update: id={request.id}")
            return None

        changes = request.changes()
        for field, value in changes.items():
            setattr(project, field, value)
        project.touch()

        try:
            session.add(project)
            await session.commit()
            await session.refresh(project)
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Project update failed: id={request.id}, error={e}")
            raise

        logger.info(f"Project {request.id} updated: fields={sorted(changes)}")
        return ProjectOut.model_validate(project)
