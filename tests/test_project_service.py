import asyncio
import json
import pytest
from datetime import datetime, timedelta

from photoedit.backend.exception import ImageNotFoundError
from photoedit.backend.model import Project
from photoedit.backend.schema.project import (
    CreateProjectRequest,
    ListProjectsRequest,
    UpdateProjectRequest,
)
from photoedit.backend.service import ProjectService


async def seed_projects(session, image, visibility):
    """Insert projects with increasing created_at, oldest first"""
    base = datetime(2024, 1, 1, 12, 0, 0)
    for index, is_public in enumerate(visibility):
        session.add(Project(
            name=f"project {index}",
            original_image_id=image.id,
            current_image_path=image.file_path,
            operations_history="[]",
            is_public=is_public,
            created_at=base + timedelta(minutes=index),
            updated_at=base + timedelta(minutes=index),
        ))
    await session.commit()


class TestCreateProject:
    """Project creation"""

    @pytest.mark.asyncio
    async def test_starts_from_original_image(self, db_session, sample_image):
        project = await ProjectService.create_project(
            db_session,
            CreateProjectRequest(name="Beach retouch", original_image_id=sample_image.id),
        )

        assert project.id is not None
        assert project.name == "Beach retouch"
        assert project.description is None
        assert project.original_image_id == sample_image.id
        assert project.current_image_path == sample_image.file_path
        assert json.loads(project.operations_history) == []
        assert project.is_public is False

    @pytest.mark.asyncio
    async def test_public_with_description(self, db_session, sample_image):
        project = await ProjectService.create_project(
            db_session,
            CreateProjectRequest(
                name="Portfolio",
                description="Summer shots",
                original_image_id=sample_image.id,
                is_public=True,
            ),
        )

        fetched = await ProjectService.get_project(db_session, project.id)

        assert fetched == project
        assert fetched.description == "Summer shots"
        assert fetched.is_public is True

    @pytest.mark.asyncio
    async def test_missing_image_raises(self, db_session):
        with pytest.raises(ImageNotFoundError) as exc_info:
            await ProjectService.create_project(
                db_session,
                CreateProjectRequest(name="Orphan", original_image_id=999999),
            )

        assert exc_info.value.image_id == 999999


class TestGetProject:
    """Project lookup"""

    @pytest.mark.asyncio
    async def test_missing_project_returns_none(self, db_session):
        assert await ProjectService.get_project(db_session, 999999) is None


class TestListProjects:
    """Project pagination and visibility filter"""

    @pytest.mark.asyncio
    async def test_empty(self, db_session):
        page = await ProjectService.list_projects(db_session, ListProjectsRequest())

        assert page.projects == []
        assert page.total == 0

    @pytest.mark.asyncio
    async def test_newest_first(self, db_session, sample_image):
        await seed_projects(db_session, sample_image, [False, True, False])

        page = await ProjectService.list_projects(db_session, ListProjectsRequest())

        assert [p.name for p in page.projects] == ["project 2", "project 1", "project 0"]
        assert page.total == 3

    @pytest.mark.asyncio
    async def test_public_only(self, db_session, sample_image):
        await seed_projects(db_session, sample_image, [True, False, True, False])

        page = await ProjectService.list_projects(
            db_session, ListProjectsRequest(public_only=True)
        )

        assert all(p.is_public for p in page.projects)
        assert [p.name for p in page.projects] == ["project 2", "project 0"]
        assert page.total == 2

    @pytest.mark.asyncio
    async def test_total_ignores_pagination(self, db_session, sample_image):
        await seed_projects(db_session, sample_image, [False] * 5)

        page = await ProjectService.list_projects(
            db_session, ListProjectsRequest(limit=2, offset=4)
        )

        assert [p.name for p in page.projects] == ["project 0"]
        assert page.total == 5

    @pytest.mark.asyncio
    async def test_offset_past_end(self, db_session, sample_image):
        await seed_projects(db_session, sample_image, [True, True])

        page = await ProjectService.list_projects(
            db_session, ListProjectsRequest(offset=10)
        )

        assert page.projects == []
        assert page.total == 2


class TestUpdateProject:
    """Partial project updates"""

    @pytest.mark.asyncio
    async def test_only_supplied_fields_change(self, db_session, sample_image):
        project = await ProjectService.create_project(
            db_session,
            CreateProjectRequest(
                name="Draft", description="First pass", original_image_id=sample_image.id
            ),
        )
        history = json.dumps([{"operation_id": 1, "type": "style_transfer"}])

        updated = await ProjectService.update_project(
            db_session,
            UpdateProjectRequest(
                id=project.id,
                current_image_path="/results/1.png",
                operations_history=history,
            ),
        )

        assert updated.current_image_path == "/results/1.png"
        assert json.loads(updated.operations_history) == json.loads(history)
        assert updated.name == "Draft"
        assert updated.description == "First pass"
        assert updated.is_public is False
        assert updated.created_at == project.created_at
        assert updated.updated_at > project.updated_at

    @pytest.mark.asyncio
    async def test_id_only_bumps_updated_at(self, db_session, sample_image):
        project = await ProjectService.create_project(
            db_session,
            CreateProjectRequest(name="Draft", original_image_id=sample_image.id),
        )

        updated = await ProjectService.update_project(
            db_session, UpdateProjectRequest(id=project.id)
        )

        assert updated.updated_at > project.updated_at
        assert updated.model_dump(exclude={"updated_at"}) == project.model_dump(exclude={"updated_at"})

    @pytest.mark.asyncio
    async def test_successive_updates_keep_moving_forward(self, db_session, sample_image):
        project = await ProjectService.create_project(
            db_session,
            CreateProjectRequest(name="Draft", original_image_id=sample_image.id),
        )

        first = await ProjectService.update_project(
            db_session, UpdateProjectRequest(id=project.id, name="v1")
        )
        await asyncio.sleep(0)
        second = await ProjectService.update_project(
            db_session, UpdateProjectRequest(id=project.id, name="v2")
        )

        assert project.updated_at < first.updated_at < second.updated_at
        assert second.name == "v2"

    @pytest.mark.asyncio
    async def test_explicit_null_clears_description(self, db_session, sample_image):
        project = await ProjectService.create_project(
            db_session,
            CreateProjectRequest(
                name="Draft", description="First pass", original_image_id=sample_image.id
            ),
        )

        updated = await ProjectService.update_project(
            db_session, UpdateProjectRequest(id=project.id, description=None)
        )

        assert updated.description is None
        assert updated.name == "Draft"

    @pytest.mark.asyncio
    async def test_visibility_toggle(self, db_session, sample_image):
        project = await ProjectService.create_project(
            db_session,
            CreateProjectRequest(name="Draft", original_image_id=sample_image.id),
        )

        await ProjectService.update_project(
            db_session, UpdateProjectRequest(id=project.id, is_public=True)
        )
        page = await ProjectService.list_projects(
            db_session, ListProjectsRequest(public_only=True)
        )

        assert [p.id for p in page.projects] == [project.id]

    @pytest.mark.asyncio
    async def test_missing_project_returns_none(self, db_session):
        result = await ProjectService.update_project(
            db_session, UpdateProjectRequest(id=999999, name="Nothing")
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_deleting_image_cascades_to_projects(self, db_session, sample_image):
        project = await ProjectService.create_project(
            db_session,
            CreateProjectRequest(name="Draft", original_image_id=sample_image.id),
        )

        await db_session.delete(sample_image)
        await db_session.commit()
        db_session.expunge_all()

        assert await ProjectService.get_project(db_session, project.id) is None
