"""Project procedures"""

import logging
from typing import Optional

from fastapi import APIRouter

from ..schema.response import SuccessResponse
from ..schema.project import (
    CreateProjectRequest,
    GetProjectRequest,
    ListProjectsRequest,
    UpdateProjectRequest,
    ProjectOut,
    ProjectListOut,
)
from ..service import ProjectService
from ..dep import SessionDep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Projects"])


@router.post("/createProject", response_model=SuccessResponse[ProjectOut])
async def create_project(request: CreateProjectRequest, session: SessionDep):
    """Create a project from an existing image

    Raises:
        NotFoundError: original_image_id does not reference an image
    """
    project = await ProjectService.create_project(session, request)
    return SuccessResponse(data=project)


@router.post("/getProject", response_model=SuccessResponse[Optional[ProjectOut]])
async def get_project(request: GetProjectRequest, session: SessionDep):
    """Get a project by id (data is null when absent)"""
    project = await ProjectService.get_project(session, request.id)
    return SuccessResponse(data=project)


@router.post("/listProjects", response_model=SuccessResponse[ProjectListOut])
async def list_projects(session: SessionDep, request: Optional[ListProjectsRequest] = None):
    """List one page of projects with the total matching count

    An empty body uses the defaults (limit=20, offset=0, public_only=false).
    """
    project_list = await ProjectService.list_projects(session, request or ListProjectsRequest())
    return SuccessResponse(data=project_list)


@router.post("/updateProject", response_model=SuccessResponse[Optional[ProjectOut]])
async def update_project(request: UpdateProjectRequest, session: SessionDep):
    """Partially update a project (data is null when the id is unknown)"""
    project = await ProjectService.update_project(session, request)
    return SuccessResponse(data=project)
