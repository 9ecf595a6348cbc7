"""
API package: RPC procedures and system endpoints.

Every procedure is served as POST /api/rpc/<procedureName> with a JSON
body validated by the procedure's input schema.
"""

from fastapi import APIRouter

from .image import router as image_router
from .operation import router as operation_router
from .project import router as project_router
from .system import router as system_router

rpc_router = APIRouter(prefix="/rpc")
rpc_router.include_router(image_router)
rpc_router.include_router(operation_router)
rpc_router.include_router(project_router)

__all__ = [
    "rpc_router",
    "image_router",
    "operation_router",
    "project_router",
    "system_router",
]
