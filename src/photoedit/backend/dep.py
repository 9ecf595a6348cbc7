"""Dependency injection functions for FastAPI routes"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Request, Depends
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get async database session from app state

    This dependency provides a database session to route handlers.
    The session is committed on success, rolled back on exception and
    closed after the request completes.

    Args:
        request: FastAPI request object (injected automatically)

    Yields:
        AsyncSession: Database session for this request
    """
    async_session_factory = request.app.state.async_session_factory

    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


SessionDep = Annotated[AsyncSession, Depends(get_db_session)]
