import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from photoedit.backend.app import create_app
from photoedit.backend.config import Settings
from photoedit.backend.database import create_engine, create_session_factory, create_db_and_tables
from photoedit.backend.model import Image


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway instance directory and database"""
    return Settings(
        instance_path=tmp_path,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
    )


@pytest_asyncio.fixture
async def engine(settings):
    engine = create_engine(settings.resolved_database_url)
    await create_db_and_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Session for calling services directly"""
    session_factory = create_session_factory(engine)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def app(settings):
    app = create_app(settings, configure_logging=False)
    # ASGITransport does not run the lifespan, create tables here
    await create_db_and_tables(app.state.engine)
    yield app
    await app.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    """HTTP client talking to the app in-process"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def image_data():
    return {
        "filename": "a1b2c3.png",
        "original_filename": "beach.png",
        "file_path": "/uploads/a1b2c3.png",
        "file_size": 204800,
        "mime_type": "image/png",
        "width": 1920,
        "height": 1080,
    }


@pytest_asyncio.fixture
async def sample_image(db_session, image_data):
    """An image row stored directly in the database"""
    image = Image(**image_data)
    db_session.add(image)
    await db_session.commit()
    await db_session.refresh(image)
    return image
