"""Pytest configuration and shared fixtures"""

import os

# Keep the application's own engines off the developer database
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("STORAGE_BACKEND", "database")

from datetime import date, datetime
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from survey_schedule.main import app
from survey_schedule.database import Base, get_db
from survey_schedule.client.api_client import ProjectApiClient
from survey_schedule.client.models import Project as ClientProject
from survey_schedule.models import Project
from survey_schedule.services.memory_project_repository import InMemoryProjectRepository


# A single shared connection keeps the in-memory database alive for the test
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def client():
    """FastAPI test client fixture"""
    return TestClient(app)


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create a test database engine"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for testing"""
    async_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def async_client(db_session: AsyncSession):
    """Async test client backed by the test database"""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def memory_async_client(db_session: AsyncSession):
    """Async test client with projects held by the in-memory repository"""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.state.project_store = InMemoryProjectRepository()

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    del app.state.project_store
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def api_client(async_client: AsyncClient) -> ProjectApiClient:
    """Project API client talking to the app in-process"""
    return ProjectApiClient(client=async_client)


@pytest_asyncio.fixture
async def sample_project(db_session: AsyncSession) -> Project:
    """Create a sample project for testing"""
    project = Project(
        status="完了",
        company_name="タクマ",
        site_name="新江東",
        equipment='["FARO"]',
        photographer="山根・伊藤",
        shoot_period="1/20-1/22",
        start_date=date(2025, 1, 20),
        end_date=date(2025, 1, 22),
        site_address="東京都江東区夢の島３丁目１",
        created_by="管理者",
        updated_by="山根",
    )
    db_session.add(project)
    await db_session.commit()
    await db_session.refresh(project)
    return project


@pytest.fixture
def sample_payload():
    """Create request body for a new project"""
    return {
        "status": "日程決",
        "companyName": "新日本空調",
        "siteName": "梅田ダイビル",
        "equipment": '["L2pro"]',
        "photographer": "伊藤・本井",
        "startDate": "2025-03-10",
        "endDate": "2025-03-12",
        "siteAddress": "大阪府大阪市北区梅田",
        "createdBy": "伊藤",
    }


@pytest.fixture
def make_project():
    """Factory for client-side projects used by the view tests"""
    counter = {"id": 0}

    def _make(**overrides) -> ClientProject:
        counter["id"] += 1
        values = {
            "id": counter["id"],
            "status": "未見積",
            "company_name": f"会社{counter['id']}",
            "site_name": f"現場{counter['id']}",
            "equipment": [],
            "created_at": datetime(2025, 1, 1, 9, 0),
            "updated_at": datetime(2025, 1, 1, 9, 0),
            "created_by": "管理者",
            "updated_by": "管理者",
        }
        values.update(overrides)
        return ClientProject(**values)

    return _make


class StubProjectClient:
    """Stands in for ProjectApiClient in view tests; counts fetches"""

    def __init__(self, projects=None):
        self.projects = list(projects or [])
        self.fetch_count = 0

    async def get_all(self):
        self.fetch_count += 1
        return list(self.projects)


@pytest.fixture
def stub_client_factory():
    return StubProjectClient
