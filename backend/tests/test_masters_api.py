"""Tests for master data API endpoints"""

import pytest
from httpx import AsyncClient
from fastapi import status
from sqlalchemy.ext.asyncio import AsyncSession

from survey_schedule.models import Equipment, Status
from survey_schedule.services.seed_service import seed_database


@pytest.mark.asyncio
class TestMasterEndpoints:
    """Test GET /api/masters/* endpoints"""

    async def test_equipment_list(self, async_client: AsyncClient, db_session: AsyncSession):
        """Test equipment names in insertion order"""
        await seed_database(db_session, include_samples=False)

        response = await async_client.get("/api/masters/equipment")

        assert response.status_code == status.HTTP_200_OK
        names = [row["name"] for row in response.json()]
        assert names == ["FARO", "Pro2", "Pro3", "RTC", "BLK", "L2pro"]

    async def test_statuses_in_display_order(
        self, async_client: AsyncClient, db_session: AsyncSession
    ):
        """Test statuses sorted by sortOrder regardless of insertion order"""
        db_session.add_all([
            Status(name="完了", sort_order=4),
            Status(name="未見積", sort_order=1),
            Status(name="日程決", sort_order=3),
        ])
        await db_session.commit()

        response = await async_client.get("/api/masters/statuses")

        data = response.json()
        assert [row["name"] for row in data] == ["未見積", "日程決", "完了"]
        assert data[0]["sortOrder"] == 1

    async def test_users_list(self, async_client: AsyncClient, db_session: AsyncSession):
        """Test the seeded staff names"""
        await seed_database(db_session, include_samples=False)

        response = await async_client.get("/api/masters/users")

        names = [row["name"] for row in response.json()]
        assert names[0] == "管理者"
        assert "伊藤" in names

    async def test_empty_masters(self, async_client: AsyncClient):
        """Test that unseeded tables return empty lists"""
        for path in ("equipment", "statuses", "users"):
            response = await async_client.get(f"/api/masters/{path}")
            assert response.status_code == status.HTTP_200_OK
            assert response.json() == []

    async def test_masters_served_in_memory_mode(
        self, memory_async_client: AsyncClient, db_session: AsyncSession
    ):
        """Test that master lists still come from the database"""
        db_session.add(Equipment(name="FARO"))
        await db_session.commit()

        response = await memory_async_client.get("/api/masters/equipment")

        assert [row["name"] for row in response.json()] == ["FARO"]
