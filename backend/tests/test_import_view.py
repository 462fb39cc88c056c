"""Tests for the import dialog"""

import asyncio

import httpx
import pytest

from survey_schedule.client import ProjectApiClient, QueryCache
from survey_schedule.client.query_cache import PROJECTS_KEY
from survey_schedule.views.importer import SAMPLE_IMPORT_RECORDS, ImportView


class BlockingClient:
    """Import client that waits until released"""

    def __init__(self):
        self.release = asyncio.Event()

    async def import_projects(self, records):
        await self.release.wait()
        return {"message": f"{len(records)}件のプロジェクトをインポートしました", "count": len(records)}


@pytest.mark.asyncio
class TestImportView:
    """Test ImportView.run"""

    async def test_sample_import(self, api_client: ProjectApiClient):
        cache = QueryCache()
        await cache.fetch(PROJECTS_KEY, api_client.get_all)
        view = ImportView(api_client, cache)

        result = await view.run()

        assert result.count == len(SAMPLE_IMPORT_RECORDS)
        assert result.message == "1件のプロジェクトをインポートしました"
        assert not cache.is_cached(PROJECTS_KEY)
        assert view.is_processing is False

        projects = await api_client.get_all()
        assert projects[0].company_name == "テスト会社1"
        assert projects[0].equipment == ["FARO"]

    async def test_custom_records(self, api_client: ProjectApiClient):
        view = ImportView(api_client, QueryCache())

        result = await view.run([{"会社名": "A", "現場名": "B"}, {"会社名": "C"}])

        assert result.count == 1

    async def test_rejected_batch_resets_processing(self, async_client: httpx.AsyncClient):
        """Test that a server error still clears the processing flag"""

        class InvalidPayloadClient(ProjectApiClient):
            async def import_projects(self, records):
                response = await self._request("POST", "/api/projects/import", json={})
                return response.json()

        cache = QueryCache()
        view = ImportView(InvalidPayloadClient(client=async_client), cache)

        with pytest.raises(httpx.HTTPStatusError):
            await view.run()

        assert view.is_processing is False

    async def test_one_import_at_a_time(self):
        client = BlockingClient()
        view = ImportView(client, QueryCache())

        first = asyncio.ensure_future(view.run())
        await asyncio.sleep(0)
        assert view.is_processing is True

        with pytest.raises(RuntimeError):
            await view.run()

        client.release.set()
        assert (await first).count == 1
        assert view.is_processing is False
