"""Tests for the project list view"""

from datetime import date

import httpx
import pytest

from survey_schedule.client import ProjectApiClient, ProjectInput, QueryCache
from survey_schedule.client.query_cache import PROJECTS_KEY
from survey_schedule.models.project import ProjectStatus
from survey_schedule.views.project_form import ProjectFormData
from survey_schedule.views.project_list import DELETE_CONFIRMATION, ProjectListView, ProjectRow


class TestProjectFormData:
    """Test the form state"""

    def test_new_form_defaults(self):
        form = ProjectFormData()

        assert form.status is ProjectStatus.NOT_QUOTED
        assert form.equipment == []
        assert form.start_date == ""
        assert form.created_by == "管理者"

    def test_prefill_from_project(self, make_project):
        project = make_project(
            equipment=["FARO"], start_date=date(2025, 1, 20), photographer=None, created_by="伊藤"
        )

        form = ProjectFormData.from_project(project, editor="本井")

        assert form.equipment == ["FARO"]
        assert form.start_date == "2025-01-20"
        assert form.end_date == ""
        assert form.photographer == ""
        assert form.created_by == "伊藤"
        assert form.updated_by == "本井"

    def test_toggle_equipment(self):
        form = ProjectFormData(equipment=["FARO"])

        form.toggle_equipment("RTC", True)
        assert form.equipment == ["FARO", "RTC"]

        form.toggle_equipment("FARO", False)
        assert form.equipment == ["RTC"]

    def test_to_input_parses_dates(self):
        form = ProjectFormData(company_name="A", site_name="B", start_date="2025-02-03", end_date="")

        data = form.to_input()

        assert data.start_date == date(2025, 2, 3)
        assert data.end_date is None


class TestProjectRow:
    """Test table row rendering"""

    def test_equipment_is_joined(self, make_project):
        row = ProjectRow.from_project(make_project(equipment=["FARO", "Pro3"], shoot_period=None))

        assert row.equipment == "FARO, Pro3"
        assert row.shoot_period == ""


@pytest.mark.asyncio
class TestProjectListReads:
    """Test reads through the shared cache"""

    async def test_rows(self, make_project, stub_client_factory):
        client = stub_client_factory([make_project(), make_project()])
        view = ProjectListView(client, QueryCache())

        rows = await view.rows()

        assert [row.company_name for row in rows] == ["会社1", "会社2"]

    async def test_empty(self, stub_client_factory):
        view = ProjectListView(stub_client_factory([]), QueryCache())

        assert await view.is_empty()

    async def test_reads_are_cached(self, make_project, stub_client_factory):
        client = stub_client_factory([make_project()])
        view = ProjectListView(client, QueryCache())

        await view.rows()
        await view.projects()

        assert client.fetch_count == 1


@pytest.mark.asyncio
class TestProjectListWrites:
    """Test create, edit and delete against the API"""

    async def test_create_closes_form_and_refreshes(self, api_client: ProjectApiClient):
        cache = QueryCache()
        view = ProjectListView(api_client, cache)
        assert await view.is_empty()

        form = view.open_form()
        form.company_name = "タクマ"
        form.site_name = "新江東"
        form.toggle_equipment("FARO", True)

        saved = await view.save()

        assert saved.equipment == ["FARO"]
        assert view.is_form_open is False
        assert view.form is None
        assert [p.id for p in await view.projects()] == [saved.id]

    async def test_edit_replaces_selected_project(self, api_client: ProjectApiClient):
        view = ProjectListView(api_client, QueryCache())
        created = await api_client.create(
            ProjectInput(company_name="タクマ", site_name="新江東", equipment=["FARO"])
        )

        form = view.open_form(created)
        assert view.selected_project == created
        form.status = ProjectStatus.COMPLETED
        form.toggle_equipment("FARO", False)

        saved = await view.save()

        assert saved.id == created.id
        assert saved.status is ProjectStatus.COMPLETED
        assert saved.equipment == []
        assert view.selected_project is None

    async def test_failed_save_keeps_form_open(self, api_client: ProjectApiClient):
        view = ProjectListView(api_client, QueryCache())
        view.open_form()

        with pytest.raises(httpx.HTTPStatusError):
            await view.save()

        assert view.is_form_open is True

    async def test_save_without_form(self, api_client: ProjectApiClient):
        view = ProjectListView(api_client, QueryCache())

        with pytest.raises(ValueError):
            await view.save()

    async def test_cancel(self, api_client: ProjectApiClient):
        view = ProjectListView(api_client, QueryCache())
        view.open_form()

        view.cancel()

        assert view.is_form_open is False

    async def test_delete_confirmed(self, api_client: ProjectApiClient):
        cache = QueryCache()
        view = ProjectListView(api_client, cache)
        created = await api_client.create(ProjectInput(company_name="A", site_name="B"))
        await view.projects()
        prompts = []

        def confirm(message):
            prompts.append(message)
            return True

        assert await view.delete(created.id, confirm) is True
        assert prompts == [DELETE_CONFIRMATION]
        assert not cache.is_cached(PROJECTS_KEY)
        assert await view.is_empty()

    async def test_delete_declined(self, api_client: ProjectApiClient):
        cache = QueryCache()
        view = ProjectListView(api_client, cache)
        created = await api_client.create(ProjectInput(company_name="A", site_name="B"))
        await view.projects()

        assert await view.delete(created.id, lambda message: False) is False
        assert cache.is_cached(PROJECTS_KEY)
        assert len(await api_client.get_all()) == 1
