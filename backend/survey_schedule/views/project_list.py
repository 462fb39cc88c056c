"""Project list tab: table rows plus create/edit/delete actions"""

import logging
from typing import Callable, List, Optional
from pydantic import BaseModel

from survey_schedule.client.api_client import ProjectApiClient
from survey_schedule.client.models import Project
from survey_schedule.client.query_cache import PROJECTS_KEY, QueryCache
from survey_schedule.models.project import ProjectStatus
from survey_schedule.views.project_form import ProjectFormData

logger = logging.getLogger(__name__)

DELETE_CONFIRMATION = "このプロジェクトを削除しますか？"


class ProjectRow(BaseModel):
    """One table row"""

    id: int
    status: ProjectStatus
    company_name: str
    site_name: str
    equipment: str
    photographer: str
    shoot_period: str

    @classmethod
    def from_project(cls, project: Project) -> "ProjectRow":
        return cls(
            id=project.id,
            status=project.status,
            company_name=project.company_name,
            site_name=project.site_name,
            equipment=", ".join(project.equipment),
            photographer=project.photographer or "",
            shoot_period=project.shoot_period or "",
        )


class ProjectListView:
    """
    List view over the shared project cache.

    The form overlay is either closed, open for a new project, or open for
    the selected project. Every successful write invalidates the cached
    project collection so the calendar and analytics tabs refetch too.
    """

    def __init__(self, client: ProjectApiClient, cache: QueryCache):
        self.client = client
        self.cache = cache
        self.is_form_open = False
        self.selected_project: Optional[Project] = None
        self.form: Optional[ProjectFormData] = None

    async def projects(self) -> List[Project]:
        return await self.cache.fetch(PROJECTS_KEY, self.client.get_all)

    async def rows(self) -> List[ProjectRow]:
        return [ProjectRow.from_project(p) for p in await self.projects()]

    async def is_empty(self) -> bool:
        return not await self.projects()

    def open_form(self, project: Optional[Project] = None) -> ProjectFormData:
        """Open the form empty for a new project, or prefilled to edit one"""
        self.selected_project = project
        self.form = ProjectFormData.from_project(project) if project else ProjectFormData()
        self.is_form_open = True
        return self.form

    def cancel(self) -> None:
        self.is_form_open = False
        self.selected_project = None
        self.form = None

    async def save(self, form: Optional[ProjectFormData] = None) -> Project:
        """
        Submit the form: create when nothing is selected, otherwise replace
        the selected project. The form stays open if the request fails.
        """
        form = form or self.form
        if form is None:
            raise ValueError("No form data to save")

        if self.selected_project is not None:
            saved = await self.client.update(self.selected_project.id, form.to_input())
        else:
            saved = await self.client.create(form.to_input())

        self.cache.invalidate(PROJECTS_KEY)
        self.cancel()
        return saved

    async def delete(self, project_id: int, confirm: Callable[[str], bool]) -> bool:
        """
        Delete after a blocking confirmation.

        Returns:
            False if the user declined, True once the project is deleted
        """
        if not confirm(DELETE_CONFIRMATION):
            return False

        await self.client.delete(project_id)
        self.cache.invalidate(PROJECTS_KEY)
        logger.info(f"Deleted project {project_id}")
        return True
