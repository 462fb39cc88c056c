"""Non-persistent project repository for local runs and tests"""

import logging
from datetime import datetime, timedelta
from typing import Dict, List

from survey_schedule.models.project import Project
from survey_schedule.schemas.project import ProjectCreate, ProjectPatch, ProjectUpdate
from survey_schedule.services.project_repository import (
    ProjectNotFoundError,
    ProjectRepository,
    create_values,
    patch_values,
    replace_values,
)

logger = logging.getLogger(__name__)


class InMemoryProjectRepository(ProjectRepository):
    """
    Keeps projects in a dict for the lifetime of the process.

    Rows are transient Project instances so responses are built exactly as
    for the database-backed repository.
    """

    def __init__(self):
        self._projects: Dict[int, Project] = {}
        self._next_id = 1
        self._last_timestamp = datetime.min

    async def list_projects(self) -> List[Project]:
        return sorted(
            self._projects.values(),
            key=lambda p: (p.updated_at, p.id),
            reverse=True,
        )

    async def get_project(self, project_id: int) -> Project:
        project = self._projects.get(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    async def create_project(self, data: ProjectCreate) -> Project:
        now = self._now()
        project = Project(
            id=self._next_id,
            created_at=now,
            updated_at=now,
            **create_values(data),
        )
        self._projects[project.id] = project
        self._next_id += 1

        logger.info(f"Created project {project.id} in memory")
        return project

    async def replace_project(self, project_id: int, data: ProjectUpdate) -> Project:
        return self._apply(await self.get_project(project_id), replace_values(data))

    async def patch_project(self, project_id: int, data: ProjectPatch) -> Project:
        return self._apply(await self.get_project(project_id), patch_values(data))

    async def delete_project(self, project_id: int) -> None:
        await self.get_project(project_id)
        del self._projects[project_id]

    def _apply(self, project: Project, values: dict) -> Project:
        for field, value in values.items():
            setattr(project, field, value)
        project.updated_at = self._now()
        return project

    def _now(self) -> datetime:
        # Strictly increasing, so updated_at ordering never ties
        now = datetime.utcnow()
        if now <= self._last_timestamp:
            now = self._last_timestamp + timedelta(microseconds=1)
        self._last_timestamp = now
        return now
