"""Project persistence: repository contract and its SQLAlchemy implementation"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from survey_schedule.models.project import Project
from survey_schedule.schemas.project import ProjectCreate, ProjectPatch, ProjectUpdate

logger = logging.getLogger(__name__)


class ProjectNotFoundError(Exception):
    """Raised when a project id does not exist"""

    def __init__(self, project_id: int):
        self.project_id = project_id
        super().__init__(f"Project with id {project_id} not found")


def _editable_values(data) -> Dict[str, Any]:
    return {
        "status": data.status.value,
        "company_name": data.company_name,
        "site_name": data.site_name,
        "equipment": data.equipment,
        "client_contact": data.client_contact,
        "photographer": data.photographer,
        "shoot_period": data.shoot_period,
        "start_date": data.start_date,
        "end_date": data.end_date,
        "drawing_model": data.drawing_model,
        "remarks": data.remarks,
        "site_address": data.site_address,
    }


def create_values(data: ProjectCreate) -> Dict[str, Any]:
    """Column values for a new project; updated_by falls back to created_by"""
    values = _editable_values(data)
    values["created_by"] = data.created_by
    values["updated_by"] = data.updated_by or data.created_by
    return values


def replace_values(data: ProjectUpdate) -> Dict[str, Any]:
    """Column values written by a full replace; creation attribution is kept"""
    values = _editable_values(data)
    values["updated_by"] = data.updated_by
    return values


def patch_values(data: ProjectPatch) -> Dict[str, Any]:
    """Column values for the fields present in a partial update"""
    values = data.model_dump(exclude_unset=True)
    if "status" in values:
        values["status"] = data.status.value
    return values


class ProjectRepository(ABC):
    """
    Storage contract for projects.

    Implementations return Project model instances and raise
    ProjectNotFoundError for unknown ids, so routes work unchanged
    against any backend.
    """

    @abstractmethod
    async def list_projects(self) -> List[Project]:
        """All projects, most recently updated first"""

    @abstractmethod
    async def get_project(self, project_id: int) -> Project:
        """Single project by id"""

    @abstractmethod
    async def create_project(self, data: ProjectCreate) -> Project:
        """Insert a project and return it with id and timestamps set"""

    @abstractmethod
    async def replace_project(self, project_id: int, data: ProjectUpdate) -> Project:
        """Overwrite every editable field of a project"""

    @abstractmethod
    async def patch_project(self, project_id: int, data: ProjectPatch) -> Project:
        """Overwrite only the supplied fields of a project"""

    @abstractmethod
    async def delete_project(self, project_id: int) -> None:
        """Remove a project"""


class SQLAlchemyProjectRepository(ProjectRepository):
    """Project repository backed by an async SQLAlchemy session"""

    def __init__(self, db: AsyncSession):
        """Initialize with database session"""
        self.db = db

    async def list_projects(self) -> List[Project]:
        result = await self.db.execute(
            select(Project).order_by(Project.updated_at.desc(), Project.id.desc())
        )
        return list(result.scalars().all())

    async def get_project(self, project_id: int) -> Project:
        project = await self.db.get(Project, project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    async def create_project(self, data: ProjectCreate) -> Project:
        project = Project(**create_values(data))
        self.db.add(project)
        await self._commit()
        await self.db.refresh(project)

        logger.info(f"Created project {project.id} ({project.company_name} / {project.site_name})")
        return project

    async def replace_project(self, project_id: int, data: ProjectUpdate) -> Project:
        return await self._apply(project_id, replace_values(data))

    async def patch_project(self, project_id: int, data: ProjectPatch) -> Project:
        return await self._apply(project_id, patch_values(data))

    async def delete_project(self, project_id: int) -> None:
        project = await self.get_project(project_id)
        await self.db.delete(project)
        await self._commit()

        logger.info(f"Deleted project {project_id}")

    async def _apply(self, project_id: int, values: Dict[str, Any]) -> Project:
        project = await self.get_project(project_id)

        for field, value in values.items():
            setattr(project, field, value)

        # Update timestamp
        project.updated_at = datetime.utcnow()

        await self._commit()
        await self.db.refresh(project)

        logger.info(f"Updated project {project_id} fields: {sorted(values)}")
        return project

    async def _commit(self) -> None:
        # Each statement is its own unit of work; a failure must not poison the session
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise
