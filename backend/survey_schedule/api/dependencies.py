"""API dependencies for storage access"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from survey_schedule.config import settings
from survey_schedule.database import get_db
from survey_schedule.services.master_data_service import MasterDataService
from survey_schedule.services.project_import_service import ProjectImportService
from survey_schedule.services.project_repository import (
    ProjectRepository,
    SQLAlchemyProjectRepository,
)


def get_project_repository(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> ProjectRepository:
    """
    Resolve the project repository for this request.

    Uses the application's in-memory store when one is installed on
    app.state, otherwise a repository over the request's database session.
    """
    store = getattr(request.app.state, "project_store", None)
    if store is not None:
        return store
    return SQLAlchemyProjectRepository(db)


def get_import_service(
    repository: ProjectRepository = Depends(get_project_repository),
) -> ProjectImportService:
    return ProjectImportService(repository, imported_by=settings.import_user)


def get_master_data_service(db: AsyncSession = Depends(get_db)) -> MasterDataService:
    return MasterDataService(db)
