"""Services package"""

from .project_repository import (
    ProjectNotFoundError,
    ProjectRepository,
    SQLAlchemyProjectRepository,
)
from .memory_project_repository import InMemoryProjectRepository
from .project_import_service import ProjectImportService
from .master_data_service import MasterDataService

__all__ = [
    "ProjectNotFoundError",
    "ProjectRepository",
    "SQLAlchemyProjectRepository",
    "InMemoryProjectRepository",
    "ProjectImportService",
    "MasterDataService",
]
