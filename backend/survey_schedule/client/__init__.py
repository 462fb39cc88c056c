"""Client data-access layer"""

from .api_client import ProjectApiClient
from .models import Project, ProjectInput
from .query_cache import PROJECTS_KEY, QueryCache

__all__ = ["ProjectApiClient", "Project", "ProjectInput", "QueryCache", "PROJECTS_KEY"]
