"""Database models package"""

from survey_schedule.models.base import BaseModel
from survey_schedule.models.project import Project, ProjectStatus
from survey_schedule.models.equipment import Equipment
from survey_schedule.models.status import Status
from survey_schedule.models.user import User

# Export all models
__all__ = [
    "BaseModel",
    "Project",
    "ProjectStatus",
    "Equipment",
    "Status",
    "User",
]
