"""API schemas package"""

from .project import (
    ProjectCreate,
    ProjectUpdate,
    ProjectPatch,
    ProjectResponse,
)
from .import_record import ImportRecord, ImportResponse
from .master import EquipmentResponse, StatusResponse, UserResponse

__all__ = [
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectPatch",
    "ProjectResponse",
    "ImportRecord",
    "ImportResponse",
    "EquipmentResponse",
    "StatusResponse",
    "UserResponse",
]
